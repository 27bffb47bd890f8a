# utils/chart_utils.py

from io import BytesIO
from matplotlib.figure import Figure

from services.metrics_service import activity_ratio, get_dev_comm_data

CHART_KINDS = ("dev", "comm")


def chart_title(currency, kind, dev_table=None):
    if kind == "dev":
        ratio = activity_ratio(dev_table or [])
        ratio_str = f"{ratio:.2f}" if ratio is not None else "n/a"
        return f"Developer metrics for {currency}, activity ratio = {ratio_str}"
    return f"Community metrics for {currency}"


def plot_metrics(table, title, label):
    """Render a metric table as a PNG bar chart and return it as a BytesIO."""
    metrics = [row["metric"] for row in table]
    values = [row["value"] for row in table]

    # Plain Figure, no pyplot state shared between threads
    fig = Figure(figsize=(6.5, 5), dpi=100)
    ax = fig.subplots()
    ax.bar(metrics, values, label=label)
    ax.set_title(title)
    ax.set_ylabel("Value")
    ax.tick_params(axis="x", labelrotation=-22.5)
    for tick in ax.get_xticklabels():
        tick.set_horizontalalignment("left")
    ax.grid(True, axis="both", alpha=0.3)
    if table:
        ax.legend()
    fig.tight_layout()

    bio = BytesIO()
    fig.savefig(bio, format="png")
    bio.seek(0)

    return bio


def build_chart(currency, kind, dev_table, comm_table):
    if kind == "dev":
        return plot_metrics(dev_table, chart_title(currency, "dev", dev_table), "Developer data")
    return plot_metrics(comm_table, chart_title(currency, "comm"), "Community data")


def build_charts(currency, coin_list):
    """Fetch metrics for a currency and return {"dev": png, "comm": png}."""
    dev_table, comm_table = get_dev_comm_data(currency.lower(), coin_list)
    return {
        kind: build_chart(currency.upper(), kind, dev_table, comm_table)
        for kind in CHART_KINDS
    }
