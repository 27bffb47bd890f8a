from flask import Flask, abort, render_template_string, request, send_file
from config import CURRENCIES, DEFAULT_CURRENCY
from services.coin_list_service import load_coin_list
from services.metrics_service import get_dev_comm_data
from utils.chart_utils import CHART_KINDS, build_chart

dashboard_app = Flask(__name__)

PAGE = """
<html>
<body>
<h2>Developer and Community Metrics for Blockchain Projects</h2>
<form action="/">
  <label for="currency"><b>Select currency</b></label>
  <select name="currency" id="currency" onchange="this.form.submit()">
  {% for c in currencies %}
    <option value="{{ c }}" {% if c == currency %}selected{% endif %}>{{ c }}</option>
  {% endfor %}
  </select>
  <button type="submit">Show</button>
</form>
<br>
{% for kind in kinds %}
  <img src="/chart/{{ currency }}/{{ kind }}.png" alt="{{ kind }} metrics for {{ currency }}" width="650" height="500" />
  <br>
{% endfor %}
</body>
</html>
"""


@dashboard_app.route('/')
def dashboard():
    currency = request.args.get('currency', DEFAULT_CURRENCY).upper()
    if currency not in CURRENCIES:
        currency = DEFAULT_CURRENCY
    return render_template_string(PAGE, currencies=CURRENCIES, currency=currency, kinds=CHART_KINDS)


@dashboard_app.route('/chart/<currency>/<kind>.png')
def chart(currency, kind):
    if kind not in CHART_KINDS:
        abort(404)

    coin_list = load_coin_list()
    dev_table, comm_table = get_dev_comm_data(currency.lower(), coin_list)
    bio = build_chart(currency.upper(), kind, dev_table, comm_table)
    return send_file(bio, mimetype="image/png")
