"""
Shared fixtures for the test suite: sample CoinGecko payloads and a
temporary data directory for the coin list cache.
"""
from datetime import date

import pytest


@pytest.fixture
def today():
    return date(2024, 3, 15)


@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def coin_list():
    return [
        {"id": "bitcoin", "symbol": "btc", "name": "Bitcoin"},
        {"id": "ethereum", "symbol": "eth", "name": "Ethereum"},
        {"id": "ethereum-wormhole", "symbol": "eth", "name": "Ethereum (Wormhole)"},
        {"id": "solana", "symbol": "sol", "name": "Solana"},
    ]


@pytest.fixture
def coin_detail():
    return {
        "id": "bitcoin",
        "symbol": "btc",
        "name": "Bitcoin",
        "developer_data": {
            "forks": 36426,
            "stars": 73168,
            "subscribers": 3967,
            "total_issues": 7743,
            "closed_issues": 7380,
            "pull_requests_merged": 11215,
            "pull_request_contributors": 846,
            "code_additions_deletions_4_weeks": {"additions": 1570, "deletions": -1948},
            "commit_count_4_weeks": 108,
            "last_4_weeks_commit_activity_series": [],
        },
        "community_data": {
            "facebook_likes": None,
            "twitter_followers": 6311826,
            "reddit_average_posts_48h": 0.0,
            "reddit_average_comments_48h": 0.0,
            "reddit_subscribers": 0,
            "reddit_accounts_active_48h": 0,
            "telegram_channel_user_count": None,
        },
    }
