"""
e2e tests for the hello service, run against a live instance at API_BASE_URL.
"""

import os

import pytest
import requests


@pytest.fixture
def api_url():
    """Get API URL from environment."""
    return os.environ.get("API_BASE_URL", "http://localhost:8000")


def test_hello(api_url):
    """Service greets in plain text."""
    response = requests.get(api_url, headers={"Accept": "text/plain"}, timeout=1)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "Hello" in response.text


def test_health(api_url):
    response = requests.get(f"{api_url}/health", timeout=1)
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
