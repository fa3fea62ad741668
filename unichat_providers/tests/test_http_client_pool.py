"""Unit tests for the shared httpx client pool.

Covers:
- Same key (base_url, purpose) returns the same instance.
- Different purpose or base_url yields different instances.
- Closed clients are replaced on the next lookup.
"""
from __future__ import annotations

from unichat_providers.base.http import close_all_clients, get_httpx_client, request_timeout


def setup_function(_):
    close_all_clients()


def teardown_function(_):
    close_all_clients()


def test_same_key_returns_same_instance():
    c1 = get_httpx_client("https://api.example.com", purpose="claude.chat")
    c2 = get_httpx_client("https://api.example.com", purpose="claude.chat")
    assert c1 is c2


def test_different_purpose_or_base_url_returns_different_instances():
    c1 = get_httpx_client("https://api.example.com", purpose="claude.chat")
    assert get_httpx_client("https://api.example.com", purpose="claude.stream") is not c1
    assert get_httpx_client("https://api.other.com", purpose="claude.chat") is not c1


def test_closed_client_is_replaced():
    c1 = get_httpx_client("https://api.example.com", purpose="chat")
    close_all_clients()
    assert c1.is_closed
    c2 = get_httpx_client("https://api.example.com", purpose="chat")
    assert c2 is not c1
    assert not c2.is_closed


def test_request_timeout_uses_read_seconds():
    timeout = request_timeout(42.0)
    assert timeout.read == 42.0
    assert timeout.connect is not None


def test_pooled_client_fallback_timeout_is_connect_default():
    from unichat_providers.config.defaults import DEFAULT_CONNECT_TIMEOUT_SECONDS

    client = get_httpx_client("https://api.example.com", purpose="timeout")
    assert client.timeout.connect == DEFAULT_CONNECT_TIMEOUT_SECONDS
    assert client.timeout.read == DEFAULT_CONNECT_TIMEOUT_SECONDS
