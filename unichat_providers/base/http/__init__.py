"""HTTP utilities package for providers.

Exposes pooled httpx clients and the per-request timeout helper.
"""

from .client import close_all_clients, get_httpx_client, request_timeout

__all__ = ["get_httpx_client", "close_all_clients", "request_timeout"]
