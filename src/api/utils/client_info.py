"""
Client Info

Client IP and user agent extraction for auth logging, throttling and the
download rate window.

Forwarding headers are resolved by uvicorn's ProxyHeadersMiddleware, which
only rewrites the peer address when the connection comes from one of
TRUSTED_PROXIES. Nothing here reads X-Forwarded-For directly.
"""

from typing import Optional

from fastapi import Request

UNKNOWN_IP = "unknown"


def get_client_ip(request: Request) -> str:
    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN_IP


def get_user_agent(request: Request) -> Optional[str]:
    return request.headers.get("user-agent")
