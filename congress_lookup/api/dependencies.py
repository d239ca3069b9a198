"""FastAPI dependencies for dependency injection."""
import httpx
from fastapi import Depends, Request

from congress_lookup.config import get_settings
from congress_lookup.services.upstream_client import Upstreams, build_upstreams


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Get the shared upstream HTTP client from app state."""
    return request.app.state.http_client


def get_upstreams(client: httpx.AsyncClient = Depends(get_http_client)) -> Upstreams:
    """Build the upstream clients for one request."""
    return build_upstreams(client, get_settings())
