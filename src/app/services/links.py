from urllib.parse import urlencode

from config import ApplicationConfig


def frontend_link(path: str, **params: str) -> str:
    """Absolute frontend URL embedded in notification emails"""
    base = ApplicationConfig.FRONTEND_URL.rstrip("/")
    query = f"?{urlencode(params)}" if params else ""
    return f"{base}/{path.lstrip('/')}{query}"
