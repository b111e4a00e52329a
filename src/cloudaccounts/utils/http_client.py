import logging

import httpx

from ..core.config import config

logger = logging.getLogger(__name__)


def get_async_http_client(
    base_url: str = None,
    connect_timeout: float = None,
    read_timeout: float = None,
    verify: bool = None,
    token: str = None,
) -> httpx.AsyncClient:
    """
    Returns a configured httpx.AsyncClient with:
    - Default timeouts (connect and read).
    - Standard User-Agent header.
    - A bearer token when the credentials service requires one.
    """
    c_timeout = connect_timeout if connect_timeout is not None else config.DEFAULT_TIMEOUT_CONNECT
    r_timeout = read_timeout if read_timeout is not None else config.DEFAULT_TIMEOUT_READ
    verify_certs = verify if verify is not None else config.CREDENTIALS_VERIFY_CERTS

    timeout = httpx.Timeout(r_timeout, connect=c_timeout)

    headers = {"User-Agent": config.USER_AGENT, "Accept": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"

    # No retry transport: a single failed request is terminal for the caller.
    return httpx.AsyncClient(
        base_url=base_url or "",
        timeout=timeout,
        headers=headers,
        verify=verify_certs,
        follow_redirects=True,
    )
