"""HTTP client factory for the arXiv query source."""

import httpx


def create_http_client(
    timeout: int = 30,
    user_agent: str = "Paperscope/1.0",
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create a configured async HTTP client.

    Args:
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
        transport: Optional transport override (tests pass httpx.MockTransport).

    Returns:
        Configured httpx.AsyncClient that follows redirects.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        headers={"User-Agent": user_agent},
        follow_redirects=True,
        transport=transport,
    )
