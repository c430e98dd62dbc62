import httpx

from utilkit.core.settings import settings
from utilkit.network.to import to


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.FETCH_TIMEOUT, proxy=settings.FETCH_PROXY, follow_redirects=False)


async def get_real_url(origin_url: str) -> str:
    """Return the redirect target of ``origin_url``.

    Sends a ``HEAD`` request without following redirects and returns the
    ``Location`` header, or ``origin_url`` when there is none or the request
    fails.
    """
    async with _client() as c:
        err, r = await to(c.head(origin_url))
    if err is not None or r is None:
        return origin_url
    return r.headers.get("location") or origin_url
