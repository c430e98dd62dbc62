import inspect
from typing import Any, Callable, Dict, Optional
from uuid import uuid4

import httpx

from utilkit.core.settings import settings
from utilkit.obs import log_event
from utilkit.utils.objects import merge_objects
from utilkit.utils.predicates import is_nil, is_object

Parser = Callable[[httpx.Response], Any]


class FetchError(RuntimeError):
    """Non-2xx response. ``payload`` holds the decoded JSON error body, if any."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.payload = payload


def _param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _log(event: str, detail: Dict[str, Any]) -> None:
    # Structured JSON log without secrets
    safe = dict(detail)
    safe.pop("Authorization", None)
    log_event(f"fetch.{event}", **safe)


class Fetcher:
    """Small JSON HTTP client on top of ``httpx.AsyncClient``.

    Instance options (``headers``, ``params``, ``parser``, ``proxy``,
    ``timeout`` ...) are deep-merged with per-call options, the per-call
    values winning. ``params`` is appended to the URL with ``None`` values
    dropped; a dict or list ``body`` is sent as JSON.

    Examples
    --------
    One-off request::

        blog = await fetcher().get("https://example.com/blogs/hello-world")

    Shared base URL and headers::

        api = fetcher("https://example.com", headers={"Authorization": "Bearer t"})
        await api.get("/blogs", params={"page": 1})

    Cached through :func:`utilkit.hoc.with_cache`::

        get_blogs = with_cache(lambda set_ttl, path: api.get(path), 60)
    """

    def __init__(self, base_url: str = "", **base_options: Any) -> None:
        self.base_url = base_url
        self.base_options = base_options

    def _client(self, proxy: Optional[str], timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(proxy=proxy, timeout=timeout)

    async def request(self, method: str, path: str, **options: Any) -> Any:
        url = f"{self.base_url}{path}" if self.base_url else path
        opts = merge_objects(self.base_options, options)

        params = opts.pop("params", None)
        parser: Optional[Parser] = opts.pop("parser", None)
        proxy = opts.pop("proxy", settings.FETCH_PROXY)
        timeout = opts.pop("timeout", settings.FETCH_TIMEOUT)
        headers = dict(opts.pop("headers", None) or {})
        body = opts.pop("body", None)

        query: Dict[str, str] = {}
        if is_object(params):
            query = {k: _param(v) for k, v in params.items() if not is_nil(v)}

        if is_object(body) or isinstance(body, list):
            headers["Content-Type"] = "application/json"
            opts["json"] = body
        elif body is not None:
            opts["content"] = body

        cid = str(uuid4())
        _log("request", {"cid": cid, "method": method, "url": url})
        async with self._client(proxy, timeout) as client:
            r = await client.request(method, url, params=query or None, headers=headers, **opts)
        _log("response", {"cid": cid, "status": r.status_code, "url": url})

        if not r.is_success:
            ctype = r.headers.get("Content-Type", "")
            if ctype.startswith("application/json"):
                payload = r.json()
                raise FetchError(
                    f"HTTP {r.status_code}: {payload}",
                    status_code=r.status_code,
                    reason=r.reason_phrase,
                    payload=payload,
                )
            raise FetchError(r.reason_phrase or f"HTTP {r.status_code}", status_code=r.status_code, reason=r.reason_phrase)

        data = parser(r) if parser is not None else r.json()
        if inspect.isawaitable(data):
            data = await data
        return data

    async def get(self, url: str, **options: Any) -> Any:
        return await self.request("GET", url, **options)

    async def post(self, url: str, body: Any = None, **options: Any) -> Any:
        return await self.request("POST", url, body=body, **options)

    async def put(self, url: str, body: Any = None, **options: Any) -> Any:
        return await self.request("PUT", url, body=body, **options)

    async def delete(self, url: str, **options: Any) -> Any:
        return await self.request("DELETE", url, **options)


def fetcher(base_url: str = "", **base_options: Any) -> Fetcher:
    return Fetcher(base_url, **base_options)
