"""Fetch an image and return it as a base64 data URL.

JPEG and PNG bodies are re-encoded with Pillow at the requested quality
(or handed to a custom ``compressor``); every other type is passed through
as-is.
"""
from __future__ import annotations

import base64
import inspect
import io
from typing import Any, Awaitable, Callable, Optional, Union

import httpx
from PIL import Image

from utilkit.core.settings import settings
from utilkit.network.fetcher import FetchError

Compressor = Callable[[bytes, str, float], Union[str, Awaitable[str]]]
Fetch = Callable[[str], Awaitable[httpx.Response]]

_COMPRESSIBLE = ("image/jpeg", "image/png")


def _data_url(mime: str, data: bytes) -> str:
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


def compress_with_pillow(data: bytes, mime: str, quality: float) -> str:
    """Re-encode JPEG/PNG bytes with Pillow and return a data URL.

    JPEG uses ``quality`` scaled to 0-100; PNG maps it onto
    ``compress_level`` 9-0.
    """
    with Image.open(io.BytesIO(data)) as img:
        buf = io.BytesIO()
        if mime == "image/jpeg":
            img.save(buf, format="JPEG", quality=round(quality * 100))
        else:
            img.save(buf, format="PNG", compress_level=round((1 - quality) * 9))
    return _data_url(mime, buf.getvalue())


async def _default_fetch(url: str) -> httpx.Response:
    async with httpx.AsyncClient(timeout=settings.FETCH_TIMEOUT, follow_redirects=True) as c:
        return await c.get(url)


async def image_url_to_base64(
    image_url: str,
    *,
    quality: Optional[float] = None,
    compressor: Optional[Compressor] = None,
    fetch: Optional[Fetch] = None,
) -> str:
    """Download ``image_url`` and return ``data:<mime>;base64,...``.

    Parameters
    ----------
    quality:
        0-1 compression ratio, defaults to ``settings.IMAGE_QUALITY``.
    compressor:
        ``(data, mime, quality) -> data URL`` replacing the Pillow step.
    fetch:
        ``async (url) -> httpx.Response`` replacing the default GET.

    Raises
    ------
    ValueError
        If the URL is not http(s).
    FetchError
        If the download does not return 2xx.
    """
    if not image_url.startswith("http"):
        raise ValueError(f"Image URL must start with http or https: {image_url}")

    q = settings.IMAGE_QUALITY if quality is None else quality
    r = await (fetch or _default_fetch)(image_url)
    if not r.is_success:
        raise FetchError(
            f"Failed to fetch image: {r.reason_phrase}",
            status_code=r.status_code,
            reason=r.reason_phrase,
        )

    mime = (r.headers.get("Content-Type") or "image/jpeg").split(";")[0].strip()
    data = r.content

    if mime not in _COMPRESSIBLE:
        return _data_url(mime, data)

    if compressor is not None:
        out: Any = compressor(data, mime, q)
        if inspect.isawaitable(out):
            out = await out
        return out

    try:
        return compress_with_pillow(data, mime, q)
    except (OSError, ValueError):
        # undecodable body, ship the original bytes
        return _data_url(mime, data)
