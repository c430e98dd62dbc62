import asyncio
import base64
import io
import sys
from pathlib import Path

import httpx
import pytest
from PIL import Image

sys.path.append(str(Path(__file__).resolve().parents[2]))

from utilkit.network.fetcher import FetchError
from utilkit.network.image import image_url_to_base64


def _image_bytes(fmt: str) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (8, 8), "red").save(buf, format=fmt)
    return buf.getvalue()


def _fetch(content: bytes, content_type: str, status: int = 200):
    async def fetch(url: str) -> httpx.Response:
        return httpx.Response(status, content=content, headers={"Content-Type": content_type})

    return fetch


def _decode(data_url: str) -> bytes:
    return base64.b64decode(data_url.split(",", 1)[1])


def test_png_is_recompressed():
    out = asyncio.run(image_url_to_base64("https://img.example.com/a.png", fetch=_fetch(_image_bytes("PNG"), "image/png")))
    assert out.startswith("data:image/png;base64,")
    with Image.open(io.BytesIO(_decode(out))) as img:
        assert img.format == "PNG"
        assert img.size == (8, 8)


def test_jpeg_is_recompressed():
    out = asyncio.run(
        image_url_to_base64("https://img.example.com/a.jpg", quality=0.5, fetch=_fetch(_image_bytes("JPEG"), "image/jpeg"))
    )
    assert out.startswith("data:image/jpeg;base64,")
    with Image.open(io.BytesIO(_decode(out))) as img:
        assert img.format == "JPEG"


def test_other_types_pass_through():
    out = asyncio.run(image_url_to_base64("https://img.example.com/a.gif", fetch=_fetch(b"GIF89a", "image/gif")))
    assert out == "data:image/gif;base64," + base64.b64encode(b"GIF89a").decode()


def test_undecodable_image_falls_back_to_raw_bytes():
    out = asyncio.run(image_url_to_base64("https://img.example.com/a.jpg", fetch=_fetch(b"not an image", "image/jpeg")))
    assert _decode(out) == b"not an image"


def test_custom_compressor_wins():
    seen = {}

    async def compressor(data, mime, quality):
        seen.update(mime=mime, quality=quality)
        return "data:custom"

    out = asyncio.run(
        image_url_to_base64(
            "https://img.example.com/a.png",
            quality=0.8,
            compressor=compressor,
            fetch=_fetch(_image_bytes("PNG"), "image/png"),
        )
    )
    assert out == "data:custom"
    assert seen == {"mime": "image/png", "quality": 0.8}


def test_rejects_non_http_urls():
    with pytest.raises(ValueError, match="must start with http"):
        asyncio.run(image_url_to_base64("file:///tmp/a.png"))


def test_failed_download_raises():
    with pytest.raises(FetchError, match="Failed to fetch image"):
        asyncio.run(image_url_to_base64("https://img.example.com/a.png", fetch=_fetch(b"", "text/plain", 404)))
