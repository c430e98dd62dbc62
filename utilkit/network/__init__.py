from utilkit.network.fetcher import Fetcher, FetchError, fetcher
from utilkit.network.image import image_url_to_base64
from utilkit.network.real_url import get_real_url
from utilkit.network.to import to

__all__ = ["Fetcher", "FetchError", "fetcher", "get_real_url", "image_url_to_base64", "to"]
