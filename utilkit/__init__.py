"""General-purpose helpers: TTL memoization, HTTP fetching, logging,
string and object utilities, debounce/throttle."""

from utilkit.hoc import CachedFunction, cached, with_cache
from utilkit.lru_cache import LRUCache
from utilkit.network import Fetcher, FetchError, fetcher, get_real_url, image_url_to_base64, to
from utilkit.obs import log, log_event, time_log
from utilkit.utils.cache_key import CacheKeyError, make_key
from utilkit.utils.functions import LoopLimitError, loop_until
from utilkit.utils.objects import map_keys, map_values, merge_objects
from utilkit.utils.predicates import is_nil, is_object, is_primitive, is_truthy
from utilkit.utils.strings import camel_to_snake, capitalize, compact_str, decapitalize, snake_to_camel
from utilkit.utils.timing import debounce, sleep, throttle

__version__ = "0.1.0"

__all__ = [
    "CacheKeyError",
    "CachedFunction",
    "FetchError",
    "Fetcher",
    "LRUCache",
    "LoopLimitError",
    "cached",
    "camel_to_snake",
    "capitalize",
    "compact_str",
    "debounce",
    "decapitalize",
    "fetcher",
    "get_real_url",
    "image_url_to_base64",
    "is_nil",
    "is_object",
    "is_primitive",
    "is_truthy",
    "log",
    "log_event",
    "loop_until",
    "make_key",
    "map_keys",
    "map_values",
    "merge_objects",
    "sleep",
    "snake_to_camel",
    "throttle",
    "time_log",
    "to",
    "with_cache",
]
