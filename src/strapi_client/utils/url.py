"""Query string serialization for the Strapi REST API.

Strapi reads nested query parameters in bracket notation::

    {"filters": {"mime": {"$contains": "image"}}, "sort": ["name:asc"]}

becomes::

    filters[mime][$contains]=image&sort[0]=name:asc

Flattening and encoding are separate steps: :func:`flatten_query_params`
produces the raw ``(key, value)`` pairs and :func:`stringify_query_params`
percent-encodes them with the same rules as a browser's ``URLSearchParams``.
"""

import logging
import math
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any, Final
from urllib.parse import quote_plus

import httpx

logger = logging.getLogger(__name__)


class _Unset:
    """Marker for a value that is absent rather than null."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _Unset()
"""Dropped from query strings and request bodies, unlike ``None`` which is sent as null."""

QueryParams = Mapping[str, Any]


def drop_unset(value: Any) -> Any:
    """Remove UNSET values from a JSON-like structure.

    Mapping entries holding UNSET are dropped and UNSET list items become
    ``None``, which is how ``JSON.stringify`` treats ``undefined``.

    Example:
        >>> drop_unset({"title": "t", "slug": UNSET, "tags": ["a", UNSET]})
        {'title': 't', 'tags': ['a', None]}
    """
    if isinstance(value, Mapping):
        return {key: drop_unset(item) for key, item in value.items() if item is not UNSET}
    if isinstance(value, (list, tuple)):
        return [None if item is UNSET else drop_unset(item) for item in value]
    return value


def _to_string(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _to_string(value.value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return _float_to_string(value)
    return str(value)


def _float_to_string(value: float) -> str:
    # Same notation as JavaScript: positional for 1e-6 <= |x| < 1e21, else 1e+21 or 1.5e-7
    magnitude = abs(value)
    if value.is_integer() and magnitude < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text

    mantissa, exponent = text.split("e")
    if magnitude >= 1e21 or magnitude < 1e-6:
        return f"{mantissa}e{int(exponent):+d}"

    return format(Decimal(text), "f")


def _flatten(key: str, value: Any, pairs: list[tuple[str, str]]) -> None:
    # vals=[1, 2] -> vals[0]=1, vals[1]=2 (unset items are skipped before indexing)
    if isinstance(value, (list, tuple)):
        items = [item for item in value if item is not UNSET]
        for index, item in enumerate(items):
            _flatten(f"{key}[{index}]", item, pairs)

    # vals={"foo": "bar"} -> vals[foo]=bar
    elif isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _flatten(f"{key}[{sub_key}]", sub_value, pairs)

    elif value is not UNSET:
        pairs.append((key, _to_string(value)))


def flatten_query_params(query_params: QueryParams | None) -> list[tuple[str, str]]:
    """Flatten nested query parameters into bracket-notation pairs.

    Keys keep the insertion order of the input mapping and array indices
    always count up from zero.

    Args:
        query_params: Mapping of parameter names to scalars, lists or mappings

    Returns:
        Unencoded ``(key, value)`` pairs

    Examples:
        >>> flatten_query_params({"sort": ["title:asc"], "pagination": {"page": 1}})
        [('sort[0]', 'title:asc'), ('pagination[page]', '1')]
        >>> flatten_query_params({"locale": UNSET, "filters": {}})
        []
    """
    pairs: list[tuple[str, str]] = []

    if not query_params:
        return pairs

    for key, value in query_params.items():
        if value is not UNSET:
            _flatten(str(key), value, pairs)

    return pairs


def _encode(text: str) -> str:
    # application/x-www-form-urlencoded leaves only alphanumerics and *-._ as-is
    return quote_plus(text, safe="*").replace("~", "%7E")


def stringify_query_params(query_params: QueryParams | None) -> str:
    """Serialize query parameters into an encoded query string (without ``?``).

    Examples:
        >>> stringify_query_params({"sort": "name:asc"})
        'sort=name%3Aasc'
        >>> stringify_query_params({"filters": {"mime": {"$contains": "image"}}})
        'filters%5Bmime%5D%5B%24contains%5D=image'
    """
    return "&".join(
        f"{_encode(key)}={_encode(value)}" for key, value in flatten_query_params(query_params)
    )


def append_query_params(url: str, query_params: QueryParams | None = None) -> str:
    """Append serialized query parameters to a URL or path.

    The URL is returned unchanged when there is nothing to append, so no
    dangling ``?`` is ever produced. The URL itself is not validated.

    Args:
        url: Base URL or path
        query_params: Optional query parameters

    Returns:
        ``url`` followed by ``?`` and the encoded query string, or ``url``

    Examples:
        >>> append_query_params("/articles", {"locale": "en"})
        '/articles?locale=en'
        >>> append_query_params("/articles", {"filters": {}})
        '/articles'
    """
    logger.debug(f"Appending query params to {url}: {query_params}")

    query_string = stringify_query_params(query_params)
    result = f"{url}?{query_string}" if query_string else url

    logger.debug(f"Query params appended to url: {result}")
    return result


def to_readable_path(url: str | httpx.URL) -> str:
    """Return the origin and path of an absolute URL, dropping query and fragment.

    Meant for log and error messages.

    Examples:
        >>> to_readable_path("https://example.com/articles/1?locale=en#top")
        'https://example.com/articles/1'
    """
    parsed = url if isinstance(url, httpx.URL) else httpx.URL(url)

    return f"{parsed.scheme}://{parsed.netloc.decode('ascii')}{parsed.path}"
