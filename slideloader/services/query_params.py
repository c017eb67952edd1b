"""
Query-string parameter extraction.

The slideshow page picks its deck from a single query-string parameter.
Extraction is a pure function of the raw query string so it can be tested
without a request; the web layer passes ``request.url.query`` in.
"""
import logging
import re
from urllib.parse import unquote

from slideloader.models.slide import DEFAULT_SLIDE, PARAM_VALUE_PATTERN

logger = logging.getLogger(__name__)

# A "%" that does not start a two-digit hex escape
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class MalformedEncodingError(ValueError):
    """Raised when a percent-encoded value cannot be decoded."""


def decode_uri_component(value: str) -> str:
    """
    Percent-decode a URI component.

    Escapes are decoded as UTF-8 and ``+`` is kept as-is. A stray ``%`` or
    an escape sequence that is not valid UTF-8 raises
    :class:`MalformedEncodingError` instead of being passed through.
    """
    if _BAD_ESCAPE.search(value):
        raise MalformedEncodingError(f"Malformed percent escape in {value!r}")
    try:
        return unquote(value, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as e:
        raise MalformedEncodingError(f"Invalid UTF-8 sequence in {value!r}") from e


def get_query_param(query_string: str, key: str, default: str = DEFAULT_SLIDE) -> str:
    """
    Return the decoded value of ``key`` in ``query_string``, or ``default``.

    The first ``key=value`` match wins, where the value runs up to the next
    ``&``, ``#`` or ``=``. The match is not anchored to a parameter boundary
    and ``key`` is used as a regular expression as-is, so keys containing
    regex metacharacters match unpredictably.

    A missing key, an empty value, a value that fails to decode and a value
    that decodes to an empty string all return ``default``.
    """
    match = re.search(key + PARAM_VALUE_PATTERN, query_string)
    if not match or not match.group(1):
        logger.debug(f"No {key!r} parameter in query {query_string!r}, using {default!r}")
        return default

    try:
        value = decode_uri_component(match.group(1))
    except MalformedEncodingError as e:
        logger.debug(f"Ignoring {key!r} parameter: {e}")
        return default

    return value or default
