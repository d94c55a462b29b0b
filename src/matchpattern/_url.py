"""Parsing addresses into the structured URLs a MatchEngine evaluates.

Splitting is delegated to ``urllib.parse.urlsplit``. On top of it,
``parse_url`` applies the checks a strict URL parser performs so that
structurally broken addresses surface as UrlError instead of silently
producing a non-match:

- ASCII control characters anywhere in the address
- ``:`` with nothing before it (missing scheme)
- a relative address whose first path segment contains ``:``
- invalid percent escapes in the path or fragment
- unbalanced IPv6 brackets or a non-numeric port

Validation regexes use ``google-re2`` because addresses are untrusted input.
No canonicalization is performed: the host keeps its case and port, and the
query string stays raw.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import unquote, urlsplit

import re2

from matchpattern._errors import UrlError

if TYPE_CHECKING:
    from urllib.parse import SplitResult

logger = logging.getLogger(__name__)

_CONTROL_CHARS = re2.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re2.compile(r"%([^0-9A-Fa-f]|[0-9A-Fa-f][^0-9A-Fa-f]|[0-9A-Fa-f]?$)")
_HOST_PORT = re2.compile(r"(\[[^\[\]]*\]|[^\[\]:]*)(:[0-9]*)?")


@dataclass(frozen=True, slots=True)
class ParsedUrl:
    """URL components as seen by the matchers.

    ``path`` is percent-decoded and empty for opaque URLs such as
    ``data:text/plain,hi``. ``raw_query`` is empty when the URL has no
    query or an empty one. The fragment is carried but never matched.
    """

    scheme: str
    host: str = ""
    path: str = ""
    raw_query: str = ""
    fragment: str = ""

    @classmethod
    def from_split_result(cls, result: SplitResult) -> ParsedUrl:
        """Adapt an already-split URL without re-validating it."""
        host = result.netloc.rpartition("@")[2]
        path = result.path
        if result.scheme and not result.netloc and not path.startswith("/"):
            path = ""
        return cls(
            scheme=result.scheme.lower(),
            host=host,
            path=unquote(path),
            raw_query=result.query,
            fragment=unquote(result.fragment),
        )

    @property
    def match_path(self) -> str:
        """Path followed by ``?`` and the raw query, as path patterns see it."""
        path = self.path or "/"
        if self.raw_query:
            return f"{path}?{self.raw_query}"
        return path


def parse_url(address: str) -> ParsedUrl:
    """Parse an address string into a ParsedUrl.

    Raises:
        UrlError: If the address is not a structurally valid URL.
    """
    if _CONTROL_CHARS.search(address):
        raise UrlError(address, "invalid control character in URL")
    if address.startswith(":"):
        raise UrlError(address, "missing protocol scheme")

    try:
        result = urlsplit(address)
    except ValueError as e:
        logger.debug("urlsplit rejected %r: %s", address, e)
        raise UrlError(address, str(e)) from e

    if not result.scheme and not result.netloc:
        first_segment = result.path.split("/", 1)[0]
        if ":" in first_segment:
            raise UrlError(address, "first path segment in URL cannot contain colon")

    host = result.netloc.rpartition("@")[2]
    if host and not _HOST_PORT.fullmatch(host):
        raise UrlError(address, f"invalid host or port {host!r}")

    for component in (result.path, result.fragment):
        if _BAD_ESCAPE.search(component):
            raise UrlError(address, "invalid URL escape")

    return ParsedUrl.from_split_result(result)
