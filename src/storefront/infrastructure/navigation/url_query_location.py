"""URL-backed implementation of QueryLocation.

Holds a single URL (path plus query string) the way a browser tab holds
its current address.  ``replace`` rewrites the query string in place and
keeps the path; there is no history stack.
"""

from __future__ import annotations

from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

from storefront.domain.repository.query_location import QueryLocation


class UrlQueryLocation(QueryLocation):

    def __init__(self, url: str = "/products") -> None:
        self._url = url

    @property
    def url(self) -> str:
        return self._url

    # --- QueryLocation interface ----------------------------------------------

    def read(self) -> dict[str, str]:
        params: dict[str, str] = {}
        for key, value in parse_qsl(urlsplit(self._url).query, keep_blank_values=True):
            params.setdefault(key, value)
        return params

    def replace(self, params: dict[str, str]) -> None:
        parts = urlsplit(self._url)
        query = urlencode(params, quote_via=quote, safe=",")
        self._url = urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))
