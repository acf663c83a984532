"""Read and update the ``?search=...&status=...`` URL convention."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import parse_qsl, urlencode, urlsplit


SearchParams = Mapping[str, str]


def parse_search_params(query_string: str | None) -> dict[str, str]:
    """Parse a URL or bare query string into a flat parameter dict.

    Accepts ``"?search=acme&status=paid"``, ``"search=acme"`` or a full URL.
    When a key repeats, the first value wins.
    """
    if not query_string:
        return {}
    if "://" in query_string:
        query_string = urlsplit(query_string).query
    params: dict[str, str] = {}
    for key, value in parse_qsl(query_string.lstrip("?"), keep_blank_values=True):
        params.setdefault(key, value)
    return params


def update_search_params(params: SearchParams | str | None, **values: str | None) -> str:
    """Return a new query string with ``values`` applied.

    Non-empty values are set; empty or ``None`` values remove the key.
    Parameters not named in ``values`` are carried over unchanged.

    Examples:
        >>> update_search_params("status=paid", search="acme")
        'status=paid&search=acme'
        >>> update_search_params("search=acme&status=paid", status=None)
        'search=acme'
    """
    current = parse_search_params(params) if isinstance(params, str) or params is None else dict(params)
    for key, value in values.items():
        if value:
            current[key] = value
        else:
            current.pop(key, None)
    return urlencode(current)
