"""
Endpoint Table

Each remote operation is described by one ``Endpoint`` entry: HTTP method,
path template, how the body is encoded and whether the response is a single
post or a list. ``build_request`` turns an entry plus call arguments into an
``httpx.Request``.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

import httpx


logger = logging.getLogger(__name__)


class BodyEncoding(enum.Enum):
    NONE = "none"
    JSON = "json"
    FORM = "form"


@dataclass(frozen=True)
class Endpoint:
    """Wire mapping of one remote operation."""
    name: str
    method: str
    path: str
    encoding: BodyEncoding = BodyEncoding.NONE
    many: bool = False


FETCH_DEFAULT = Endpoint("fetch_default", "GET", "/posts/1")
FETCH_BY_ID = Endpoint("fetch_by_id", "GET", "/posts/{id}")
FETCH_BY_OWNER = Endpoint("fetch_by_owner", "GET", "/posts", many=True)
FETCH_BY_OWNER_FILTERED = Endpoint("fetch_by_owner_filtered", "GET", "/posts", many=True)
CREATE = Endpoint("create", "POST", "/posts", encoding=BodyEncoding.JSON)
CREATE_FORM = Endpoint("create_form", "POST", "/posts", encoding=BodyEncoding.FORM)


def merge_query(
    named: Mapping[str, str],
    options: Optional[Mapping[str, str]] = None
) -> List[Tuple[str, str]]:
    """
    Merge named query parameters with an option set.

    Named parameters come first and win on collision: an option whose key
    matches a named parameter is dropped with a warning.
    """
    params = list(named.items())
    for key, value in (options or {}).items():
        if key in named:
            logger.warning(f"Ignoring option {key}={value!r}: conflicts with named parameter")
            continue
        params.append((key, value))
    return params


def build_request(
    client: httpx.AsyncClient,
    endpoint: Endpoint,
    *,
    path_params: Optional[Mapping[str, Any]] = None,
    query: Optional[List[Tuple[str, str]]] = None,
    body: Optional[Dict[str, Any]] = None,
    headers: Optional[Mapping[str, str]] = None
) -> httpx.Request:
    """
    Build the request for ``endpoint``.

    Path parameters are substituted with ``str()``; httpx performs the
    URL escaping that is mechanically required and nothing else.
    """
    path = endpoint.path
    if path_params:
        path = path.format(**{key: str(value) for key, value in path_params.items()})

    kwargs: Dict[str, Any] = {}
    if query:
        kwargs["params"] = query
    if headers:
        kwargs["headers"] = dict(headers)

    if endpoint.encoding is BodyEncoding.JSON:
        kwargs["json"] = body
    elif endpoint.encoding is BodyEncoding.FORM:
        kwargs["data"] = body

    return client.build_request(endpoint.method, path, **kwargs)
