"""HTTP transport for the AniList GraphQL endpoint.

A single synchronous request/response function used by every client call,
authenticated or not. The request body is ``{"query": ..., "variables": ...}``
and an ``Authorization: Bearer`` header is attached only when a token is given.

Failures are propagated unchanged:
- network errors as ``httpx.TransportError`` subclasses,
- non-2xx responses as ``httpx.HTTPStatusError``,
- malformed bodies as ``json.JSONDecodeError``.

GraphQL ``errors`` in a 2xx response are parsed but not treated as failures
unless ``raise_on_graphql_errors`` is set. With the default, they are logged
and a null ``data`` reads as an empty (not-found) result.
"""

import re
from typing import Any

import httpx

from anilistkit.metadata.clients.anilist.responses import (
    GraphQLError,
    GraphQLResponse,
)
from anilistkit.utils.debug import debug, warn

DEFAULT_API_URL = "https://graphql.anilist.co"

_OPERATION_RE = re.compile(r"^\s*(query|mutation)\s*(\w*)")


class GraphQLResponseError(Exception):
    """Raised for GraphQL-level errors when strict error handling is enabled."""

    def __init__(self, errors: list[GraphQLError]) -> None:
        """Initialize with the server-reported errors."""
        messages = "; ".join(
            f"{e.message} (status {e.status})" if e.status else e.message
            for e in errors
        )
        super().__init__(f"AniList returned GraphQL errors: {messages}")
        self.errors = errors


def _describe(query: str) -> str:
    """Short label for a GraphQL document, used in log lines."""
    match = _OPERATION_RE.match(query)
    if not match:
        return "query"
    return " ".join(part for part in match.groups() if part)


def send_request(
    query: str,
    variables: dict[str, Any],
    access_token: str | None = None,
    *,
    api_url: str = DEFAULT_API_URL,
    client: httpx.Client | None = None,
    raise_on_graphql_errors: bool = False,
) -> GraphQLResponse:
    """POST a GraphQL document and parse the response envelope.

    Args:
        query: The GraphQL query or mutation document.
        variables: Variables for the document.
        access_token: Optional OAuth token sent as a bearer credential.
        api_url: GraphQL endpoint.
        client: Optional httpx.Client to reuse; a short-lived one is
            created otherwise.
        raise_on_graphql_errors: Raise GraphQLResponseError when the body
            carries an ``errors`` array.

    Returns:
        The parsed GraphQLResponse.

    Raises:
        httpx.HTTPStatusError: If the status code is outside 2xx.
        httpx.TransportError: On network failure.
        json.JSONDecodeError: If the body is not valid JSON.
        GraphQLResponseError: Only when raise_on_graphql_errors is set.
    """
    headers = {"Content-Type": "application/json", "Accept": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"

    payload = {"query": query, "variables": variables}
    debug(f"AniList request: {_describe(query)} variables={variables}")

    if client is None:
        with httpx.Client() as owned_client:
            response = owned_client.post(api_url, json=payload, headers=headers)
    else:
        response = client.post(api_url, json=payload, headers=headers)

    response.raise_for_status()
    data = response.json()

    result = GraphQLResponse.model_validate(data)
    if result.errors:
        if raise_on_graphql_errors:
            raise GraphQLResponseError(result.errors)
        warn(
            "AniList response carried GraphQL errors (ignored): "
            + "; ".join(e.message for e in result.errors)
        )
    return result
