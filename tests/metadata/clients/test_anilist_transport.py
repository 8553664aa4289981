"""Tests for the AniList HTTP transport and GraphQL error handling."""

import json
import logging

import httpx
import pytest
import respx
from httpx import Response
from pydantic import ValidationError

from anilistkit.metadata.clients.anilist import AniListClient, queries
from anilistkit.metadata.clients.anilist.transport import (
    GraphQLResponseError,
    _describe,
    send_request,
)
from anilistkit.metadata.models import AnilistItem
from anilistkit.metadata.settings import Settings

API_URL = "https://graphql.anilist.co"
ERRORS_BODY = {
    "data": {"Media": None},
    "errors": [{"message": "Not Found.", "status": 404}],
}


@respx.mock
def test_send_request_posts_query_and_variables() -> None:
    route = respx.post(API_URL).mock(
        return_value=Response(200, json={"data": {"User": {"id": 7}}})
    )

    result = send_request("query { User { id } }", {"name": "someone"})

    assert result.data is not None
    assert result.data.user is not None
    assert result.data.user.id == 7
    request = route.calls[0].request
    assert request.method == "POST"
    assert request.headers["Content-Type"] == "application/json"
    assert "Authorization" not in request.headers
    assert json.loads(request.content) == {
        "query": "query { User { id } }",
        "variables": {"name": "someone"},
    }


@respx.mock
def test_send_request_attaches_bearer_token() -> None:
    route = respx.post(API_URL).mock(return_value=Response(200, json={"data": {}}))

    send_request("mutation { x }", {}, "secret-token")

    assert route.calls[0].request.headers["Authorization"] == "Bearer secret-token"


@respx.mock
def test_send_request_uses_given_client_and_url() -> None:
    route = respx.post("https://example.test/graphql").mock(
        return_value=Response(200, json={"data": None})
    )

    with httpx.Client() as http_client:
        result = send_request(
            "query { x }",
            {},
            api_url="https://example.test/graphql",
            client=http_client,
        )

    assert route.called
    assert result.data is None


@pytest.mark.parametrize("status", [301, 400, 401, 404, 429, 500, 503])
@respx.mock
def test_send_request_non_success_status_raises(status: int) -> None:
    respx.post(API_URL).mock(return_value=Response(status, json=ERRORS_BODY))

    with pytest.raises(httpx.HTTPStatusError) as excinfo:
        send_request("query { x }", {})
    assert excinfo.value.response.status_code == status


@respx.mock
def test_send_request_network_error_propagates() -> None:
    respx.post(API_URL).mock(side_effect=httpx.ConnectError("boom"))

    with pytest.raises(httpx.ConnectError):
        send_request("query { x }", {})


@respx.mock
def test_send_request_malformed_json_raises() -> None:
    respx.post(API_URL).mock(return_value=Response(200, text="<html>oops</html>"))

    with pytest.raises(json.JSONDecodeError):
        send_request("query { x }", {})


@respx.mock
def test_send_request_unexpected_shape_raises() -> None:
    respx.post(API_URL).mock(return_value=Response(200, json=["not", "an", "object"]))

    with pytest.raises(ValidationError):
        send_request("query { x }", {})


@respx.mock
def test_graphql_errors_ignored_by_default() -> None:
    respx.post(API_URL).mock(return_value=Response(200, json=ERRORS_BODY))

    result = send_request("query { x }", {})

    assert result.errors is not None
    assert result.errors[0].message == "Not Found."
    assert result.errors[0].status == 404


@respx.mock
def test_graphql_errors_raised_when_strict() -> None:
    respx.post(API_URL).mock(return_value=Response(200, json=ERRORS_BODY))

    with pytest.raises(GraphQLResponseError) as excinfo:
        send_request("query { x }", {}, raise_on_graphql_errors=True)

    assert "Not Found." in str(excinfo.value)
    assert excinfo.value.errors[0].status == 404


@respx.mock
def test_client_treats_graphql_errors_as_not_found_by_default() -> None:
    """A 200 with errors and null data reads as an empty result."""
    respx.post(API_URL).mock(return_value=Response(200, json=ERRORS_BODY))
    client = AniListClient(settings=Settings(_env_file=None, ANILIST_API_URL=API_URL))

    assert client.get_item_by_id(1) == AnilistItem()


@respx.mock
def test_client_surfaces_graphql_errors_when_configured() -> None:
    respx.post(API_URL).mock(return_value=Response(200, json=ERRORS_BODY))
    client = AniListClient(
        settings=Settings(
            _env_file=None,
            ANILIST_API_URL=API_URL,
            ANILIST_RAISE_ON_GRAPHQL_ERRORS=True,
        )
    )

    with pytest.raises(GraphQLResponseError):
        client.get_item_by_id(1)


@pytest.mark.parametrize(
    "document, label",
    [
        (queries.SEARCH_WITH_SEASON_QUERY, "query SearchMediaBySeason"),
        (queries.SEARCH_QUERY, "query SearchMedia"),
        (queries.DETAILS_QUERY, "query MediaById"),
        (queries.USER_QUERY, "query UserId"),
        (queries.FOLLOWING_QUERY, "query FollowingPage"),
        (queries.UPDATES_QUERY, "query MediaListUpdates"),
        (queries.PROGRESS_QUERY, "query MediaListProgress"),
        (queries.UPDATE_PROGRESS_MUTATION, "mutation SaveProgress"),
    ],
)
def test_every_document_is_a_named_operation(document: str, label: str) -> None:
    assert _describe(document) == label


@respx.mock
def test_send_request_logs_operation_name(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr("anilistkit.utils.debug.DEBUG_ON", True)
    caplog.set_level(logging.DEBUG, logger="anilistkit")
    respx.post(API_URL).mock(return_value=Response(200, json={"data": {}}))

    send_request(queries.PROGRESS_QUERY, {"userName": "someone", "mediaId": 21})

    assert "AniList request: query MediaListProgress" in caplog.text
