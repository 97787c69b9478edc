"""Tests for blast_points request_builder."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from blast_points.client_helpers.errors import RequestError
from blast_points.data_models import BearerToken
from blast_points.request_builder import RequestBuilder


@pytest.fixture
def builder():
    return RequestBuilder("https://points.test", MagicMock())


def test_build_request_context(builder):
    method, url, kwargs, op = builder.build_request_context(
        method="put",
        path="/v1/contracts/0xc/batches/b1",
        params=None,
        json_payload={"pointType": "LIQUIDITY"},
        operation_name="transfer_points",
    )

    assert method == "PUT"
    assert url == "https://points.test/v1/contracts/0xc/batches/b1"
    assert kwargs == {"json": {"pointType": "LIQUIDITY"}}
    assert op == "transfer_points"


def test_build_request_context_defaults_operation_to_path(builder):
    _, _, kwargs, op = builder.build_request_context(
        method="GET", path="/v1/x", params={"cursor": "c1"}, json_payload=None, operation_name=None
    )

    assert kwargs == {"params": {"cursor": "c1"}}
    assert op == "/v1/x"


def test_build_request_context_requires_leading_slash(builder):
    with pytest.raises(RequestError):
        builder.build_request_context(method="GET", path="v1/x", params=None, json_payload=None, operation_name=None)


@pytest.mark.asyncio
async def test_execute_authenticated_attaches_bearer_header(builder):
    token_manager = MagicMock()
    token_manager.get_token = AsyncMock(return_value=BearerToken(token="tok", expiry=10))
    builder.attach_token_manager(token_manager)
    builder._executor.execute_request = AsyncMock(return_value={"success": True})

    result = await builder.execute_authenticated(method="DELETE", path="/v1/x", operation_name="cancel_transfer")

    assert result == {"success": True}
    builder._executor.execute_request.assert_awaited_once_with(
        "DELETE",
        "https://points.test/v1/x",
        {"headers": {"Authorization": "Bearer tok"}},
        "/v1/x",
        "cancel_transfer",
    )


@pytest.mark.asyncio
async def test_execute_authenticated_requires_token_manager(builder):
    with pytest.raises(RuntimeError):
        await builder.execute_authenticated(method="GET", path="/v1/x")


@pytest.mark.asyncio
async def test_execute_request_skips_auth(builder):
    token_manager = MagicMock()
    token_manager.get_token = AsyncMock()
    builder.attach_token_manager(token_manager)
    builder._executor.execute_request = AsyncMock(return_value={"success": True})

    await builder.execute_request("POST", "https://points.test/v1/dapp-auth/challenge", {"json": {}}, "/v1/dapp-auth/challenge", "op")

    token_manager.get_token.assert_not_called()
