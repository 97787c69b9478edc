"""Tests for blast_points request_executor."""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from blast_points.client_helpers.errors import RequestError
from blast_points.request_executor import RequestExecutor


@pytest.fixture
def mock_session_manager():
    manager = MagicMock()
    manager.initialize = AsyncMock()
    manager.get_session = MagicMock(return_value=MagicMock())
    return manager


@pytest.fixture
def executor(mock_session_manager):
    return RequestExecutor(mock_session_manager)


def _install_response(mock_session_manager, *, status=200, payload=None, json_error=None):
    mock_response = MagicMock()
    mock_response.status = status
    mock_response.text = AsyncMock(return_value=str(payload))
    if json_error is not None:
        mock_response.json = AsyncMock(side_effect=json_error)
    else:
        mock_response.json = AsyncMock(return_value=payload)

    mock_cm = MagicMock()
    mock_cm.__aenter__ = AsyncMock(return_value=mock_response)
    mock_cm.__aexit__ = AsyncMock(return_value=None)

    mock_session = MagicMock()
    mock_session.request.return_value = mock_cm
    mock_session_manager.get_session.return_value = mock_session
    return mock_session


@pytest.mark.asyncio
async def test_execute_request_success(executor, mock_session_manager):
    mock_session = _install_response(mock_session_manager, payload={"success": True})

    result = await executor.execute_request(
        method_upper="GET",
        url="https://points.test/v1/x",
        request_kwargs={"headers": {"Authorization": "Bearer t"}},
        path="/v1/x",
        operation_name="test_op",
    )

    assert result == {"success": True}
    mock_session_manager.initialize.assert_called_once()
    mock_session.request.assert_called_once_with("GET", "https://points.test/v1/x", headers={"Authorization": "Bearer t"})


@pytest.mark.asyncio
async def test_execute_request_non_success_status(executor, mock_session_manager):
    _install_response(mock_session_manager, status=401, payload={"success": False})

    with pytest.raises(RequestError) as exc_info:
        await executor.execute_request("GET", "https://points.test/v1/x", {}, "/v1/x", "test_op")

    assert exc_info.value.status == 401
    assert "401" in str(exc_info.value)


@pytest.mark.asyncio
async def test_execute_request_not_json(executor, mock_session_manager):
    _install_response(
        mock_session_manager,
        payload="<html>",
        json_error=aiohttp.ContentTypeError(MagicMock(), MagicMock()),
    )

    with pytest.raises(RequestError) as exc_info:
        await executor.execute_request("GET", "https://points.test/v1/x", {}, "/v1/x", "test_op")

    assert "not JSON" in str(exc_info.value)


@pytest.mark.asyncio
async def test_execute_request_not_object(executor, mock_session_manager):
    _install_response(mock_session_manager, payload=[1, 2, 3])

    with pytest.raises(RequestError) as exc_info:
        await executor.execute_request("GET", "https://points.test/v1/x", {}, "/v1/x", "test_op")

    assert "not a JSON object" in str(exc_info.value)


@pytest.mark.asyncio
async def test_transport_error_is_not_retried(executor, mock_session_manager):
    mock_session = MagicMock()
    mock_session.request.side_effect = aiohttp.ClientConnectionError("connection refused")
    mock_session_manager.get_session.return_value = mock_session

    with pytest.raises(RequestError) as exc_info:
        await executor.execute_request("PUT", "https://points.test/v1/x", {}, "/v1/x", "test_op")

    assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)
    assert mock_session.request.call_count == 1


@pytest.mark.asyncio
async def test_malformed_json_body_is_request_error(executor, mock_session_manager):
    _install_response(
        mock_session_manager,
        payload="{not json",
        json_error=json.JSONDecodeError("Expecting property name", "{not json", 1),
    )

    with pytest.raises(RequestError) as exc_info:
        await executor.execute_request("POST", "https://points.test/v1/x", {}, "/v1/x", "test_op")

    assert "not JSON" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


@pytest.mark.asyncio
async def test_timeout_is_request_error(executor, mock_session_manager):
    mock_session = MagicMock()
    mock_session.request.side_effect = asyncio.TimeoutError()
    mock_session_manager.get_session.return_value = mock_session

    with pytest.raises(RequestError) as exc_info:
        await executor.execute_request("GET", "https://points.test/v1/x", {}, "/v1/x", "test_op")

    assert isinstance(exc_info.value.__cause__, asyncio.TimeoutError)
    assert exc_info.value.path == "/v1/x"
    assert mock_session.request.call_count == 1


@pytest.mark.asyncio
async def test_timeout_while_reading_body_is_request_error(executor, mock_session_manager):
    mock_session = _install_response(mock_session_manager, payload={"success": True})
    mock_session.request.return_value.__aenter__.return_value.text = AsyncMock(side_effect=asyncio.TimeoutError())

    with pytest.raises(RequestError):
        await executor.execute_request("GET", "https://points.test/v1/x", {}, "/v1/x", "test_op")
