"""Tests for the requests-based CDDB HTTP adapter."""

from __future__ import annotations

import pytest
import requests
from pytest_mock import MockerFixture

from cddbtool.platform.cddb.http_client import CddbHTTPClient
from cddbtool.shared.errors import CddbTransportError

URL = "http://example.org/cddb.cgi?cmd=cddb+read+rock+1&hello=u+h+a+1&proto=6"


def test_get_bytes_returns_raw_content(mocker: MockerFixture) -> None:
    response = mocker.Mock(status_code=200, headers={"Content-Type": "text/plain"}, content=b"210 OK\n")
    mock_get = mocker.patch("cddbtool.platform.cddb.http_client.requests.get", return_value=response)

    result = CddbHTTPClient(timeout=(1.0, 2.0)).get_bytes(URL, {"User-Agent": "app/1"})

    assert result.status == 200
    assert result.content == b"210 OK\n"
    assert result.headers == {"Content-Type": "text/plain"}
    mock_get.assert_called_once_with(URL, headers={"User-Agent": "app/1"}, timeout=(1.0, 2.0))


@pytest.mark.parametrize("status", [301, 404, 500, 503])
def test_non_success_status_raises(mocker: MockerFixture, status: int) -> None:
    response = mocker.Mock(status_code=status, headers={}, content=b"")
    _ = mocker.patch("cddbtool.platform.cddb.http_client.requests.get", return_value=response)

    with pytest.raises(CddbTransportError) as excinfo:
        _ = CddbHTTPClient().get_bytes(URL, {})

    assert excinfo.value.status == status
    assert excinfo.value.url == URL


def test_connection_errors_propagate_as_transport_errors(mocker: MockerFixture) -> None:
    mock_get = mocker.patch(
        "cddbtool.platform.cddb.http_client.requests.get",
        side_effect=requests.ConnectionError("refused"),
    )

    with pytest.raises(CddbTransportError) as excinfo:
        _ = CddbHTTPClient().get_bytes(URL, {})

    assert excinfo.value.status is None
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)
    mock_get.assert_called_once()
