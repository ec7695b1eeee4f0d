"""Tests for the CDDB client facade."""

from __future__ import annotations

import pytest

from cddbtool.features.disc import TableOfContents
from cddbtool.features.xmcd import CddbMatch
from cddbtool.platform.cddb.client import CddbClient
from cddbtool.platform.cddb.http_client import HTTPResult
from cddbtool.shared.errors import CddbTransportError, IdentityValidationError, InvalidTocError

CGI = "http://example.org/~cddb/cddb.cgi"


class _FakeHTTP:
    def __init__(self, *bodies: bytes) -> None:
        self.bodies: list[bytes] = list(bodies)
        self.calls: list[tuple[str, dict[str, str]]] = []

    def get_bytes(self, url: str, headers: dict[str, str]) -> HTTPResult:
        self.calls.append((url, headers))
        return HTTPResult(status=200, headers={}, content=self.bodies.pop(0))


class _FailingHTTP:
    def get_bytes(self, url: str, headers: dict[str, str]) -> HTTPResult:
        raise CddbTransportError("boom", url=url, status=500)


def _client(http: object, **kwargs: object) -> CddbClient:
    return CddbClient(CGI, "user", "host", http_client=http, **kwargs)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("user", "host"),
    [(None, "host"), ("user", None), ("", "host"), ("user", "   ")],
)
def test_identity_is_required(user: str | None, host: str | None) -> None:
    with pytest.raises(IdentityValidationError):
        _ = CddbClient(CGI, user, host)


def test_blank_cgi_base_is_rejected() -> None:
    with pytest.raises(IdentityValidationError):
        _ = CddbClient(" ", "user", "host")


def test_unknown_encoding_falls_back_to_utf8() -> None:
    client = CddbClient(CGI, "user", "host", encoding="klingon-8")

    assert client.encoding == "utf-8"
    assert client.encoding_resolution.fell_back


def test_non_text_codec_falls_back_and_still_decodes(three_track_toc: TableOfContents) -> None:
    client = _client(_FakeHTTP(b"202 No match found\r\n"), encoding="base64")

    assert client.encoding == "utf-8"
    assert client.encoding_resolution.fell_back
    assert client.query(three_track_toc) == []


def test_defaults() -> None:
    client = CddbClient(CGI, "user", "host")

    assert client.encoding == "euc_jp"
    assert client.proto_level == 6
    assert client.user_agent == "cddbtool/0.1.0"


def test_query_builds_url_and_returns_matches(three_track_toc: TableOfContents) -> None:
    http = _FakeHTTP(b"200 rock 21088c03 Artist / Title\r\n")
    client = _client(http, app_name="tester", app_version="2.0", proto_level=5)

    matches = client.query(three_track_toc)

    assert matches == [CddbMatch("rock", "21088c03", "Artist / Title")]
    url, headers = http.calls[0]
    assert url == (
        f"{CGI}?cmd=cddb+query+21088c03+3+150+22343+46248+2188"
        "&hello=user+host+tester+2.0&proto=5"
    )
    assert headers == {"User-Agent": "tester/2.0"}


def test_query_no_match(three_track_toc: TableOfContents) -> None:
    client = _client(_FakeHTTP(b"202 No match found\r\n"))

    assert client.query(three_track_toc) == []


def test_query_rejects_empty_toc_before_network() -> None:
    http = _FakeHTTP()
    client = _client(http)

    with pytest.raises(InvalidTocError):
        _ = client.query(TableOfContents.from_offsets([], 0))
    assert http.calls == []


def test_query_propagates_transport_errors(three_track_toc: TableOfContents) -> None:
    client = _client(_FailingHTTP())

    with pytest.raises(CddbTransportError):
        _ = client.query(three_track_toc)


def test_read_decodes_with_configured_encoding() -> None:
    body = "210 rock 21088c03 CD database entry follows\nDTITLE=歌手 / アルバム\nTTITLE0=曲\n.\n"
    http = _FakeHTTP(body.encode("euc-jp"))
    client = _client(http, encoding="euc-jp")

    lines = client.read("rock", "21088c03")

    assert lines == ["DTITLE=歌手 / アルバム", "TTITLE0=曲"]
    assert "cmd=cddb+read+rock+21088c03" in http.calls[0][0]


def test_read_returns_none_without_record() -> None:
    client = _client(_FakeHTTP(b"401 rock 21088c03 No such CD entry in database\n"))

    assert client.read("rock", "21088c03") is None


def test_read_record_parses_lines() -> None:
    client = _client(_FakeHTTP(b"210 OK\nDTITLE=A / B\nTTITLE1=Two\n.\n"), encoding="utf-8")

    record = client.read_record("misc", "00000001")

    assert record is not None
    assert record.category == "misc"
    assert record.d_title == "A / B"
    assert record.track_titles == ["", "Two"]


def test_read_record_none_without_record() -> None:
    client = _client(_FakeHTTP(b"202 nothing\n"))

    assert client.read_record("misc", "00000001") is None


def test_undecodable_bytes_are_replaced() -> None:
    client = _client(_FakeHTTP(b"210 OK\nDTITLE=\xff\xfe / x\n.\n"), encoding="utf-8")

    lines = client.read("misc", "1")

    assert lines is not None
    assert lines[0].startswith("DTITLE=")
