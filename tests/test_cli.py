"""Tests for the console entry point (cli.py)."""

from __future__ import annotations

import zlib

import pytest

from einsum_share_url import cli
from einsum_share_url.codec import BASE_URL


@pytest.fixture(autouse=True)
def _no_colorama_wrapping(monkeypatch: pytest.MonkeyPatch) -> None:
    # colorama.init replaces sys.stdout/sys.stderr process-wide
    monkeypatch.setattr(cli, "colorama_init", lambda **kwargs: None)
    monkeypatch.delenv(cli.BASE_URL_ENV, raising=False)


def _printed_url(out: str) -> str:
    return out.split()[-1]


class TestMain:
    def test_prints_shareable_url(self, capsys: pytest.CaptureFixture[str], decode_query_value) -> None:
        assert cli.main([]) == cli.SUCCESS

        out = capsys.readouterr().out
        assert "Shareable URL:" in out

        url = _printed_url(out)
        assert url.startswith(BASE_URL + "?e=")
        expr, sizes = url.split("?e=", 1)[1].split("&s=")
        assert decode_query_value(expr) == f'"{cli.DEFAULT_EXPRESSION}"'.encode()
        assert decode_query_value(sizes) == b"[" + b", ".join([b"2"] * 88) + b"]"

    def test_base_url_from_environment(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(cli.BASE_URL_ENV, "http://localhost:5173/")

        assert cli.main([]) == cli.SUCCESS
        assert _printed_url(capsys.readouterr().out).startswith("http://localhost:5173/?e=")

    def test_compression_error_reported(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _broken(*args: object, **kwargs: object) -> None:
            raise zlib.error("Error -2 while initializing")

        monkeypatch.setattr(zlib, "compressobj", _broken)

        assert cli.main([]) == cli.GENERAL_ERROR
        captured = capsys.readouterr()
        assert "Error: deflate init failed" in captured.err
        assert "Shareable URL" not in captured.out


class TestDefaults:
    def test_expression_covers_all_indices(self) -> None:
        assert "->[11,25]" in cli.DEFAULT_EXPRESSION
        assert len(cli.DEFAULT_INDEX_SIZES) == 88

    def test_expression_has_no_whitespace(self) -> None:
        assert not any(ch.isspace() for ch in cli.DEFAULT_EXPRESSION)
