"""Tests for the CLI commands."""

import json
from unittest.mock import Mock, patch

import httpx
import pytest
from typer.testing import CliRunner

from aisum.cli import app
from aisum.llm.base import LLMResponse

runner = CliRunner()

ARTICLE_TEXT = "The city council approved a plan to convert three downtown garages into housing. " * 3


def _response(parsed: dict) -> LLMResponse:
    return LLMResponse(parsed=parsed, raw_text="{}", input_tokens=10, output_tokens=5)


@pytest.fixture
def cli_client():
    """Patch the CLI's client factory with a mock."""
    client = Mock()
    with patch("aisum.cli.default_client", return_value=client):
        yield client


def test_summarize_text_json(cli_client: Mock) -> None:
    cli_client.generate.return_value = _response({"summary": "Garages become homes."})

    result = runner.invoke(app, ["summarize", ARTICLE_TEXT, "--format", "json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"summary": "Garages become homes."}


def test_summarize_from_file(cli_client: Mock, tmp_path) -> None:
    cli_client.generate.return_value = _response({"summary": "From a file."})
    article = tmp_path / "article.txt"
    article.write_text(ARTICLE_TEXT)

    result = runner.invoke(app, ["summarize", "--file", str(article), "--format", "text"])

    assert result.exit_code == 0
    assert "From a file." in result.stdout


def test_summarize_short_text_fails(cli_client: Mock) -> None:
    """Validation failures exit non-zero without calling the model."""
    result = runner.invoke(app, ["summarize", "too short", "--format", "text"])

    assert result.exit_code == 1
    assert "Error" in result.output
    cli_client.generate.assert_not_called()


@patch("aisum.ingest.fetcher.httpx.get")
def test_summarize_url_fetches_then_summarizes(mock_get: Mock, cli_client: Mock) -> None:
    """--url runs extraction first and summarizes the extracted text."""
    mock_get.return_value = httpx.Response(
        200,
        text=f"<html><body><article><p>{ARTICLE_TEXT}</p></article></body></html>",
        request=httpx.Request("GET", "https://news.example/garages"),
    )
    cli_client.generate.side_effect = [
        _response({"article_content": ARTICLE_TEXT}),
        _response({"summary": "Garages become homes."}),
    ]

    result = runner.invoke(
        app, ["summarize", "--url", "https://news.example/garages", "--format", "text"]
    )

    assert result.exit_code == 0
    assert "Garages become homes." in result.stdout
    assert cli_client.generate.call_count == 2


@patch("aisum.ingest.fetcher.httpx.get")
def test_fetch_404_fails(mock_get: Mock, cli_client: Mock) -> None:
    mock_get.return_value = httpx.Response(
        404, request=httpx.Request("GET", "https://news.example/missing")
    )

    result = runner.invoke(app, ["fetch", "https://news.example/missing"])

    assert result.exit_code == 1
    assert "Error" in result.output
    cli_client.generate.assert_not_called()


def test_digest_with_interests(cli_client: Mock) -> None:
    cli_client.generate.return_value = _response(
        {"summary": "Robots and rules.", "articles": ["Robot arms get cheaper", "New AI act passes"]}
    )

    result = runner.invoke(
        app,
        ["digest", "-i", "Robotics", "-i", "Ethical AI", "--count", "2", "--format", "text"],
    )

    assert result.exit_code == 0
    assert "Robots and rules." in result.stdout
    assert "- Robot arms get cheaper" in result.stdout
    prompt = cli_client.generate.call_args.kwargs["prompt"]
    assert "- robotics\n- ethical ai" in prompt
    assert "top 2 articles" in prompt


def test_digest_defaults_to_catalog(cli_client: Mock) -> None:
    cli_client.generate.return_value = _response({"summary": "Overview", "articles": []})

    result = runner.invoke(app, ["digest", "--format", "json"])

    assert result.exit_code == 0
    prompt = cli_client.generate.call_args.kwargs["prompt"]
    assert "- machine learning" in prompt
    assert "- generative ai" in prompt
    assert "top 5 articles" in prompt


def test_interests_lists_catalog() -> None:
    result = runner.invoke(app, ["interests"])

    assert result.exit_code == 0
    assert "robotics" in result.stdout


def test_missing_api_key_reports_configuration_error(monkeypatch) -> None:
    monkeypatch.delenv("LLM_API_KEY", raising=False)

    result = runner.invoke(app, ["summarize", ARTICLE_TEXT])

    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_summarize_non_utf8_file_fails(cli_client: Mock, tmp_path) -> None:
    """Undecodable files are reported like any other failure."""
    article = tmp_path / "article.txt"
    article.write_bytes(b"\xff\xfe broken bytes " * 20)

    result = runner.invoke(app, ["summarize", "--file", str(article)])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error" in result.output
    cli_client.generate.assert_not_called()


def test_summarize_applies_configured_article_limit(cli_client: Mock, monkeypatch) -> None:
    monkeypatch.setenv("MAX_ARTICLE_CHARS", "1000")
    cli_client.generate.return_value = _response({"summary": "Trimmed."})

    result = runner.invoke(app, ["summarize", "word " * 400, "--format", "text"])

    assert result.exit_code == 0
    prompt = cli_client.generate.call_args.kwargs["prompt"]
    assert "[Content truncated...]" in prompt
