from __future__ import annotations

import httpx
import pytest
from typer.testing import CliRunner

from cli import main as cli_main
from cli.state import CliState
from core import config as core_config
from core.config import AppSettings
from mcp_server import McpTransport

from conftest import RecordingHandler, json_handler, make_settings, mock_client, space_payload

runner = CliRunner()


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli_main, "setup_app_logging", lambda settings: None)


def invoke(args, handler, settings=None):
    state = CliState(settings=settings or make_settings(), client=mock_client(handler))
    return runner.invoke(cli_main.app, args, obj=state)


def test_list_spaces_prints_markdown():
    handler = json_handler({"results": [space_payload()], "_links": {}})

    result = invoke(["list-spaces", "--type", "global", "--limit", "5"], handler)

    assert result.exit_code == 0, result.output
    assert "# Confluence Spaces" in result.output
    assert "- **Key**: ENG" in result.output
    assert dict(handler.last.url.params) == {"type": "global", "limit": "5"}


def test_list_spaces_rejects_unknown_type():
    handler = json_handler({"results": []})

    result = invoke(["list-spaces", "--type", "bogus"], handler)

    assert result.exit_code != 0
    assert handler.requests == []


def test_get_space_failure_exits_non_zero():
    handler = RecordingHandler(lambda request: httpx.Response(404))

    result = invoke(["get-space", "invalid-space-id"], handler)

    assert result.exit_code == 1
    assert "Error getting Confluence space: Atlassian API error: 404 Not Found" in result.output


def test_missing_credentials_exit_non_zero():
    handler = json_handler({})

    result = invoke(["list-pages"], handler, settings=make_settings(atlassian_site_name=None))

    assert result.exit_code == 1
    assert "Atlassian credentials are required to list pages" in result.output
    assert handler.requests == []


def test_get_page_prints_details():
    handler = json_handler(
        {
            "id": "777",
            "status": "current",
            "title": "Runbook",
            "spaceId": "1",
            "authorId": "a",
            "createdAt": "2024-02-01T08:00:00Z",
            "_links": {"webui": "/pages/777"},
        }
    )

    result = invoke(["get-page", "777"], handler)

    assert result.exit_code == 0, result.output
    assert "# Confluence Page: Runbook" in result.output


def test_no_command_starts_the_server(monkeypatch):
    started = []
    monkeypatch.setattr(cli_main, "serve", lambda settings: started.append(settings))
    settings = make_settings()

    result = runner.invoke(cli_main.app, [], obj=CliState(settings=settings))

    assert result.exit_code == 0
    assert started == [settings]


def test_version_flag():
    result = runner.invoke(cli_main.app, ["--version"])

    assert result.exit_code == 0
    assert cli_main.VERSION in result.output


def test_doctor_run_reports_missing_credentials():
    handler = json_handler({})

    result = invoke(["doctor", "run"], handler, settings=make_settings(atlassian_user_email=None))

    assert result.exit_code == 1
    assert "MISSING" in result.output
    assert handler.requests == []


def test_doctor_run_checks_the_api():
    handler = json_handler({"results": [space_payload()], "_links": {}})

    result = invoke(["doctor", "run"], handler)

    assert result.exit_code == 0, result.output
    assert handler.last.url.params["limit"] == "1"


def test_doctor_setup_writes_user_env(monkeypatch, tmp_path):
    env_file = tmp_path / "confluence-mcp" / ".env"
    monkeypatch.setattr(core_config, "get_user_env_file", lambda: env_file)

    result = runner.invoke(
        cli_main.app,
        ["doctor", "setup"],
        input="https://acme.atlassian.net\nme@acme.io\nsecret\n",
        obj=CliState(settings=make_settings()),
    )

    assert result.exit_code == 0, result.output
    content = env_file.read_text(encoding="utf-8")
    assert "ATLASSIAN_SITE_NAME=acme" in content
    assert "ATLASSIAN_USER_EMAIL=me@acme.io" in content
    assert "ATLASSIAN_API_TOKEN=secret" in content


def test_unrecognised_debug_value_does_not_break_startup(monkeypatch):
    monkeypatch.setattr(cli_main, "AppSettings", lambda: AppSettings(_env_file=None))
    monkeypatch.setenv("DEBUG", "*")

    result = runner.invoke(cli_main.app, ["list-spaces"])

    assert result.exit_code == 1
    assert "Error listing Confluence spaces: Atlassian credentials are required to list spaces" in result.output


def test_invalid_configuration_is_one_error_line(monkeypatch):
    monkeypatch.setattr(cli_main, "AppSettings", lambda: AppSettings(_env_file=None))
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "0")

    result = runner.invoke(cli_main.app, ["list-spaces"])

    assert result.exit_code == 1
    assert result.output.strip().splitlines() == [
        "Error loading configuration: http_timeout_seconds: Input should be greater than 0"
    ]


def test_serve_passes_the_chosen_transport(monkeypatch):
    calls = []
    monkeypatch.setattr(cli_main, "serve", lambda settings, transport: calls.append(transport))

    result = runner.invoke(cli_main.app, ["serve", "--transport", "sse"], obj=CliState(settings=make_settings()))

    assert result.exit_code == 0, result.output
    assert calls == [McpTransport.SSE]


def test_serve_rejects_unknown_transport(monkeypatch):
    calls = []
    monkeypatch.setattr(cli_main, "serve", lambda settings, transport: calls.append(transport))

    result = runner.invoke(cli_main.app, ["serve", "--transport", "carrier-pigeon"], obj=CliState(settings=make_settings()))

    assert result.exit_code == 2
    assert calls == []
