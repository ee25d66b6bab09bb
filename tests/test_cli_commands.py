import json

import httpx
import pytest
from typer.testing import CliRunner

from odoosearch import __version__
from odoosearch.cli import commands
from odoosearch.cli.command_groups import records_command
from odoosearch.cli.shared import client_utils
from odoosearch.client import OdooClient

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {"odoo": {"url": "https://example.odoo.com/", "database": "acme", "userLogin": "api", "apiKey": "k"}}
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def backend(fake_odoo, monkeypatch):
    def _make_client(config, notifier):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_odoo.handler))
        return OdooClient.from_config(config, notifier, http_client=http_client)

    monkeypatch.setattr(client_utils, "make_client", _make_client)
    return fake_odoo


def _invoke(config_file, *args):
    return runner.invoke(commands.app, ["--config", str(config_file), *args])


def test_version():
    result = runner.invoke(commands.app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_link_prints_deep_links(config_file):
    result = _invoke(config_file, "link", "projects", "12")
    assert result.exit_code == 0
    assert result.output.strip() == "https://example.odoo.com/odoo/action-369/12/tasks"

    result = _invoke(config_file, "link", "helpdesk.team", "3", "--form")
    assert result.output.strip() == "https://example.odoo.com/web#id=3&model=helpdesk.team&view_type=form"


def test_open_print_only(config_file):
    result = _invoke(config_file, "open", "helpdesk", "3", "--print")
    assert result.exit_code == 0
    assert result.output.strip() == "https://example.odoo.com/odoo/helpdesk/3/tickets"


def test_unknown_view_exits_2(config_file):
    result = _invoke(config_file, "link", "invoices", "1")
    assert result.exit_code == 2
    assert "Unknown view" in result.output


def test_list_renders_records(config_file, backend):
    result = _invoke(config_file, "list", "projects")
    assert result.exit_code == 0, result.output
    assert "Website Revamp" in result.output
    assert "Mobile App" in result.output
    assert backend.execute_calls[0]["params"]["args"][6]["limit"] == 100


def test_list_respects_limit_option(config_file, backend):
    result = _invoke(config_file, "list", "projects", "--limit", "1")
    assert result.exit_code == 0, result.output
    assert "Mobile App" not in result.output


def test_search_filters_by_name(config_file, backend):
    result = _invoke(config_file, "search", "projects", "web")
    assert result.exit_code == 0, result.output
    assert "Website Revamp" in result.output
    assert "Mobile App" not in result.output
    assert len(backend.login_calls) == 1


def test_search_short_text_prints_hint_without_request(config_file, backend):
    result = _invoke(config_file, "search", "projects", "w")
    assert result.exit_code == 0
    assert "Type at least 2 characters" in result.output
    assert backend.requests == []


def test_search_without_matches_prints_empty_state(config_file, backend):
    result = _invoke(config_file, "search", "projects", "zzz")
    assert result.exit_code == 0
    assert "No projects found" in result.output


def test_backend_failure_is_reported_and_exits_1(config_file, backend):
    backend.status_code = 500
    result = _invoke(config_file, "list", "helpdesk")
    assert result.exit_code == 1
    assert "Authentication Error" in result.output
    assert "500" in result.output


def test_status_checks_login(config_file, backend):
    result = _invoke(config_file, "status")
    assert result.exit_code == 0, result.output
    assert "uid 7" in result.output


def test_missing_credentials_exit_1(tmp_path, backend):
    result = _invoke(tmp_path / "absent.json", "list", "projects")
    assert result.exit_code == 1
    assert "not configured" in result.output
    assert backend.requests == []


def test_config_set_get_and_mask(tmp_path):
    path = tmp_path / "config.json"
    assert _invoke(path, "config", "set", "odoo.apiKey", "s3cret").exit_code == 0
    assert _invoke(path, "config", "set", "search.minChars", "3").exit_code == 0

    assert json.loads(path.read_text(encoding="utf-8")) == {"odoo": {"apiKey": "s3cret"}, "search": {"minChars": 3}}
    result = _invoke(path, "config", "get", "odoo.apiKey")
    assert "s3cret" not in result.output
    assert "***" in result.output
    assert _invoke(path, "config", "get", "search.minChars").output.strip() == "3"

    shown = _invoke(path, "config", "show")
    assert shown.exit_code == 0
    assert "s3cret" not in shown.output


def test_config_set_rejects_invalid_value(tmp_path):
    path = tmp_path / "config.json"
    result = _invoke(path, "config", "set", "search.minChars", "0")
    assert result.exit_code == 1
    assert "no longer validates" in result.output


def test_config_unset_missing_key(tmp_path):
    result = _invoke(tmp_path / "config.json", "config", "unset", "odoo.url")
    assert result.exit_code == 1


@pytest.mark.parametrize("opened, exit_code", [(True, 0), (False, 1)])
def test_open_uses_browser(config_file, monkeypatch, opened, exit_code):
    seen = []

    def _open(url):
        seen.append(url)
        return opened

    monkeypatch.setattr(records_command.webbrowser, "open", _open)
    result = _invoke(config_file, "open", "projects", "12")
    assert result.exit_code == exit_code
    assert seen == ["https://example.odoo.com/odoo/action-369/12/tasks"]
