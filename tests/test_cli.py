import json

import pytest

from wikipedia_tools import cli
from wikipedia_tools.plugin import WikipediaPlugin


@pytest.fixture
def fake_plugin(monkeypatch, make_transport):
    """Route the CLI's plugin through a fake transport and return that transport."""
    holder = {}

    def _use(status=200, body=""):
        transport = make_transport(status=status, body=body)
        holder["transport"] = transport
        monkeypatch.setattr(cli, "WikipediaPlugin", lambda: WikipediaPlugin(transport=transport))
        return transport

    return _use


def test_search_prints_json(fake_plugin, capsys):
    transport = fake_plugin(body='{"query":{"search":[{"title":"A"}]}}')

    code = cli.main(["search", "x", "--limit", "2"])

    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out["query"]["search"][0]["title"] == "A"
    assert "srlimit=2" in transport.calls[0]["url"]


def test_page_prints_markup(fake_plugin, capsys):
    fake_plugin(body="{{Infobox}}")

    assert cli.main(["page", "Pet door"]) == 0
    assert capsys.readouterr().out == "{{Infobox}}\n"


def test_base_url_flag(fake_plugin):
    transport = fake_plugin(body="{}")

    assert cli.main(["--base-url", "https://es.wikipedia.org", "search", "x"]) == 0
    assert transport.calls[0]["url"].startswith("https://es.wikipedia.org/w/api.php?")


def test_upstream_error_exit_code(fake_plugin, capsys):
    fake_plugin(status=404, body="Not Found")

    assert cli.main(["page", "X"]) == 1
    assert "Error: [wikipedia_getPage] Wikipedia page retrieval failed (404)" in capsys.readouterr().err


def test_invalid_arguments_exit_code(fake_plugin, capsys):
    transport = fake_plugin(body="{}")

    assert cli.main(["search", "x", "--limit", "900"]) == 1
    assert "invalid arguments" in capsys.readouterr().err
    assert transport.calls == []


def test_dry_run_prints_url_without_requests(fake_plugin, capsys):
    transport = fake_plugin(body="{}")

    assert cli.main(["--dry-run", "page", "Pet door"]) == 0
    assert capsys.readouterr().out.strip() == "https://en.wikipedia.org/w/index.php?title=Pet+door&action=raw"
    assert transport.calls == []


def test_invalid_base_url(capsys):
    assert cli.main(["--base-url", "not-a-url", "search", "x"]) == 2
    assert "Error:" in capsys.readouterr().err


def test_dry_run_search_with_namespace(fake_plugin, capsys):
    transport = fake_plugin(body="{}")

    assert cli.main(["--dry-run", "search", "x", "--namespace", "4"]) == 0
    out = capsys.readouterr().out.strip()
    assert "srnamespace=4" in out
    assert "srlimit=10" in out
    assert transport.calls == []


def test_search_with_namespace_queries_that_namespace(fake_plugin, capsys):
    transport = fake_plugin(body='{"query":{"search":[{"title":"Wikipedia:About"}]}}')

    assert cli.main(["search", "about", "--namespace", "4", "--limit", "1"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["query"]["search"][0]["title"] == "Wikipedia:About"
    assert "srnamespace=4" in transport.calls[0]["url"]
    assert "srlimit=1" in transport.calls[0]["url"]


def test_search_with_namespace_prefixes_errors(fake_plugin, capsys):
    fake_plugin(status=500, body="")

    assert cli.main(["search", "x", "--namespace", "4"]) == 1
    assert "Error: [wikipedia_search] Wikipedia search failed (500)" in capsys.readouterr().err


def test_negative_namespace_exit_code(fake_plugin, capsys):
    transport = fake_plugin(body="{}")

    assert cli.main(["search", "x", "--namespace", "-1"]) == 1
    assert "Error:" in capsys.readouterr().err
    assert transport.calls == []


def test_invalid_settings_exit_code(monkeypatch, capsys):
    from wikipedia_tools.infrastructure.config import settings as settings_module

    monkeypatch.setenv("WIKIPEDIA_BASE_URL", "ftp://x")
    monkeypatch.setattr(settings_module, "_settings", None)
    code = cli.main(["search", "x"])
    monkeypatch.delenv("WIKIPEDIA_BASE_URL")

    assert code == 2
    assert "Error: invalid settings" in capsys.readouterr().err
