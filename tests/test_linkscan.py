import httpx
import respx
from typer.testing import CliRunner

from fuze import cli as fuze_cli
from fuze.services.linkscan import cli as cli_mod

runner = CliRunner()

def _site(router):
    router.get("https://site.test/").mock(
        return_value=httpx.Response(
            200,
            text='<a href="/ok">ok</a> <a href="/broken">broken</a> <a href="https://elsewhere.test/">x</a>',
        )
    )
    router.get("https://site.test/ok").mock(
        return_value=httpx.Response(200, text="<html><body>OK</body></html>")
    )
    router.get("https://site.test/broken").mock(return_value=httpx.Response(500))

def test_crawl_reports_broken_links():
    with respx.mock(assert_all_called=False) as router:
        _site(router)
        result = runner.invoke(cli_mod.app, ["https://site.test/index.html"])
        assert not any(c.request.url.host == "elsewhere.test" for c in router.calls)
        assert router.calls.call_count == 3
    assert result.exit_code == 0, result.output
    assert "https://site.test/broken" in result.output
    assert "[500]" in result.output
    assert "visited" in result.output

def test_invalid_seed_exits_without_fetching():
    with respx.mock(assert_all_called=False) as router:
        result = runner.invoke(cli_mod.app, ["not-a-url"])
        assert router.calls.call_count == 0
    assert result.exit_code == 1
    assert "is not a valid URL" in result.output

def test_connection_refused_seed_still_completes():
    with respx.mock(assert_all_called=False) as router:
        router.get("https://down.test/").mock(side_effect=httpx.ConnectError("refused"))
        result = runner.invoke(cli_mod.app, ["https://down.test/", "--workers", "2"])
    assert result.exit_code == 0, result.output
    assert "[ERR]" in result.output

def test_top_level_app_takes_a_single_url():
    with respx.mock(assert_all_called=False) as router:
        router.get("https://clean.test/").mock(return_value=httpx.Response(200, text="no links"))
        result = runner.invoke(fuze_cli.app, ["https://clean.test"])
    assert result.exit_code == 0, result.output
    assert "No broken link detected" in result.output
