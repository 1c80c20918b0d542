import io

import pytest

from gel_scraper import SnapshotDocument, SwatchElement
from gel_scraper import cli

EXPECTED_TWO = (
    'color_gel!("Red Filter", [1.0000, 0.0000, 0.0000]),\n'
    'color_gel!("Soft Blue", [0.0000, 0.5020, 1.0000]),\n'
)


@pytest.fixture
def page(tmp_path, two_swatch_html):
    path = tmp_path / "filters.html"
    path.write_text(two_swatch_html, encoding="utf-8")
    return path


def test_prints_literals_to_stdout(page, capsys):
    assert cli.main([str(page)]) == cli.EXIT_OK
    assert capsys.readouterr().out == EXPECTED_TWO


def test_reads_page_from_stdin(monkeypatch, capsys, two_swatch_html):
    monkeypatch.setattr("sys.stdin", io.StringIO(two_swatch_html))
    assert cli.main(["-"]) == cli.EXIT_OK
    assert capsys.readouterr().out == EXPECTED_TWO


def test_empty_selection_prints_nothing(tmp_path, capsys):
    path = tmp_path / "empty.html"
    path.write_text("<html><body></body></html>", encoding="utf-8")
    assert cli.main([str(path)]) == cli.EXIT_OK
    assert capsys.readouterr().out == ""


def test_malformed_color_aborts_without_output(tmp_path, capsys, malformed_middle_html):
    path = tmp_path / "bad.html"
    path.write_text(malformed_middle_html, encoding="utf-8")
    assert cli.main([str(path)]) == cli.EXIT_MALFORMED
    assert capsys.readouterr().out == ""


def test_skip_malformed_reports_and_continues(tmp_path, capsys, malformed_middle_html):
    path = tmp_path / "bad.html"
    path.write_text(malformed_middle_html, encoding="utf-8")
    assert cli.main([str(path), "--skip-malformed"]) == cli.EXIT_OK
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        'color_gel!("19 Fire", [1.0000, 0.5137, 0.1529]),',
        'color_gel!("26 Bright Red", [1.0000, 0.0000, 0.0706]),',
    ]
    assert "Skipped 1 element(s) with malformed colors:" in captured.err
    assert "'Broken'" in captured.err


def test_missing_file_exits_with_input_error(tmp_path, capsys):
    assert cli.main([str(tmp_path / "nope.html")]) == cli.EXIT_INPUT
    assert capsys.readouterr().out == ""


def test_writes_module_to_output_file(page, tmp_path, capsys):
    out = tmp_path / "lee.rs"
    assert cli.main([str(page), "--const", "LEE_COLOR_GELS", "-o", str(out)]) == cli.EXIT_OK
    assert capsys.readouterr().out == ""
    content = out.read_text(encoding="utf-8")
    assert content.startswith("use crate::color_gel;\n\nuse super::ColorGel;\n\n")
    assert content.endswith("];\n")


def test_rejects_bad_const_name(page):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(page), "--const", "lee"])
    assert excinfo.value.code == 2


def test_browser_flag_uses_rendered_snapshot(page, monkeypatch, capsys):
    seen = {}

    async def fake_render(html, selector, config):
        seen["selector"] = selector
        seen["html"] = html
        return SnapshotDocument(
            {selector: [SwatchElement(text="Hex Red", background_color="rgb(255, 0, 0)")]}
        )

    monkeypatch.setattr(cli, "render_browser_document", fake_render)
    assert cli.main([str(page), "--browser"]) == cli.EXIT_OK
    assert capsys.readouterr().out == 'color_gel!("Hex Red", [1.0000, 0.0000, 0.0000]),\n'
    assert seen["selector"] == ".colours-list__tooltip-wrapper > a"
    assert "Soft Blue" in seen["html"]


def test_browser_failure_exits_with_input_error(page, monkeypatch):
    async def failing_render(html, selector, config):
        raise RuntimeError("Playwright is not installed in this environment.")

    monkeypatch.setattr(cli, "render_browser_document", failing_render)
    assert cli.main([str(page), "--browser"]) == cli.EXIT_INPUT


def test_undecodable_page_exits_with_input_error(tmp_path, capsys):
    path = tmp_path / "latin1.html"
    path.write_bytes("<html><body>Caf\xe9</body></html>".encode("latin-1"))
    assert cli.main([str(path)]) == cli.EXIT_INPUT
    assert capsys.readouterr().out == ""


def test_unwritable_output_exits_with_input_error(page, tmp_path):
    out = tmp_path / "missing" / "lee.rs"
    assert cli.main([str(page), "-o", str(out)]) == cli.EXIT_INPUT
    assert not out.exists()


def test_browser_launch_failure_exits_with_input_error(page, monkeypatch):
    from gel_scraper.documents import browser_playwright

    class BrokenPlaywright:
        async def __aenter__(self):
            raise Exception("Executable doesn't exist at /ms-playwright/chromium")

        async def __aexit__(self, *exc_info):
            return False

    monkeypatch.setattr(browser_playwright, "async_playwright", BrokenPlaywright)
    assert cli.main([str(page), "--browser"]) == cli.EXIT_INPUT
