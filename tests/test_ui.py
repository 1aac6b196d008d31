import pytest

from drillings import ui


@pytest.fixture
def plain(monkeypatch):
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def coloured(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("CLICOLOR_FORCE", "1")


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert ui.no_emoji() is False


@pytest.mark.parametrize("styler", [ui.bold, ui.red, ui.green, ui.blue])
def test_plain_styles_return_text(plain, styler):
    assert styler("hello") == "hello"


@pytest.mark.parametrize("styler", [ui.bold, ui.red, ui.green, ui.blue])
def test_coloured_styles_wrap_text(coloured, styler):
    result = styler("hello")
    assert result.startswith("\x1b[")
    assert result.endswith("\x1b[0m")
    assert "hello" in result
    assert len(result) > len("hello")


def test_coloured_styles_differ(coloured):
    assert len({ui.bold("x"), ui.red("x"), ui.green("x"), ui.blue("x")}) == 4


def test_styles_accept_numbers(plain):
    assert ui.blue(12) == "12"


def test_warn_without_emoji(plain, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("Ran intro1 with errors")
    assert capsys.readouterr().out == "! Ran intro1 with errors\n"


def test_success_without_emoji(plain, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("Successfully ran intro1")
    assert capsys.readouterr().out == "✓ Successfully ran intro1\n"


def test_warn_with_emoji(plain, monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.warn("broken")
    out = capsys.readouterr().out
    assert out.startswith("⚠️")
    assert out.rstrip("\n").endswith("broken")


def test_success_with_emoji(plain, monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.success("fine")
    out = capsys.readouterr().out
    assert out.startswith("✅")
    assert out.rstrip("\n").endswith("fine")


def test_warn_is_red_when_coloured(coloured, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("oops")
    assert ui.red("oops") in capsys.readouterr().out