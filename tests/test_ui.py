import pytest

from lingsrunner import ui


@pytest.fixture
def plain(monkeypatch):
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)
    monkeypatch.setenv("CLICOLOR", "0")


@pytest.fixture
def coloured(monkeypatch):
    monkeypatch.setenv("CLICOLOR_FORCE", "1")


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert ui.no_emoji() is False


def test_style_plain_when_colours_disabled(plain):
    assert ui.style("hello", "red", "bold") == "hello"


def test_style_without_styles_is_identity(coloured):
    assert ui.style("hello") == "hello"


def test_style_forced_red(coloured):
    assert ui.style("x", "red") == "\x1b[31mx\x1b[0m"


def test_style_multiple_codes_wrap_text(coloured):
    result = ui.style(42, "blue", "bold")
    assert result.startswith("\x1b[")
    assert result.endswith("42\x1b[0m")
    assert result.count("\x1b[") == 3


def test_style_unknown_name_raises(plain):
    with pytest.raises(ValueError):
        ui.style("text", "purple")


def test_warn_without_emoji(plain, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("Ran example with errors")
    assert capsys.readouterr().out == "! Ran example with errors\n"


def test_warn_with_emoji(plain, monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.warn("Ran example with errors")
    assert capsys.readouterr().out == "⚠️  Ran example with errors\n"


def test_success_without_emoji(plain, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("Successfully ran example")
    assert capsys.readouterr().out == "✓ Successfully ran example\n"


def test_success_with_emoji(plain, monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.success("Successfully ran example")
    assert capsys.readouterr().out == "✅ Successfully ran example\n"


def test_warn_coloured_contains_message(coloured, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("boom")
    out = capsys.readouterr().out
    assert "\x1b[31mboom\x1b[0m" in out