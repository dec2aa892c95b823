from drillrunner import ui


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert ui.no_emoji() is False


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("Ran exercises/a.rs with errors")
    assert capsys.readouterr().out == "! Ran exercises/a.rs with errors\n"


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("Successfully ran exercises/a.rs")
    assert capsys.readouterr().out == "✓ Successfully ran exercises/a.rs\n"


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.warn("careful")
    out = capsys.readouterr().out
    assert out.startswith("⚠️")
    assert out.rstrip("\n").endswith(" careful")


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.success("all good")
    out = capsys.readouterr().out
    assert out == "✅ all good\n"