import pytest

from glyphart.cli import main


def test_cli_renders_character(font_path, capsys):
    main(["A", "12", "6", "--font", font_path])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == f"Rendering 'A' at 12x6 using {font_path}"
    assert out[1] == ""
    assert len(out[2:]) == 6
    assert all(len(line) == 12 for line in out[2:])


def test_cli_font_from_environment(font_path, capsys, monkeypatch):
    monkeypatch.setenv("GLYPHART_FONT", font_path)
    main(["B", "4", "2", "--mode", "blocks"])
    out = capsys.readouterr().out.splitlines()
    assert len(out[2:]) == 2


def test_cli_invalid_dimensions(font_path, capsys):
    with pytest.raises(SystemExit) as info:
        main(["A", "0", "5", "--font", font_path])
    assert info.value.code == 1
    assert "Invalid dimensions" in capsys.readouterr().err


def test_cli_missing_font_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        main(["A", "--font", str(tmp_path / "nope.ttf")])
    assert info.value.code == 1
    assert "Failed to read font" in capsys.readouterr().err


def test_cli_unknown_mode(capsys):
    with pytest.raises(SystemExit) as info:
        main(["A", "--mode", "sepia"])
    assert info.value.code == 2
