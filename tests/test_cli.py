import pytest

import main


@pytest.fixture(autouse=True)
def _isolated_presets(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr("fireworks.core.presets._preset_manager", None)


def test_list_presets(capsys):
    assert main.main(["--list-presets"]) == 0

    out = capsys.readouterr().out
    assert "classic" in out
    assert "finale" in out


def test_preset_info(capsys):
    assert main.main(["--preset-info", "finale"]) == 0
    assert "Launch interval: 15 ticks" in capsys.readouterr().out


def test_unknown_preset_info(capsys):
    assert main.main(["--preset-info", "nope"]) == 1
    assert "Error: Preset 'nope' not found" in capsys.readouterr().out


def test_record_gif(tmp_path, capsys):
    output = tmp_path / "show.gif"

    code = main.main([
        "--record", "70", "--seed", "3", "--width", "300", "--height", "200",
        "-o", str(output),
    ])

    assert code == 0
    assert output.exists()
    out = capsys.readouterr().out
    assert "Saved 70 frames" in out
    assert "Rockets launched: 1" in out


def test_record_with_config_file(tmp_path, capsys):
    config = tmp_path / "show.yaml"
    config.write_text("width: 240\nheight: 180\nauto_launch: false\n")
    output = tmp_path / "frames"

    code = main.main([
        "--config", str(config), "--record", "4", "--format", "frames", "-o", str(output),
    ])

    assert code == 0
    assert len(list(output.glob("*.png"))) == 4
    assert "Rockets launched: 0" in capsys.readouterr().out


def test_bad_override_reports_error(capsys):
    assert main.main(["--record", "5", "--width", "0"]) == 1
    assert capsys.readouterr().out.startswith("Error:")


@pytest.mark.parametrize("body", ["width: [\n", "width: abc\n"])
def test_broken_config_file_reports_error(tmp_path, capsys, body):
    config = tmp_path / "bad.yaml"
    config.write_text(body)

    code = main.main(["--config", str(config), "--record", "2", "-o", str(tmp_path / "out.gif")])

    assert code == 1
    assert capsys.readouterr().out.startswith("Error:")
    assert not (tmp_path / "out.gif").exists()


def test_unwritable_output_reports_error(tmp_path, capsys):
    output = tmp_path / "taken.gif"
    output.mkdir()

    code = main.main(["--record", "2", "--width", "200", "--height", "150", "-o", str(output)])

    assert code == 1
    assert capsys.readouterr().out.startswith("Error:")


def test_list_presets_survives_malformed_user_pack(tmp_path, capsys):
    presets_dir = tmp_path / ".fireworks" / "presets"
    presets_dir.mkdir(parents=True)
    (presets_dir / "pack.yaml").write_text("presets:\n  - a\n  - b\n")

    assert main.main(["--list-presets"]) == 0
    assert "classic" in capsys.readouterr().out
