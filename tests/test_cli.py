import json

import pytest

from imgmd.cli import build_parser, main, resolve_options
from imgmd.metadata_options import MetadataOptions


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("IMGMD_CONFIG", str(tmp_path / "no-config.toml"))


def test_single_file_prints_one_object(camera_jpeg, capsys):
    assert main([str(camera_jpeg)]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["exif"]["version"] == "2.3.2"
    assert output["imageFile"]["filename"] == "camera.jpg"


def test_several_files_print_an_array(camera_jpeg, plain_png, capsys):
    assert main([str(camera_jpeg), str(plain_png)]) == 0
    output = json.loads(capsys.readouterr().out)
    assert [o["imageFile"]["filename"] for o in output] == ["camera.jpg", "plain.png"]


def test_basic_flag(camera_jpeg, capsys):
    assert main(["-b", str(camera_jpeg)]) == 0
    output = json.loads(capsys.readouterr().out)
    assert not {"exif", "iptc", "tiff", "gps"} & set(output)


def test_no_gps_flag(camera_jpeg, capsys):
    assert main(["--no-gps", str(camera_jpeg)]) == 0
    output = json.loads(capsys.readouterr().out)
    assert "gps" not in output
    assert "exif" in output


def test_fails_fast_on_first_error(camera_jpeg, tmp_path, capsys):
    missing = tmp_path / "missing.jpg"
    assert main([str(missing), str(camera_jpeg)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: The file ")
    assert "doesn't exist" in captured.err


def test_debug_dumps_raw_mapping(camera_jpeg, capsys):
    assert main(["-d", str(camera_jpeg)]) == 0
    output = capsys.readouterr().out
    assert "'{Exif}'" in output
    assert "'PixelWidth': 64" in output


def test_config_file_disables_family(camera_jpeg, tmp_path, capsys):
    config = tmp_path / "config.toml"
    config.write_text("[include]\niptc = false\n")
    assert main(["-c", str(config), str(camera_jpeg)]) == 0
    assert "iptc" not in json.loads(capsys.readouterr().out)


def test_flag_overrides_config(tmp_path):
    args = build_parser().parse_args(["--iptc", "photo.jpg"])
    options = resolve_options(args, {"include": {"iptc": False}})
    assert MetadataOptions.IPTC in options


def test_invalid_config_is_reported(camera_jpeg, tmp_path, capsys):
    config = tmp_path / "config.toml"
    config.write_text("include = [")
    assert main(["-c", str(config), str(camera_jpeg)]) == 1
    assert capsys.readouterr().err.startswith("Error: Invalid config file")


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert "imgmd" in capsys.readouterr().out


def test_filename_with_colon_is_a_path(jpeg_factory, tmp_path, monkeypatch, capsys):
    jpeg_factory("shot:1.jpg")
    monkeypatch.chdir(tmp_path)
    assert main(["shot:1.jpg"]) == 0
    assert json.loads(capsys.readouterr().out)["imageFile"]["filename"] == "shot:1.jpg"


def test_wrongly_typed_config_is_reported(camera_jpeg, tmp_path, capsys):
    config = tmp_path / "config.toml"
    config.write_text('include = "x"\n')
    assert main(["-c", str(config), str(camera_jpeg)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: Invalid config file")
    assert "[include] must be a table" in captured.err
