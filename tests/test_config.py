import pytest

from imgmd.config import DEFAULTS, _deep_merge, default_config_path, load_config
from imgmd.exceptions import ConfigError


def test_missing_config_returns_defaults(tmp_path):
    cfg = load_config(tmp_path / "missing.toml")
    assert cfg == DEFAULTS
    assert cfg is not DEFAULTS


def test_config_merges_over_defaults(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[include]\ngps = false\n\n[output]\nindent = 4\n")
    cfg = load_config(path)
    assert cfg["include"]["gps"] is False
    assert cfg["include"]["exif"] is True
    assert cfg["output"]["indent"] == 4
    assert cfg["logging"]["level"] == "warning"


def test_invalid_toml_raises(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("include = [")
    with pytest.raises(ConfigError):
        load_config(path)


def test_directory_path_raises(tmp_path):
    with pytest.raises(IsADirectoryError):
        load_config(tmp_path)


def test_env_var_overrides_default_path(tmp_path, monkeypatch):
    monkeypatch.setenv("IMGMD_CONFIG", str(tmp_path / "custom.toml"))
    assert default_config_path() == tmp_path / "custom.toml"


def test_deep_merge_does_not_mutate():
    base = {"a": {"b": 1}}
    merged = _deep_merge(base, {"a": {"c": 2}})
    assert merged == {"a": {"b": 1, "c": 2}}
    assert base == {"a": {"b": 1}}


@pytest.mark.parametrize("text", [
    'include = "x"\n',
    '[include]\ngps = "no"\n',
    '[output]\nindent = "wide"\n',
    '[output]\nindent = -1\n',
    '[logging]\nlevel = 10\n',
])
def test_wrongly_typed_settings_raise(tmp_path, text):
    path = tmp_path / "config.toml"
    path.write_text(text)
    with pytest.raises(ConfigError):
        load_config(path)
