from pathlib import Path

from ehrplus.config import Settings, default_config_path, load_config


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_explicit_file_is_read(tmp_path):
    cfg = _write(tmp_path / "conf.yaml", "name: clinic\nport: 8080\n")
    settings = load_config(cfg, environ={}, home=tmp_path)
    assert settings.config_file == cfg
    assert settings.get("name") == "clinic"
    assert settings.get("port") == 8080


def test_environment_overrides_file(tmp_path):
    cfg = _write(tmp_path / "conf.yaml", "name: clinic\n")
    settings = load_config(cfg, environ={"NAME": "from-env"}, home=tmp_path)
    assert settings.get("name") == "from-env"


def test_missing_explicit_file_is_ignored(tmp_path):
    settings = load_config(tmp_path / "absent.yaml", environ={}, home=tmp_path)
    assert settings.config_file is None
    assert settings.values == {}


def test_unsupported_extension_is_ignored(tmp_path):
    cfg = _write(tmp_path / "conf.txt", "name: clinic\n")
    settings = load_config(cfg, environ={}, home=tmp_path)
    assert settings.config_file is None
    assert settings.get("name", "fallback") == "fallback"


def test_home_directory_search_finds_yaml(tmp_path):
    cfg = _write(tmp_path / ".ehrplus-cli.yaml", "mode: dev\n")
    assert default_config_path(tmp_path) == cfg
    settings = load_config(None, environ={}, home=tmp_path)
    assert settings.config_file == cfg
    assert settings.get("mode") == "dev"


def test_home_directory_search_accepts_bare_name(tmp_path):
    cfg = _write(tmp_path / ".ehrplus-cli", "mode: staging\n")
    assert default_config_path(tmp_path) == cfg
    assert load_config(None, environ={}, home=tmp_path).get("mode") == "staging"


def test_no_file_in_home(tmp_path):
    assert default_config_path(tmp_path) is None
    settings = load_config(None, environ={}, home=tmp_path)
    assert settings.config_file is None


def test_nested_and_case_insensitive_keys(tmp_path):
    cfg = _write(tmp_path / "conf.yml", "Database:\n  Path: demo.db\n")
    settings = load_config(cfg, environ={}, home=tmp_path)
    assert settings.get("database.path") == "demo.db"
    assert settings.get("DATABASE.PATH") == "demo.db"
    assert settings.get("database.missing") is None


def test_malformed_yaml_is_ignored(tmp_path):
    cfg = _write(tmp_path / "conf.yaml", "key: [unclosed\n")
    settings = load_config(cfg, environ={}, home=tmp_path)
    assert settings.config_file is None


def test_settings_get_prefers_environment():
    settings = Settings(values={"toggle": False}, environ={"TOGGLE": "true"})
    assert settings.get("toggle") == "true"
    assert Settings(values={"toggle": False}).get("toggle") is False