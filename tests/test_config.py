from runcollapse.config import Settings, load_settings


def test_defaults(tmp_path):
    assert load_settings(tmp_path) == Settings()


def test_toml_file(tmp_path):
    config_dir = tmp_path / ".runcollapse"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text('[settings]\nformat = "json"\nseparator = ","\n')

    settings = load_settings(tmp_path)
    assert settings.format == "json"
    assert settings.separator == ","
    assert settings.log_level == "WARNING"


def test_env_overrides_toml(tmp_path, monkeypatch):
    config_dir = tmp_path / ".runcollapse"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text('[settings]\nformat = "json"\n')
    monkeypatch.setenv("RUNCOLLAPSE_FORMAT", "table")
    monkeypatch.setenv("RUNCOLLAPSE_LOG_LEVEL", "DEBUG")

    settings = load_settings(tmp_path)
    assert settings.format == "table"
    assert settings.log_level == "DEBUG"
