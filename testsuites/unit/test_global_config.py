import pytest
import yaml

from autotest_tools.common import global_config


@pytest.fixture
def config_dir(monkeypatch, tmp_path):
    """Point config loading at an empty config/ directory under tmp_path."""
    directory = tmp_path / "config"
    directory.mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(global_config, "_config", {})
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.delenv("LOGGING__LEVEL", raising=False)
    return directory


def test_defaults_without_files(config_dir):
    global_config._load_config()

    assert global_config.get_config("logging.level") == "DEBUG"
    assert global_config.get_config("reporting.application") == "SauceDemo"
    assert global_config.get_config("browser.viewport") == {"width": 1920, "height": 1080}
    assert global_config.get_config("browser.missing", 42) == 42


def test_yaml_merges_over_defaults(config_dir):
    (config_dir / "config.yaml").write_text(
        yaml.dump({"reporting": {"environment": "STAGING"}}), encoding="utf-8"
    )

    global_config._load_config()

    assert global_config.get_config("reporting.environment") == "STAGING"
    assert global_config.get_config("reporting.application") == "SauceDemo"


def test_environment_file_and_env_var_override(config_dir, monkeypatch):
    (config_dir / "config.yaml").write_text(
        yaml.dump({"logging": {"level": "DEBUG"}}), encoding="utf-8"
    )
    (config_dir / "ci.yaml").write_text(
        yaml.dump({"reporting": {"executor": {"type": "CI"}}}), encoding="utf-8"
    )
    monkeypatch.setenv("ENV", "ci")
    monkeypatch.setenv("LOGGING__LEVEL", "INFO")
    monkeypatch.setenv("UNKNOWN__KEY", "ignored")

    global_config._load_config()

    assert global_config.get_config("reporting.executor.type") == "CI"
    assert global_config.get_config("reporting.executor.name") == "Automation Team"
    assert global_config.get_config("logging.level") == "INFO"
    assert global_config.get_config("unknown") is None


def test_console_format_uses_bound_tag():
    class Level:
        name = "INFO"

    tagged = global_config.console_format({"extra": {"tag": "STEP 2"}, "level": Level})
    untagged = global_config.console_format({"extra": {}, "level": Level})

    assert "[STEP 2]" in tagged
    assert "[INFO]" in untagged
    assert "{message}" in untagged


def test_env_override_values_are_typed(config_dir, monkeypatch):
    monkeypatch.setenv("BROWSER__VIEWPORT__WIDTH", "1280")
    monkeypatch.setenv("BROWSER__ARGS", "[--start-maximized, --mute-audio]")
    monkeypatch.setenv("REPORTING__EXECUTOR__NAME", "nightly: chromium")

    global_config._load_config()

    assert global_config.get_config("browser.viewport") == {"width": 1280, "height": 1080}
    assert global_config.get_config("browser.args") == ["--start-maximized", "--mute-audio"]
    assert global_config.get_config("reporting.executor.name") == "nightly: chromium"


def test_env_override_through_non_mapping_is_skipped(config_dir, monkeypatch):
    (config_dir / "config.yaml").write_text(
        yaml.dump({"browser": {"args": ["--ignore-certificate-errors"]}}), encoding="utf-8"
    )
    monkeypatch.setenv("BROWSER__ARGS__0", "--headless=new")
    monkeypatch.setenv("LOGGING__LEVEL__X", "1")

    global_config._load_config()

    assert global_config.get_config("browser.args") == ["--ignore-certificate-errors"]
    assert global_config.get_config("logging.level") == "DEBUG"
