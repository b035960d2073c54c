import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from extensions_manager import ExtensionsConfig, LoadError, load_config


def test_defaults():
    config = ExtensionsConfig()
    assert config.extension_types == []
    assert config.install_path == Path(".")
    assert config.default_scheme_path == "/etc/scheme.json"
    assert config.default_icon_path == "/etc/icon.svg"
    assert config.search_url == "https://registry.npmjs.org/-/v1/search"
    assert config.cli_command_timeout == 120.0


def test_load_config_camel_case(tmp_path):
    path = tmp_path / "extensions.json"
    path.write_text(
        json.dumps(
            {
                "extensionTypes": ["driver", "widget"],
                "installPath": str(tmp_path / "ext"),
                "cliCommandTimeout": 30,
            }
        )
    )
    config = load_config(path)
    assert config.extension_types == ["driver", "widget"]
    assert config.install_path == tmp_path / "ext"
    assert config.cli_command_timeout == 30.0


def test_load_config_missing_file(tmp_path):
    with pytest.raises(LoadError):
        load_config(tmp_path / "nope.json")


def test_load_config_invalid_json(tmp_path):
    path = tmp_path / "extensions.json"
    path.write_text("{not json")
    with pytest.raises(LoadError, match="Invalid JSON"):
        load_config(path)


def test_load_config_unknown_key(tmp_path):
    path = tmp_path / "extensions.json"
    path.write_text(json.dumps({"extensionTypes": [], "bogus": 1}))
    with pytest.raises(ValidationError):
        load_config(path)


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        ExtensionsConfig(cli_command_timeout=0)
