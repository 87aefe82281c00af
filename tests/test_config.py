"""Unit tests for Config and OutputPaths (stencil.config).

Tests cover:
- OutputPaths defaults
- Config defaults and extension normalisation
- Config.save / Config.load
- Config.from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from stencil.config import Config, OutputPaths


# ---------------------------------------------------------------------------
# OutputPaths
# ---------------------------------------------------------------------------


class TestOutputPaths:
    @pytest.mark.unit
    def test_defaults(self):
        paths = OutputPaths()
        assert paths.pages == "src/scripts/pages"
        assert paths.configs == "src/scripts/model-config"
        assert paths.apis == "src/scripts/config/api"
        assert paths.routes == "src/scripts/routes"
        assert paths.mock == "mock-server/apis"

    @pytest.mark.unit
    def test_override_one_directory(self):
        paths = OutputPaths(pages="views")
        assert paths.pages == "views"
        assert paths.routes == "src/scripts/routes"


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.output_dir == Path(".")
        assert config.template_dir is None
        assert config.default_extension == ".txt"
        assert config.format_output is False
        assert config.verbose is False
        assert isinstance(config.paths, OutputPaths)

    @pytest.mark.unit
    def test_extension_gets_leading_dot(self):
        assert Config(default_extension="md").default_extension == ".md"

    @pytest.mark.unit
    def test_dotted_extension_unchanged(self):
        assert Config(default_extension=".vue").default_extension == ".vue"

    @pytest.mark.unit
    def test_invalid_flag_type(self):
        with pytest.raises(ValidationError):
            Config(verbose="not-a-bool")


# ---------------------------------------------------------------------------
# Config.save / Config.load
# ---------------------------------------------------------------------------


class TestConfigPersistence:
    @pytest.mark.unit
    def test_save_default_path(self, tmp_path: Path):
        config = Config(output_dir=tmp_path)
        saved_path = config.save()
        assert saved_path == tmp_path / "stencil.json"
        assert saved_path.exists()

    @pytest.mark.unit
    def test_save_creates_parent_dirs(self, tmp_path: Path):
        deep_path = tmp_path / "a" / "b" / "stencil.json"
        Config(output_dir=tmp_path).save(path=deep_path)
        assert deep_path.exists()

    @pytest.mark.unit
    def test_load_roundtrip(self, tmp_path: Path):
        config = Config(
            output_dir=tmp_path,
            template_dir=tmp_path / "templates",
            default_extension=".js",
            format_output=True,
            paths=OutputPaths(mock="mock/modules"),
        )
        loaded = Config.load(config.save())
        assert loaded.template_dir == tmp_path / "templates"
        assert loaded.default_extension == ".js"
        assert loaded.format_output is True
        assert loaded.paths.mock == "mock/modules"


# ---------------------------------------------------------------------------
# Config.from_env
# ---------------------------------------------------------------------------


class TestConfigFromEnv:
    @pytest.mark.unit
    def test_empty_env(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()
        assert config.output_dir == Path(".")
        assert config.template_dir is None
        assert config.verbose is False

    @pytest.mark.unit
    def test_all_variables(self, tmp_path: Path):
        env = {
            "STENCIL_OUTPUT_DIR": str(tmp_path),
            "STENCIL_TEMPLATE_DIR": str(tmp_path / "tpl"),
            "STENCIL_DEFAULT_EXTENSION": "md",
            "STENCIL_FORMAT_OUTPUT": "yes",
            "STENCIL_VERBOSE": "1",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.output_dir == tmp_path
        assert config.template_dir == tmp_path / "tpl"
        assert config.default_extension == ".md"
        assert config.format_output is True
        assert config.verbose is True

    @pytest.mark.unit
    def test_false_flags(self):
        env = {"STENCIL_FORMAT_OUTPUT": "off", "STENCIL_VERBOSE": "0"}
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.format_output is False
        assert config.verbose is False
