"""Tests for treecraft_core.config: models and YAML loader."""

import pytest
from pydantic import ValidationError

from treecraft_core.config.loader import DEFAULT_CONFIG_TEMPLATE, _expand_env_vars, load_config
from treecraft_core.config.models import (
    DefaultsConfig,
    GenerateConfig,
    OutputConfig,
    TreeCraftConfig,
    VizConfig,
)
from treecraft_core.errors import ConfigError


@pytest.fixture(autouse=True)
def _isolated(tmp_path, monkeypatch):
    """No project-local or user-global config leaks into these tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


# ── TreeCraftConfig defaults ───────────────────────────────────────


class TestTreeCraftConfigDefaults:
    def test_default_log_level(self, sample_config):
        assert sample_config.log_level == "warn"

    def test_default_log_format(self, sample_config):
        assert sample_config.log_format == "text"

    def test_default_export(self, sample_config):
        assert sample_config.output.export == "text"

    def test_default_depth_is_unbounded(self, sample_config):
        assert sample_config.defaults.depth is None

    def test_default_conflict_policy(self, sample_config):
        assert sample_config.generate.on_conflict == "fail"

    def test_default_sort(self, sample_config):
        assert sample_config.stats.sort == "count"


# ── Individual config model validations ─────────────────────────────


class TestModelValidation:
    def test_negative_depth_rejected(self):
        with pytest.raises(ValidationError):
            DefaultsConfig(depth=-1)

    def test_unknown_export_rejected(self):
        with pytest.raises(ValidationError):
            OutputConfig(export="xml")

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValidationError):
            VizConfig(mode="3d")

    def test_unknown_conflict_policy_rejected(self):
        with pytest.raises(ValidationError):
            GenerateConfig(on_conflict="ask")

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            TreeCraftConfig(log_level="trace")


# ── load_config ─────────────────────────────────────────────────────


class TestLoadConfig:
    def test_no_files_gives_defaults(self):
        assert load_config() == TreeCraftConfig()

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("defaults:\n  depth: 2\n  exclude: [node_modules]\n")
        cfg = load_config(str(path))
        assert cfg.defaults.depth == 2
        assert cfg.defaults.exclude == ["node_modules"]

    def test_explicit_path_missing(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(str(tmp_path / "nope.yaml"))

    def test_project_local_file(self, tmp_path):
        (tmp_path / "treecraft.yaml").write_text("viz:\n  mode: graph\n")
        assert load_config().viz.mode == "graph"

    def test_user_global_file(self, tmp_path):
        global_dir = tmp_path / "home" / ".treecraft"
        global_dir.mkdir(parents=True)
        (global_dir / "config.yaml").write_text("stats:\n  sort: size\n")
        assert load_config().stats.sort == "size"

    def test_project_local_beats_user_global(self, tmp_path):
        global_dir = tmp_path / "home" / ".treecraft"
        global_dir.mkdir(parents=True)
        (global_dir / "config.yaml").write_text("log_level: error\n")
        (tmp_path / "treecraft.yaml").write_text("log_level: debug\n")
        assert load_config().log_level == "debug"

    def test_empty_file_falls_through(self, tmp_path):
        (tmp_path / "treecraft.yaml").write_text("")
        assert load_config() == TreeCraftConfig()

    def test_invalid_yaml(self, tmp_path):
        (tmp_path / "treecraft.yaml").write_text("defaults: [unclosed")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config()

    def test_schema_violation(self, tmp_path):
        (tmp_path / "treecraft.yaml").write_text("output:\n  export: xml\n")
        with pytest.raises(ConfigError, match="Invalid config"):
            load_config()

    def test_non_mapping(self, tmp_path):
        (tmp_path / "treecraft.yaml").write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="expected a mapping"):
            load_config()

    def test_env_vars_expanded(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TC_LABEL", "workspace")
        (tmp_path / "treecraft.yaml").write_text('viz:\n  graph_root_label: "${TC_LABEL}"\n')
        assert load_config().viz.graph_root_label == "workspace"

    def test_default_template_loads(self, tmp_path):
        path = tmp_path / "template.yaml"
        path.write_text(DEFAULT_CONFIG_TEMPLATE)
        assert load_config(str(path)) == TreeCraftConfig()


def test_expand_env_vars_nested(monkeypatch):
    monkeypatch.setenv("A", "1")
    monkeypatch.delenv("MISSING", raising=False)
    assert _expand_env_vars({"x": ["${A}", "${MISSING}"], "y": 3}) == {"x": ["1", ""], "y": 3}
