"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from treecraft_core.errors import ConfigError

from .models import TreeCraftConfig


def load_config(cli_path: str | None = None) -> TreeCraftConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    if cli_path and not Path(cli_path).exists():
        raise ConfigError(f"Config file not found: {cli_path}")

    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./treecraft.yaml"),
        Path.home() / ".treecraft" / "config.yaml",
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                if not isinstance(raw, dict):
                    raise ConfigError(f"Invalid config in {path}: expected a mapping")
                raw = _expand_env_vars(raw)
                return TreeCraftConfig(**raw)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}", e) from e
            except ValidationError as e:
                raise ConfigError(f"Invalid config in {path}: {e}", e) from e
            except OSError as e:
                raise ConfigError(f"Cannot read config {path}: {e}", e) from e

    return TreeCraftConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `treecraft config init`
DEFAULT_CONFIG_TEMPLATE = """\
# treecraft.yaml

# Applied to viz, stats, search and export
defaults:
  # depth: 3                   # unbounded when unset
  exclude: []                  # e.g. [node_modules, .git, dist]
  with_metadata: false
  gitignore: false             # also exclude simple names from .gitignore

# Output
output:
  export: "text"               # text | json | yaml
  color: false

# Visualization
viz:
  mode: "tree"                 # tree | graph | list | interactive
  graph_root_label: "."

# Statistics
stats:
  sort: "count"                # size | count

# Generation
generate:
  on_conflict: "fail"          # fail | skip | overwrite

# Logging
log_level: "warn"              # debug | info | warn | error
log_format: "text"             # text | json
"""
