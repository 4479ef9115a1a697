from .loader import DEFAULT_CONFIG_TEMPLATE, load_config
from .models import (
    DefaultsConfig,
    GenerateConfig,
    OutputConfig,
    StatsConfig,
    TreeCraftConfig,
    VizConfig,
)

__all__ = [
    "DEFAULT_CONFIG_TEMPLATE",
    "DefaultsConfig",
    "GenerateConfig",
    "OutputConfig",
    "StatsConfig",
    "TreeCraftConfig",
    "VizConfig",
    "load_config",
]
