from pydantic import BaseModel, Field
from typing import Literal


class DefaultsConfig(BaseModel):
    depth: int | None = Field(default=None, ge=0)
    exclude: list[str] = Field(default_factory=list)
    with_metadata: bool = False
    gitignore: bool = False


class OutputConfig(BaseModel):
    export: Literal["text", "json", "yaml"] = "text"
    color: bool = False


class VizConfig(BaseModel):
    mode: Literal["tree", "graph", "list", "interactive"] = "tree"
    graph_root_label: str = "."


class StatsConfig(BaseModel):
    sort: Literal["size", "count"] = "count"


class GenerateConfig(BaseModel):
    on_conflict: Literal["fail", "skip", "overwrite"] = "fail"


class TreeCraftConfig(BaseModel):
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    viz: VizConfig = Field(default_factory=VizConfig)
    stats: StatsConfig = Field(default_factory=StatsConfig)
    generate: GenerateConfig = Field(default_factory=GenerateConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "warn"
    log_format: Literal["text", "json"] = "text"
