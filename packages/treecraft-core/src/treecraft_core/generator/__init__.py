"""Structure generation from a parsed spec."""

from treecraft_core.generator.generator import StructureGenerator, generate_structure
from treecraft_core.generator.models import (
    ConflictDecision,
    ConflictResolver,
    GenerationReport,
)

__all__ = [
    "ConflictDecision",
    "ConflictResolver",
    "GenerationReport",
    "StructureGenerator",
    "generate_structure",
]
