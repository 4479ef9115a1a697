"""StructureGenerator: replays a tree onto the filesystem."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from treecraft_core.errors import ConflictError, TreeIOError, ValidationError
from treecraft_core.generator.models import (
    ConflictDecision,
    ConflictResolver,
    GenerationReport,
)
from treecraft_core.tree.models import TreeNode

logger = logging.getLogger(__name__)


class StructureGenerator:
    """Creates the directories and files described by a tree.

    Pre-existing targets are handled by the conflict policy: skip them,
    overwrite them, ask *resolver*, or (with none of those) stop with
    ``ConflictError``. Entries written before a failure stay on disk.
    """

    def __init__(
        self,
        *,
        skip_all: bool = False,
        overwrite_all: bool = False,
        resolver: ConflictResolver | None = None,
    ) -> None:
        if skip_all and overwrite_all:
            raise ValidationError("Use only one of --skip-all and --overwrite-all.")
        self.skip_all = skip_all
        self.overwrite_all = overwrite_all
        self.resolver = resolver

    def generate(self, spec: TreeNode, output_root: str | os.PathLike[str]) -> GenerationReport:
        """Materialize *spec* (a directory node) under *output_root*."""
        root = Path(output_root)
        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TreeIOError(f"Cannot create output directory '{root}': {e}", e) from e

        report = GenerationReport()
        self._generate_children(spec.children, root, report)
        logger.info(
            "generated %s: %d created, %d overwritten, %d skipped",
            root,
            len(report.created),
            len(report.overwritten),
            len(report.skipped),
        )
        return report

    # ------------------------------------------------------------------
    # Walk
    # ------------------------------------------------------------------

    def _generate_children(
        self, children: Mapping[str, TreeNode], parent: Path, report: GenerationReport
    ) -> None:
        for name, node in children.items():
            target = parent / name
            existed = target.exists()
            if existed and self._decide(target) is ConflictDecision.SKIP:
                logger.debug("skipping existing %s", target)
                report.skipped.append(str(target))
                continue

            if node.is_dir:
                self._make_dir(target)
            else:
                self._write_file(target, node.content)

            if existed:
                logger.info("overwrote %s", target)
                report.overwritten.append(str(target))
            else:
                logger.info("created %s", target)
                report.created.append(str(target))

            if node.is_dir:
                self._generate_children(node.children, target, report)

    def _decide(self, target: Path) -> ConflictDecision:
        if self.skip_all:
            return ConflictDecision.SKIP
        if self.overwrite_all:
            return ConflictDecision.OVERWRITE
        if self.resolver is not None:
            return self.resolver(target)
        raise ConflictError(target)

    # ------------------------------------------------------------------
    # Filesystem writes
    # ------------------------------------------------------------------

    @staticmethod
    def _make_dir(target: Path) -> None:
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TreeIOError(f"Cannot create directory '{target}': {e}", e) from e

    @staticmethod
    def _write_file(target: Path, content: str | None) -> None:
        try:
            target.write_text(content or "", encoding="utf-8")
        except OSError as e:
            raise TreeIOError(f"Cannot write file '{target}': {e}", e) from e


def generate_structure(
    spec: TreeNode,
    output_root: str | os.PathLike[str],
    *,
    skip_all: bool = False,
    overwrite_all: bool = False,
    resolver: ConflictResolver | None = None,
) -> GenerationReport:
    """Convenience wrapper around StructureGenerator.generate()."""
    generator = StructureGenerator(
        skip_all=skip_all, overwrite_all=overwrite_all, resolver=resolver
    )
    return generator.generate(spec, output_root)
