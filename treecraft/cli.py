"""CLI entry point for TreeCraft."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, NoReturn

import typer
import yaml
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from treecraft.browser import TreeBrowser
from treecraft.log import configure_logging
from treecraft.prompts import PromptConflictResolver
from treecraft_core.config import DEFAULT_CONFIG_TEMPLATE, TreeCraftConfig, load_config
from treecraft_core.errors import TreeCraftError, TreeIOError, ValidationError
from treecraft_core.generator import GenerationReport, generate_structure
from treecraft_core.options import (
    BuildOptions,
    validate_directory,
    validate_export_format,
    validate_sort_option,
    validate_tree_mode,
)
from treecraft_core.output import (
    format_graph,
    format_list,
    format_search_results,
    format_stats,
    format_tree,
)
from treecraft_core.spec import load_spec_file
from treecraft_core.tree import (
    build_tree,
    compute_stats,
    gitignore_patterns,
    parse_patterns,
    search_tree,
)

app = typer.Typer(
    name="treecraft",
    help="Project scaffolding and directory visualization.",
)

config_app = typer.Typer(help="Manage TreeCraft configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: TreeCraftConfig | None = None


def _get_config() -> TreeCraftConfig:
    if _config is None:
        return load_config()
    return _config


def _fail(err: TreeCraftError) -> NoReturn:
    rprint(f"[red]{err.kind}:[/red] {escape(str(err))}")
    raise typer.Exit(1)


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to treecraft.yaml")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except TreeCraftError as e:
        _fail(e)
    configure_logging("debug" if verbose else _config.log_level, _config.log_format)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _build_options(
    cfg: TreeCraftConfig,
    root: Path,
    *,
    depth: int | None,
    filter_: str | None = None,
    exclude: str | None = None,
    with_metadata: bool = False,
    gitignore: bool = False,
) -> BuildOptions:
    """Merge command flags over config defaults."""
    patterns = [*cfg.defaults.exclude, *parse_patterns(exclude)]
    if gitignore or cfg.defaults.gitignore:
        patterns.extend(gitignore_patterns(root))
    return BuildOptions(
        depth=depth if depth is not None else cfg.defaults.depth,
        exclude=list(dict.fromkeys(patterns)),
        filter=parse_patterns(filter_),
        with_metadata=with_metadata or cfg.defaults.with_metadata,
    )


def _emit(output: str, output_file: str | None = None, color: bool = False) -> None:
    """Print *output*, or write it to *output_file*."""
    if output_file:
        target = Path(output_file)
        try:
            target.write_text(output if output.endswith("\n") else output + "\n", encoding="utf-8")
        except OSError as e:
            _fail(TreeIOError(f"Cannot write '{target}': {e}", e))
        rprint(f"[green]Written to[/green] {escape(str(target))}")
        return
    if color:
        Console().print(output.rstrip("\n"), style="green", markup=False, highlight=False, soft_wrap=True)
    else:
        typer.echo(output, nl=not output.endswith("\n"))


def _report_table(report: GenerationReport) -> Table:
    table = Table(title="Generation Summary")
    table.add_column("Result", style="cyan")
    table.add_column("Count", justify="right", style="green")
    table.add_row("Created", str(len(report.created)))
    table.add_row("Overwritten", str(len(report.overwritten)))
    table.add_row("Skipped", str(len(report.skipped)))
    return table


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def viz(
    path: Annotated[str, typer.Argument(help="Directory to visualize")] = ".",
    mode: Annotated[
        str | None,
        typer.Option("--mode", "-m", help="Visualization mode: tree, graph, list, interactive"),
    ] = None,
    depth: Annotated[int | None, typer.Option("--depth", "-d", help="Limit tree depth")] = None,
    filter_: Annotated[
        str | None,
        typer.Option("--filter", "-f", help="Include only patterns (comma-separated)"),
    ] = None,
    exclude: Annotated[
        str | None, typer.Option("--exclude", "-e", help="Exclude patterns (comma-separated)")
    ] = None,
    export: Annotated[
        str | None, typer.Option("--export", "-x", help="Export format: text, json, yaml")
    ] = None,
    with_metadata: Annotated[
        bool, typer.Option("--with-metadata", help="Include size and modification time")
    ] = False,
    color: Annotated[bool, typer.Option("--color", help="Colored output")] = False,
    gitignore: Annotated[
        bool, typer.Option("--gitignore", help="Also exclude names listed in .gitignore")
    ] = False,
    output_file: Annotated[
        str | None, typer.Option("--output-file", "-o", help="Write output to file")
    ] = None,
) -> None:
    """Visualize a directory structure."""
    cfg = _get_config()
    try:
        tree_mode = validate_tree_mode(mode or cfg.viz.mode)
        fmt = validate_export_format(export or cfg.output.export)
        root = validate_directory(path)
        options = _build_options(
            cfg,
            root,
            depth=depth,
            filter_=filter_,
            exclude=exclude,
            with_metadata=with_metadata,
            gitignore=gitignore,
        )
        tree = build_tree(root, options)
    except TreeCraftError as e:
        _fail(e)

    if tree_mode == "interactive":
        TreeBrowser(tree, root_label=root.resolve().name or str(root)).run()
        return

    if fmt != "text" or tree_mode == "tree":
        output = format_tree(tree, fmt, with_metadata=options.with_metadata)
    elif tree_mode == "graph":
        output = format_graph(
            tree, root_label=cfg.viz.graph_root_label, with_metadata=options.with_metadata
        )
    else:
        output = format_list(tree)

    _emit(output, output_file, color=color or cfg.output.color)


@app.command()
def gen(
    input_file: Annotated[
        str, typer.Argument(metavar="INPUT", help="Spec file (JSON, YAML or text tree)")
    ],
    output: Annotated[str, typer.Option("--output", "-o", help="Output directory")],
    skip_all: Annotated[
        bool, typer.Option("--skip-all", "-s", help="Skip existing files/directories")
    ] = False,
    overwrite_all: Annotated[
        bool, typer.Option("--overwrite-all", "-w", help="Overwrite existing files/directories")
    ] = False,
    interactive: Annotated[
        bool, typer.Option("--interactive", "-i", help="Ask for each existing path")
    ] = False,
) -> None:
    """Generate a directory structure from a spec file."""
    cfg = _get_config()
    if not (skip_all or overwrite_all or interactive):
        skip_all = cfg.generate.on_conflict == "skip"
        overwrite_all = cfg.generate.on_conflict == "overwrite"

    try:
        spec = load_spec_file(input_file)
        report = generate_structure(
            spec,
            output,
            skip_all=skip_all,
            overwrite_all=overwrite_all,
            resolver=PromptConflictResolver() if interactive else None,
        )
    except TreeCraftError as e:
        _fail(e)

    rprint(_report_table(report))
    rprint(f"[green]Structure generated at[/green] '{escape(output)}'")


@app.command()
def stats(
    path: Annotated[str, typer.Argument(help="Directory to analyze")] = ".",
    size_dist: Annotated[
        bool, typer.Option("--size-dist", "-s", help="Show size distribution")
    ] = False,
    file_types: Annotated[
        bool, typer.Option("--file-types", "-t", help="Show file type breakdown")
    ] = False,
    sort: Annotated[
        str | None, typer.Option("--sort", "-r", help="Breakdown order: size or count")
    ] = None,
    depth: Annotated[int | None, typer.Option("--depth", "-d", help="Limit depth")] = None,
    filter_: Annotated[
        str | None,
        typer.Option("--filter", "-f", help="Include only patterns (comma-separated)"),
    ] = None,
    exclude: Annotated[
        str | None, typer.Option("--exclude", "-e", help="Exclude patterns (comma-separated)")
    ] = None,
    export: Annotated[
        str | None, typer.Option("--export", "-x", help="Export format: text, json, yaml")
    ] = None,
    output_file: Annotated[
        str | None, typer.Option("--output-file", "-o", help="Write output to file")
    ] = None,
) -> None:
    """Display directory statistics."""
    cfg = _get_config()
    try:
        fmt = validate_export_format(export or cfg.output.export)
        sort_key = validate_sort_option(sort or cfg.stats.sort)
        root = validate_directory(path)
        options = _build_options(
            cfg, root, depth=depth, filter_=filter_, exclude=exclude, with_metadata=True
        )
        tree = build_tree(root, options)
    except TreeCraftError as e:
        _fail(e)

    result = compute_stats(tree, size_dist=size_dist, file_types=file_types)
    _emit(format_stats(result, fmt, sort_key), output_file)


@app.command()
def search(
    targets: Annotated[
        list[str], typer.Argument(metavar="[PATH] QUERY", help="Directory (default .) and search term")
    ],
    ext: Annotated[
        str | None, typer.Option("--ext", help="Limit to an extension, e.g. .ts")
    ] = None,
    depth: Annotated[int | None, typer.Option("--depth", "-d", help="Limit depth")] = None,
    exclude: Annotated[
        str | None, typer.Option("--exclude", "-e", help="Exclude patterns (comma-separated)")
    ] = None,
    export: Annotated[
        str | None, typer.Option("--export", "-x", help="Export format: text, json, yaml")
    ] = None,
    output_file: Annotated[
        str | None, typer.Option("--output-file", "-o", help="Write output to file")
    ] = None,
) -> None:
    """Search files by name."""
    cfg = _get_config()
    try:
        if len(targets) == 1:
            path, query = ".", targets[0]
        elif len(targets) == 2:
            path, query = targets
        else:
            raise ValidationError("Expected at most two arguments: [PATH] QUERY")
        fmt = validate_export_format(export or cfg.output.export)
        root = validate_directory(path)
        options = _build_options(cfg, root, depth=depth, exclude=exclude)
        tree = build_tree(root, options)
        results = search_tree(tree, query, ext=ext, base_path=path)
    except TreeCraftError as e:
        _fail(e)

    _emit(format_search_results(results, fmt), output_file)


@app.command(name="export")
def export_cmd(
    path: Annotated[str, typer.Argument(help="Directory to export")] = ".",
    format_: Annotated[
        str, typer.Option("--format", "-F", help="Export format: text, json, yaml")
    ] = "json",
    with_metadata: Annotated[
        bool, typer.Option("--with-metadata", help="Include size and modification time")
    ] = False,
    depth: Annotated[int | None, typer.Option("--depth", "-d", help="Limit depth")] = None,
    filter_: Annotated[
        str | None,
        typer.Option("--filter", "-f", help="Include only patterns (comma-separated)"),
    ] = None,
    exclude: Annotated[
        str | None, typer.Option("--exclude", "-e", help="Exclude patterns (comma-separated)")
    ] = None,
    output_file: Annotated[
        str | None, typer.Option("--output-file", "-o", help="Write output to file")
    ] = None,
) -> None:
    """Export a directory structure without visualization."""
    cfg = _get_config()
    try:
        fmt = validate_export_format(format_)
        root = validate_directory(path)
        options = _build_options(
            cfg,
            root,
            depth=depth,
            filter_=filter_,
            exclude=exclude,
            with_metadata=with_metadata,
        )
        tree = build_tree(root, options)
    except TreeCraftError as e:
        _fail(e)

    output = format_tree(tree, fmt, with_metadata=options.with_metadata, with_content=True)
    _emit(output, output_file)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default treecraft.yaml in current directory."""
    target = Path("treecraft.yaml")
    if target.exists() and not force:
        rprint("[yellow]treecraft.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
