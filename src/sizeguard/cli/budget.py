"""
CLI Budget Commands

check: Enforce size budgets over a build output directory
match: Show which budget rule an artifact name resolves to
show-config: Print the parsed budget rules
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape
from rich.table import Table

from sizeguard.logging_config import logger
from sizeguard.exceptions import ConfigError, SizeGuardError
from sizeguard.schemas import BundleConfig
from sizeguard.budget import (
    BundleMatcher,
    CollectingSink,
    EnforcementEngine,
    EnforcementOptions,
    MatchKind,
    discover_artifacts,
    find_config_file,
    get_options,
    load_config,
)
from .config import CLIConfig
from .output import get_console, print_error, print_json

console = get_console()


def _load(config_path: Optional[Path], json_output: bool) -> BundleConfig:
    """Locate and load the budget file, exiting with a structured error on failure."""
    try:
        return load_config(find_config_file(config_path=config_path or get_options().config_path))
    except ConfigError as e:
        logger.error(f"Config error: {e}")
        print_error(
            "CONFIG_ERROR",
            str(e),
            json_output=json_output,
            actionable_fix="Create sizeguard.config.json or pass --config PATH",
        )
        raise typer.Exit(code=1)


def check_cmd(
    output_dir: Path = typer.Argument(..., help="Build output directory"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Budget file (default: sizeguard.config.json)"),
    extensions: Optional[List[str]] = typer.Option(None, "--ext", "-e", help="Skip artifacts ending with this suffix (repeatable)"),
    enforce_for_all_bundles: Optional[bool] = typer.Option(
        None,
        "--enforce-for-all-bundles/--warn-missing",
        help="Treat artifacts without a budget as errors",
    ),
    workers: int = typer.Option(CLIConfig.DEFAULT_WORKERS, "--workers", "-w", min=1, help="Measure artifacts on N threads"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Enforce bundle size budgets on a build output directory.

    Exits with code 1 when any error diagnostic is raised.

    Examples:
        sizeguard check dist
        sizeguard check dist --ext .map --ext .LICENSE.txt
        sizeguard check dist --config budgets.json --enforce-for-all-bundles --json
    """
    defaults = get_options()
    options = EnforcementOptions(
        extensions=extensions if extensions else list(defaults.extensions),
        enforce_for_all_bundles=(
            defaults.enforce_for_all_bundles if enforce_for_all_bundles is None else enforce_for_all_bundles
        ),
        config_path=str(config_path) if config_path else defaults.config_path,
    )
    config = _load(config_path, json_output)

    try:
        assets = discover_artifacts(output_dir)
    except SizeGuardError as e:
        print_error("OUTPUT_DIR_NOT_FOUND", str(e), json_output=json_output, input_value=str(output_dir))
        raise typer.Exit(code=1)

    sink = CollectingSink()
    report = EnforcementEngine(config, options=options).run(assets, output_dir, sink, workers=workers)

    if CLIConfig.is_machine_mode() or json_output:
        print_json({
            "command": "check",
            "status": "fail" if sink.has_errors else "ok",
            "output_dir": str(output_dir),
            "config": config.source,
            **sink.to_dict(),
            "summary": {k: v for k, v in report.to_dict().items() if k not in ("outcomes", "excluded")},
        })
    else:
        table = Table(title=f"Bundle sizes in {output_dir}")
        table.add_column("Artifact", style="cyan")
        table.add_column("Rule")
        table.add_column("Size", justify="right")
        table.add_column("Status")
        styles = {"ok": "green", "missing": "yellow"}
        for outcome in report.outcomes:
            style = styles.get(outcome.status, "red")
            size = "" if outcome.size_in_bytes is None else f"{outcome.size_in_bytes:,} B"
            table.add_row(escape(outcome.file_name), escape(outcome.rule or "-"), size, f"[{style}]{outcome.status}[/{style}]")
        console.print(table)

        for message in sink.errors:
            console.print(f"[red]ERROR[/red] {escape(message)}")
        for message in sink.warnings:
            console.print(f"[yellow]WARNING[/yellow] {escape(message)}")

        if sink.has_errors:
            console.print(f"[red]✗ {len(sink.errors)} error(s), {len(sink.warnings)} warning(s)[/red]")
        else:
            console.print(f"[green]✓ All budgets respected[/green] ({len(sink.warnings)} warning(s))")

    if sink.has_errors:
        raise typer.Exit(code=1)


def match_cmd(
    name: str = typer.Argument(..., help="Artifact name, e.g. main.3f2a.js"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Budget file (default: sizeguard.config.json)"),
    enforce_for_all_bundles: Optional[bool] = typer.Option(
        None,
        "--enforce-for-all-bundles/--warn-missing",
        help="Treat a name without a budget as an error",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show which budget rule an artifact name resolves to.

    Exits with code 1 when the name matches several patterns, or matches
    nothing while --enforce-for-all-bundles is on.
    """
    config = _load(config_path, json_output)
    result = BundleMatcher(config.bundles).resolve(name)
    if enforce_for_all_bundles is None:
        enforce_for_all_bundles = get_options().enforce_for_all_bundles
    failed = result.kind is MatchKind.AMBIGUOUS or (
        result.kind is MatchKind.MISSING and enforce_for_all_bundles
    )

    if CLIConfig.is_machine_mode() or json_output:
        print_json({
            "command": "match",
            "name": name,
            "status": "fail" if failed else "ok",
            **result.to_dict(),
        })
    elif result.kind is MatchKind.MATCHED:
        console.print(f"[cyan]{escape(name)}[/cyan] → [green]{escape(result.rule.name)}[/green] (limit {result.rule.max_size})")
    elif result.kind is MatchKind.AMBIGUOUS:
        names = ", ".join(f'"{n}"' for n in result.candidates)
        console.print(f"[red]{escape(name)} matches multiple patterns: {escape(names)}[/red]")
    else:
        style = "red" if failed else "yellow"
        console.print(f"[{style}]No config entry for {escape(name)}[/{style}]")

    if failed:
        raise typer.Exit(code=1)


def show_config_cmd(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Budget file (default: sizeguard.config.json)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Print the parsed budget rules in declaration order.
    """
    config = _load(config_path, json_output)

    if CLIConfig.is_machine_mode() or json_output:
        print_json({
            "command": "show-config",
            "source": config.source,
            "bundles": [rule.model_dump() for rule in config.bundles],
        })
        return

    table = Table(title=config.source or "Budgets")
    table.add_column("#", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Limit")
    table.add_column("Bytes", justify="right")
    for index, rule in enumerate(config.bundles, start=1):
        table.add_row(str(index), escape(rule.name), rule.max_size, f"{rule.max_size_in_bytes:,}")
    console.print(table)
