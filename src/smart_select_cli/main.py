import json
import logging
from pathlib import Path

import typer
from smart_select.engine import SmartSelect
from smart_select.host import MemoryEditor
from smart_select.models import GrowthMode, Selection
from smart_select.path import resolve_path
from smart_select.ranges import clamp_interval
from smart_select_tree_sitter import ASTWalker, SourceParser

from .config import ConfigError, SelectConfig
from .converters import node_to_path_entry, selection_to_report
from .models import StepReport

app = typer.Typer(help="Smart Select - Grow and shrink selections along the syntax tree")

EXTENSION_LANGUAGES = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "typescriptreact",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascriptreact",
    ".json": "json",
    ".jsonc": "jsonc",
}


def language_for(file_path: Path) -> str:
    return EXTENSION_LANGUAGES.get(file_path.suffix.lower(), "plaintext")


def parse_selection(value: str) -> Selection:
    """Parse `OFFSET` (a caret) or `ANCHOR:ACTIVE`"""
    try:
        if ":" in value:
            anchor, active = value.split(":", 1)
            return Selection(int(anchor), int(active))
        offset = int(value)
    except ValueError:
        raise typer.BadParameter(f"Expected OFFSET or ANCHOR:ACTIVE, got '{value}'")
    return Selection(offset, offset)


def clamp_selection(selection: Selection, source: str) -> Selection:
    """Pull offsets past either end of the document back inside it"""
    interval = clamp_interval(source, selection.interval)
    if selection.is_reversed:
        return Selection(interval.end, interval.start)
    return Selection.from_interval(interval)


def _read_source(file_path: Path) -> str:
    if not file_path.is_file():
        typer.echo(f"Error: {file_path} does not exist")
        raise typer.Exit(code=1)
    return file_path.read_text(encoding="utf-8")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug diagnostics")):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def grow(
    file_path: Path = typer.Argument(..., help="Source file"),
    at: list[str] = typer.Option(None, "--at", help="Caret OFFSET or ANCHOR:ACTIVE, repeatable"),
    times: int = typer.Option(1, min=0, help="Number of grow steps"),
    shrink: int = typer.Option(0, min=0, help="Number of shrink steps after growing"),
    mode: str = typer.Option("auto", help="auto, structural or attributes"),
    language: str = typer.Option(None, help="Editor language id (default: from extension)"),
    max_steps: int = typer.Option(None, help="Step bound for the walk to a JSX element"),
    config_file: Path = typer.Option(Path(".smart-select.toml"), "--config", help="Path to config file"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON reports"),
):
    """Grow selections in a file and print each step"""
    source = _read_source(file_path)
    if mode not in ("auto", GrowthMode.STRUCTURAL.value, GrowthMode.ATTRIBUTES.value):
        raise typer.BadParameter(f"Unknown mode '{mode}'", param_hint="--mode")

    try:
        config = SelectConfig(config_file, strict=True).to_engine_config(max_steps=max_steps)
    except ConfigError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=2)

    selections = [clamp_selection(parse_selection(value), source) for value in at] if at else [Selection(0, 0)]
    editor = MemoryEditor(source, language or language_for(file_path), str(file_path), selections)
    smart_select = SmartSelect.for_editor(editor, config)

    commands = {
        "auto": smart_select.grow,
        GrowthMode.STRUCTURAL.value: smart_select.grow_structural,
        GrowthMode.ATTRIBUTES.value: smart_select.grow_attributes,
    }
    steps = [("grow", commands[mode])] * times + [("shrink", smart_select.shrink)] * shrink

    reports = []
    for command, run in steps:
        native_before = len(editor.native_calls)
        run()
        native = editor.native_calls[native_before].value if len(editor.native_calls) > native_before else None
        reports.append(
            StepReport(
                command=command,
                selections=[selection_to_report(s, source) for s in editor.selections],
                native=native,
            )
        )

    if as_json:
        typer.echo(json.dumps([report.model_dump() for report in reports], indent=2))
        return

    for index, report in enumerate(reports, start=1):
        if report.native:
            typer.echo(f"{report.command} {index}: native {report.native}")
            continue
        typer.echo(f"{report.command} {index}:")
        for selection in report.selections:
            typer.echo(f"  {selection.start}-{selection.end} {selection.text!r}")


@app.command()
def path(
    file_path: Path = typer.Argument(..., help="Source file"),
    at: str = typer.Option("0", "--at", help="Caret OFFSET or ANCHOR:ACTIVE"),
    language: str = typer.Option(None, help="Editor language id (default: from extension)"),
):
    """Print the syntax nodes containing a selection, outermost first"""
    source = _read_source(file_path)
    selection = clamp_selection(parse_selection(at), source)
    result = SourceParser().parse_string(source, str(file_path), language or language_for(file_path))
    for depth, node in enumerate(resolve_path(result.root, selection.interval)):
        entry = node_to_path_entry(depth, node, source)
        typer.echo(f"{'  ' * entry.depth}{entry.kind} [{entry.full_start}-{entry.end}] {entry.text!r}")


@app.command()
def dump(
    file_path: Path = typer.Argument(..., help="Source file"),
    language: str = typer.Option(None, help="Editor language id (default: from extension)"),
):
    """Print the syntax tree the engine works on"""
    source = _read_source(file_path)
    result = SourceParser().parse_string(source, str(file_path), language or language_for(file_path))
    typer.echo(f"dialect: {result.dialect}")
    for line in ASTWalker.dump(result.root, source):
        typer.echo(line)
    for error in result.errors:
        typer.echo(f"WARNING: {error}")


if __name__ == "__main__":
    app()
