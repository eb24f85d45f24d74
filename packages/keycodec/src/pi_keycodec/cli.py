"""
CLI entry point — ``pi-keys``.

    pi-keys check keybindings.yaml
    pi-keys normalize keybindings.yaml --output keybindings.json
    pi-keys encode Up --modifiers CONTROL+ALT
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .config import KeyBindings, dump_config, dumps_config, load_config
from .errors import DecodingError, KeyBindingsConfigError
from .key_event import KeyBindingRecord, decode_key_event, encode_key_event

app = typer.Typer(
    name="pi-keys",
    help="Check and normalize keybinding files",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _load_or_exit(file: Path) -> KeyBindings:
    try:
        return load_config(file, KeyBindings)
    except KeyBindingsConfigError as e:
        err_console.print(f"[red]✗[/red] {escape(e.path)}")
        for issue in e.issues:
            err_console.print(f"  {issue}", markup=False)
        raise typer.Exit(code=1)


@app.command()
def check(
    file: Path = typer.Argument(..., help="Keybindings file (.json, .yaml or .yml)"),
) -> None:
    """Validate a keybindings file and list its bindings."""
    bindings = _load_or_exit(file)

    table = Table(title=Text(str(file)))
    table.add_column("Action")
    table.add_column("Code")
    table.add_column("Modifiers")

    for action, event in bindings.root.items():
        record = encode_key_event(event)
        table.add_row(Text(action), Text(record.code), Text(record.modifiers))

    console.print(table)
    console.print(f"[green]✓[/green] {len(bindings.root)} binding(s) OK")


@app.command()
def normalize(
    file: Path = typer.Argument(..., help="Keybindings file to read"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write here instead of stdout"),
) -> None:
    """Rewrite a keybindings file in canonical form."""
    bindings = _load_or_exit(file)

    if output is None:
        fmt = "json" if file.suffix.lower() == ".json" else "yaml"
        typer.echo(dumps_config(bindings, fmt), nl=False)
        return

    try:
        dump_config(bindings, output)
    except KeyBindingsConfigError as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(code=1)


@app.command()
def encode(
    code: str = typer.Argument(..., help="One character or a key name like Up"),
    modifiers: Optional[str] = typer.Option(None, "--modifiers", "-m", help="Modifier list like ALT+CONTROL"),
) -> None:
    """Parse a key and modifiers and print their canonical form."""
    try:
        event = decode_key_event(KeyBindingRecord(code=code, modifiers=modifiers))
    except DecodingError as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    record = encode_key_event(event)
    typer.echo(f"code: {json.dumps(record.code, ensure_ascii=False)}")
    typer.echo(f"modifiers: {json.dumps(record.modifiers)}")


def main() -> None:
    """Main CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()
