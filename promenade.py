"""
Promenade CLI

Runs a dance program over a line of SIZE dancers for ROUNDS rounds and
reports the final line, using cycle detection so that very large round
counts finish after a handful of real rounds.

Usage:
  promenade [SIZE] [PROGRAM] [ROUNDS] [--output plain|rich|json] [--receipts PATH]

Examples:
  promenade                           # 5 dancers, ./example, 1 round
  promenade 16 input                  # 16 dancers, one round of ./input
  promenade 16 input 1000000000       # a billion rounds
  promenade 16 input 1000 -o json --receipts receipts.jsonl

Exit codes:
  - 0: success
  - 2: fatal error (missing or unreadable file, bad token, move that does not
       fit, bad size)
"""

from __future__ import annotations

import json
import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from receipts import write_receipt_jsonl
from dance import (
    DanceConfig,
    DanceResult,
    ParseError,
    PreconditionViolation,
    DEFAULT_SIZE,
    DEFAULT_PROGRAM,
    DEFAULT_ROUNDS,
    run_config,
    generate_report,
    export_json,
)

console = Console()


def print_error(message: str) -> None:
    """Print an error message with red X."""
    console.print(f"[red]✗[/red] {escape(message)}")


def _fail(output: str, error: str, message: str, **extra) -> None:
    if output == "json":
        click.echo(json.dumps({"error": error, "message": message, **extra}))
    else:
        print_error(message)
    sys.exit(2)


def _print_rich(result: DanceResult, config: DanceConfig) -> None:
    table = Table(title="Dance")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Size", str(config.size))
    table.add_row("Program", escape(config.program_path))
    table.add_row("Rounds", f"{result.rounds:,}")
    table.add_row("Rounds simulated", f"{result.rounds_simulated:,}")
    if result.cycle_detected:
        table.add_row("Cycle", f"starts at round {result.cycle_start}, length {result.cycle_length}")
    else:
        table.add_row("Cycle", "[dim]none[/dim]")
    table.add_row("Result", f"[bold green]{result.final_state}[/bold green]")
    console.print(table)


@click.command()
@click.argument("size", type=int, default=DEFAULT_SIZE, required=False)
@click.argument("program", type=str, default=DEFAULT_PROGRAM, required=False)
@click.argument("rounds", type=int, default=DEFAULT_ROUNDS, required=False)
@click.option("--output", "-o", type=click.Choice(["plain", "rich", "json"]), default="plain")
@click.option("--receipts", "receipts_path", type=click.Path(dir_okay=False), default=None,
              help="Append run receipts to this JSONL file")
def main(size: int, program: str, rounds: int, output: str,
         receipts_path: Optional[str]) -> None:
    """Dance PROGRAM on SIZE dancers for ROUNDS rounds."""
    config = DanceConfig(size=size, program_path=program, rounds=rounds)

    try:
        result = run_config(config)
    except FileNotFoundError:
        _fail(output, "program not found", f"Program file not found: {program}", path=program)
    except ParseError as e:
        _fail(output, "parse error", f"Cannot parse {program}: {e}", token=e.token, index=e.index)
    except PreconditionViolation as e:
        _fail(output, "precondition violation", f"Move does not fit: {e}",
              move=str(e.move) if e.move is not None else None)
    except OSError as e:
        _fail(output, "cannot read program", f"Cannot read program {program}: {e.strerror or e}",
              path=program)
    except ValueError as e:
        _fail(output, "invalid configuration", f"Invalid configuration: {e}")

    if receipts_path:
        with open(receipts_path, "a", encoding="utf-8") as fh:
            for receipt in result.receipts:
                write_receipt_jsonl(receipt, fh)

    if output == "json":
        click.echo(export_json(result))
    elif output == "rich":
        _print_rich(result, config)
    else:
        click.echo(generate_report(result))


if __name__ == "__main__":
    main()
