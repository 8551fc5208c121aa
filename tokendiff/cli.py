from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, Optional

import click

from tokendiff.cmd_base import Base
from tokendiff.command import Command

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
}


def run_cmd(cmd_name: str, *args: str) -> None:
    argv: list[str] = ["tokendiff", cmd_name, *args]

    cmd: Base = Command.execute(
        Path.cwd(),
        os.environ.copy(),
        argv,
        sys.stdin,
        sys.stdout,
        sys.stderr,
    )

    sys.exit(cmd.status)


def compare_options(func: Callable) -> Callable:
    decorators = [
        click.argument("original", type=str),
        click.argument("edited", type=str),
        click.option(
            "-d",
            "--delimiter",
            "delimiter",
            type=str,
            default=None,
            help="Split inputs on <delimiter> (escapes like \\n are decoded).",
        ),
        click.option(
            "--lines", "preset", flag_value="lines", help="Compare line by line."
        ),
        click.option(
            "--words", "preset", flag_value="words", help="Compare word by word."
        ),
        click.option(
            "--chars", "preset", flag_value="chars", help="Compare character by character."
        ),
        click.option(
            "--no-trim",
            is_flag=True,
            help="Keep the common prefix and suffix in the LCS table.",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def compare_args(
    original: str,
    edited: str,
    delimiter: Optional[str],
    preset: Optional[str],
    no_trim: bool,
) -> list[str]:
    cmd_args: list[str] = []

    if delimiter is not None:
        cmd_args.append(f"--delimiter={delimiter}")
    if preset is not None:
        cmd_args.append(f"--{preset}")

    if no_trim:
        cmd_args.append("--no-trim")

    cmd_args.extend([original, edited])
    return cmd_args


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(name="diff")
@compare_options
@click.option(
    "-a",
    "--alignment",
    "show_alignment",
    is_flag=True,
    help="Print every token with its side instead of the merged text.",
)
def diff_cmd(
    original: str,
    edited: str,
    delimiter: Optional[str],
    preset: Optional[str],
    no_trim: bool,
    show_alignment: bool,
) -> None:
    """Show the edit distance and common subsequence of two files ('-' reads stdin)."""
    cmd_args = compare_args(original, edited, delimiter, preset, no_trim)

    if show_alignment:
        cmd_args.insert(0, "--alignment")

    run_cmd("diff", *cmd_args)


@cli.command(name="table")
@compare_options
def table_cmd(
    original: str,
    edited: str,
    delimiter: Optional[str],
    preset: Optional[str],
    no_trim: bool,
) -> None:
    """Print the LCS table of two files for inspection."""
    run_cmd("table", *compare_args(original, edited, delimiter, preset, no_trim))


if __name__ == "__main__":
    cli()
