"""CLI entry point for diff2html."""

from __future__ import annotations

import logging
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler

from diff2html_cli.core.highlight import DiffGranularity
from diff2html_cli.errors import Diff2HtmlError, EmptyInputError
from diff2html_cli.pipeline.config import (
    DeliveryConfig,
    Destination,
    InputConfig,
    InputMode,
    Layout,
    OutputFormat,
    RenderConfig,
    UploadTarget,
)
from diff2html_cli.pipeline.controller import PipelineController

if TYPE_CHECKING:
    from collections.abc import Sequence

_E = TypeVar("_E", bound=StrEnum)

EXAMPLES = """\
[bold]Examples[/bold]

  diff2html -s line -f html -d word -i command -o preview -- -M HEAD~1
    diff last commit, line by line, word comparison between lines, previewed
    in the browser and input from git diff command

  diff2html -i file -- my-file-diff.diff
    reading the input from a file

  diff2html -f json -o stdout -- -M HEAD~1
    print json format to stdout

  diff2html -F my-pretty-diff.html -- -M HEAD~1
    print to file
"""

app = typer.Typer(
    name="diff2html",
    help="Render a diff as pretty HTML or JSON.",
    epilog=EXAMPLES,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from diff2html_cli import __version__

        typer.echo(f"diff2html {__version__}")
        raise typer.Exit()


def _parse_choice(enum_cls: type[_E], value: str, *, label: str) -> _E:
    """Parse a flag value into one of *enum_cls*'s members."""
    try:
        return enum_cls(value)
    except ValueError:
        valid = ", ".join(member.value for member in enum_cls)
        msg = f"Invalid {label} '{value}'. Choose from: {valid}"
        raise typer.BadParameter(msg) from None


def _build_configs(
    *,
    style: str,
    output_format: str,
    diff: str,
    input_mode: str,
    output: str,
    diffy: str | None,
    file: Path | None,
    diff_args: Sequence[str],
) -> tuple[InputConfig, RenderConfig, DeliveryConfig]:
    """Build the immutable run configuration from CLI flags."""
    input_config = InputConfig(
        mode=_parse_choice(InputMode, input_mode, label="input"),
        args=tuple(diff_args),
    )
    render_config = RenderConfig(
        granularity=_parse_choice(DiffGranularity, diff, label="diff style"),
        layout=_parse_choice(Layout, style, label="style"),
        format=_parse_choice(OutputFormat, output_format, label="format"),
    )
    delivery_config = DeliveryConfig(
        destination=_parse_choice(Destination, output, label="output"),
        file_path=file,
        upload_target=(
            _parse_choice(UploadTarget, diffy, label="diffy target") if diffy else None
        ),
    )
    return input_config, render_config, delivery_config


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def main(
    ctx: typer.Context,
    diff_args: Annotated[
        list[str] | None,
        typer.Argument(
            help="Arguments for git diff, or the diff file with --input file.",
            show_default=False,
        ),
    ] = None,
    style: Annotated[
        str,
        typer.Option("--style", "-s", help="Output style: line or side."),
    ] = "line",
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: html or json."),
    ] = "html",
    diff: Annotated[
        str,
        typer.Option("--diff", "-d", help="Diff style: word or char."),
    ] = "word",
    input_mode: Annotated[
        str,
        typer.Option("--input", "-i", help="Diff input source: file or command."),
    ] = "command",
    output: Annotated[
        str,
        typer.Option("--output", "-o", help="Output destination: preview or stdout."),
    ] = "preview",
    diffy: Annotated[
        str | None,
        typer.Option(
            "--diffy",
            "-u",
            help="Upload to diffy.org, then: browser, pbcopy, or print.",
        ),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option("--file", "-F", help="Send output to file (overrides output option)."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log each pipeline step to stderr."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Render a diff as pretty HTML or JSON.

    Usage: diff2html [options] -- [diff args]
    """
    _configure_logging(verbose)
    input_config, render_config, delivery_config = _build_configs(
        style=style,
        output_format=output_format,
        diff=diff,
        input_mode=input_mode,
        output=output,
        diffy=diffy,
        file=file,
        diff_args=diff_args or (),
    )

    controller = PipelineController(input_config, render_config, delivery_config)
    try:
        controller.run()
    except EmptyInputError as exc:
        typer.echo(str(exc), err=True)
        typer.echo(ctx.get_help())
        raise typer.Exit(code=1) from None
    except (OSError, Diff2HtmlError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from None
