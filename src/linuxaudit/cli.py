# src/linuxaudit/cli.py
"""linuxaudit Command Line Interface.

Entry point for the linuxaudit CLI tool.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import typer

from linuxaudit import __version__
from linuxaudit.contracts.errors import ParserConfigError
from linuxaudit.parser.linux_audit import TYPE_LINUX_AUDIT

if TYPE_CHECKING:
    from linuxaudit.plugins.manager import ParserRegistry

__all__ = ["app"]

# Module-level singleton for the parser registry
_registry_cache: ParserRegistry | None = None


def _get_registry() -> ParserRegistry:
    """Get initialized parser registry (singleton).

    Returns:
        ParserRegistry with the built-in parsers registered
    """
    global _registry_cache

    from linuxaudit.plugins.manager import ParserRegistry

    if _registry_cache is None:
        registry = ParserRegistry()
        registry.register_builtin_parsers()
        _registry_cache = registry
    return _registry_cache


app = typer.Typer(
    name="linuxaudit",
    help="linuxaudit: Parse Linux audit log lines into JSON records.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"linuxaudit version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Log level (DEBUG, INFO, WARNING, ERROR).",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Output structured JSON logs (for machine processing).",
    ),
) -> None:
    """linuxaudit: Parse Linux audit log lines into JSON records."""
    from linuxaudit.core.logging import configure_logging

    try:
        configure_logging(json_output=json_logs, level=log_level)
    except ValueError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from None


def _split_lines(text: str) -> list[str]:
    r"""Split on LF (or CRLF) only.

    str.splitlines() also breaks on \x0b, \x0c, \x1c-\x1e, \x85 and \u2028,
    which can occur inside an audit record.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _read_lines(source: str) -> list[str]:
    """Read physical lines from a path or '-' for stdin."""
    # Bytes, so text-mode newline translation never splits on a lone \r
    if source == "-":
        data = typer.get_binary_stream("stdin").read()
    else:
        data = Path(source).expanduser().read_bytes()
    return _split_lines(data.decode("utf-8"))


def _build_config(
    config: Path | None,
    overrides: dict[str, Any],
) -> dict[str, Any]:
    """Merge a config file with explicitly passed CLI flags (CLI wins)."""
    from linuxaudit.core.config import load_settings

    base: dict[str, Any] = {}
    if config is not None:
        base = load_settings(config).model_dump()
    base.update({k: v for k, v in overrides.items() if v is not None})
    return base


@app.command()
def parse(
    source: str = typer.Argument(
        ...,
        help="Audit log file to parse, or '-' for stdin.",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to parser settings YAML file.",
    ),
    keep_raw_data: bool | None = typer.Option(
        None,
        "--keep-raw-data/--no-keep-raw-data",
        help="Attach the original line to every row.",
    ),
    disable_record_err_data: bool | None = typer.Option(
        None,
        "--disable-record-err-data/--record-err-data",
        help="Drop the raw text of lines that fail to parse.",
    ),
    parallelism: int | None = typer.Option(
        None,
        "--parallelism",
        "-p",
        min=1,
        help="Worker count (default: CPU count).",
    ),
    join_continuations: bool = typer.Option(
        True,
        "--join-continuations/--no-join-continuations",
        help="Join indented continuation lines onto the previous line.",
    ),
) -> None:
    """Parse audit lines and write one JSON object per row to stdout.

    A batch where some lines fail still exits 0; the failures are
    summarized on stderr.
    """
    from linuxaudit.parser.lines import join_continuation_lines

    try:
        physical = _read_lines(source)
    except OSError as e:
        typer.secho(f"Error: cannot read {source}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from None

    try:
        parser_config = _build_config(
            config,
            {
                "keep_raw_data": keep_raw_data,
                "disable_record_err_data": disable_record_err_data,
                "parallelism": parallelism,
            },
        )
        parser = _get_registry().create(TYPE_LINUX_AUDIT, parser_config)
    except (FileNotFoundError, ParserConfigError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from None

    lines = join_continuation_lines(physical) if join_continuations else physical
    rows, stats = parser.parse(lines)

    for row in rows:
        typer.echo(json.dumps(row, ensure_ascii=False))

    if stats is not None:
        typer.secho(
            f"Parsed {len(lines)} lines: {stats.success} ok, {stats.errors} errors, "
            f"{len(stats.datasource_skip_index)} skipped. Last error: {stats.last_error}",
            fg=typer.colors.YELLOW,
            err=True,
        )


if __name__ == "__main__":
    app()
