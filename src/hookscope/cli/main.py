"""CLI entry point for hookscope."""
from __future__ import annotations

import asyncio
import logging
import sys
from typing import List, Optional

import click

from hookscope import __version__
from hookscope.config import EngineConfig, load_config
from hookscope.loader import execute_suite, load_suite
from hookscope.reporting import (
    JsonLinesTransport,
    JsonReporter,
    ObserverReporter,
    Reporter,
    TerminalReporter,
)


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"hookscope {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the hookscope version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Top level CLI group for hookscope."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = CliState(verbose=verbose)


@cli.command()
@click.option(
    "--suite",
    "suite_target",
    type=str,
    required=True,
    help="Suite module or file, optionally suffixed with :ATTR naming the spec list.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML configuration file.",
)
@click.option("--wait-time", type=click.IntRange(min=0), help="Resolver wait time in milliseconds.")
@click.option("--start-delay", type=click.IntRange(min=0), help="Delay before the first case in milliseconds.")
@click.option(
    "--report",
    "report_format",
    type=click.Choice(["terminal", "json"]),
    default="terminal",
    show_default=True,
    help="Report format (terminal by default).",
)
@click.option("--report-path", type=str, help="When --report json, write to this path.")
@click.option(
    "--observer",
    "observer_path",
    type=click.Path(dir_okay=False, writable=True),
    help="Stream line/final messages as JSON lines to this file ('-' for stdout).",
)
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.pass_obj
def run(
    state: CliState,
    suite_target: str,
    config_path: Optional[str],
    wait_time: Optional[int],
    start_delay: Optional[int],
    report_format: str,
    report_path: Optional[str],
    observer_path: Optional[str],
    no_color: bool,
) -> None:
    """Run every test case registered by a suite module."""

    if report_format == "json" and not report_path:
        raise click.UsageError("--report json requires --report-path")
    try:
        config = load_config(config_path) if config_path else EngineConfig()
        config = config.with_overrides(wait_time=wait_time, start_delay=start_delay)
        suite = load_suite(suite_target)
    except Exception as exc:
        raise click.ClickException(str(exc)) from exc

    reporters: List[Reporter] = []
    if report_format == "terminal":
        reporters.append(TerminalReporter(use_color=not no_color))
    else:
        reporters.append(JsonReporter(path=report_path))
    observer_stream = None
    if observer_path:
        observer_stream = click.open_file(observer_path, "w", encoding="utf-8")
        reporters.append(ObserverReporter(JsonLinesTransport(observer_stream)))
    try:
        report = asyncio.run(execute_suite(suite, config, reporters))
    except Exception as exc:  # pragma: no cover - CLI error translation
        raise click.ClickException(str(exc)) from exc
    finally:
        if observer_stream is not None:
            observer_stream.close()
    raise click.exceptions.Exit(0 if report.passed else 1)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="hookscope", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
