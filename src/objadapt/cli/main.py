"""CLI entry point for objadapt."""
from __future__ import annotations

import inspect
import logging
import sys
from typing import Any, Optional, Tuple

import click

from objadapt import __version__
from objadapt.adaptors import ObjectModelAdaptor
from objadapt.core import NoSuchPropertyError, ObjAdaptError
from objadapt.logging_config import setup_logging
from objadapt.probe import ProbeOptions, load_plan, run_probes, select_targets
from objadapt.reporting import JsonReporter, Reporter, TerminalReporter
from objadapt.utils import import_string


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose
        self.adaptor = ObjectModelAdaptor()


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"objadapt {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the objadapt version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Check how template properties resolve against Python models."""

    setup_logging(logging.DEBUG if verbose else None)
    ctx.obj = CliState(verbose=verbose)


@cli.command()
@click.option(
    "--plan",
    "plan_path",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="YAML probe plan file.",
)
@click.option("--targets", "target_filters", type=str, help="Comma-separated target filters (supports globs).")
@click.option("--tags", "tag_filters", type=str, help="Comma-separated tags to include.")
@click.option("--skip-tags", "skip_tag_filters", type=str, help="Comma-separated tags to skip.")
@click.option("--fail-fast", is_flag=True, help="Stop at the first property that does not resolve.")
@click.option("--list", "list_only", is_flag=True, help="List matched targets without probing.")
@click.option(
    "--report",
    "report_format",
    type=click.Choice(["terminal", "json"]),
    default="terminal",
    show_default=True,
    help="Report format (terminal by default).",
)
@click.option("--report-path", type=str, help="When --report json, write to this path.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.pass_obj
def check(
    state: CliState,
    plan_path: str,
    target_filters: Optional[str],
    tag_filters: Optional[str],
    skip_tag_filters: Optional[str],
    fail_fast: bool,
    list_only: bool,
    report_format: str,
    report_path: Optional[str],
    no_color: bool,
) -> None:
    """Probe every property listed in a plan file."""

    options = ProbeOptions(
        targets=_split_csv(target_filters),
        tags=_split_csv(tag_filters),
        skip_tags=_split_csv(skip_tag_filters),
        fail_fast=fail_fast,
    )
    if report_format == "json" and not report_path:
        raise click.UsageError("--report json requires --report-path")
    try:
        plan = load_plan(plan_path)
    except Exception as exc:  # pragma: no cover - CLI error translation
        raise click.ClickException(str(exc)) from exc
    selected = select_targets(plan, options)
    if not selected:
        click.echo("No targets matched the provided filters.")
        raise click.exceptions.Exit(1)
    if list_only:
        for target in selected:
            click.echo(f"{target.name}: {', '.join(target.properties)}")
        raise click.exceptions.Exit(0)
    reporters: list[Reporter] = [TerminalReporter(use_color=not no_color)]
    if report_format == "json":
        assert report_path  # checked above
        reporters = [JsonReporter(report_path)]
    try:
        exit_code = run_probes(plan, options, reporters=reporters, adaptor=state.adaptor)
    except Exception as exc:  # pragma: no cover - CLI error translation
        raise click.ClickException(str(exc)) from exc
    raise click.exceptions.Exit(exit_code)


@cli.command()
@click.argument("target")
@click.argument("properties", nargs=-1, required=True)
@click.pass_obj
def resolve(state: CliState, target: str, properties: Tuple[str, ...]) -> None:
    """Show how PROPERTIES resolve on the object at TARGET (module:attr).

    Classes and functions are called without arguments to obtain the model.
    """

    try:
        model = _load_model(target)
    except Exception as exc:
        raise click.ClickException(f"Cannot load '{target}': {exc}") from exc
    failures = 0
    for name in properties:
        try:
            description = state.adaptor.describe(model, name)
            value = state.adaptor.get_property(model, name, name)
        except NoSuchPropertyError as exc:
            failures += 1
            detail = f" ({type(exc.cause).__name__}: {exc.cause})" if exc.cause is not None else ""
            click.echo(f"{name}: {exc}{detail}")
            continue
        except ObjAdaptError as exc:
            raise click.ClickException(str(exc)) from exc
        click.echo(f"{name}: {description} = {value!r}")
    raise click.exceptions.Exit(1 if failures else 0)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="objadapt", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


def _load_model(target: str) -> Any:
    obj = import_string(target)
    if inspect.isclass(obj) or inspect.isfunction(obj):
        return obj()
    return obj


def _split_csv(value: Optional[str]) -> Tuple[str, ...]:
    if not value:
        return tuple()
    parts = [part.strip() for part in value.split(",") if part.strip()]
    return tuple(parts)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
