"""CLI adapter for ``fluentassert`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let people try assertions from a shell: compare two JSON values structurally or
by ordering and see the exact failure message a test would report.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command that wires global traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_diff` – runs ``deep_eq`` / ``not_deep_eq`` on JSON operands.
* :func:`cli_compare` – runs an ordering or equality assertion on JSON operands.
* :func:`cli_fail` – reports a fixed failure through ``require`` to exercise the
  abort path.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
Outermost layer. It calls the composition root (:mod:`fluentassert.core`) and
turns a failure message into output plus exit status 1.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from typing import Callable, Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .application.message import FailureMessage
from .core import comparable, load_settings, obj, ordered
from .adapters.differ.default import StructuralDiffer
from .domain.errors import TestAborted
from .observability import log_debug, log_error
from .testing import FAILURE_MESSAGE, PrintReporter

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

OPERATORS: Final[tuple[str, ...]] = ("lt", "le", "gt", "ge", "eq", "ne")


def _resolve_version() -> str:
    """Return the installed package version with sensible fallbacks.

    Returns
    -------
    str
        Distribution version if available, otherwise ``"0.0.0"``.
    """

    try:
        return metadata.version("fluentassert")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Fluent assertions that return failure messages",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="fluentassert",
    message="fluentassert version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("fluentassert")
    except metadata.PackageNotFoundError:
        click.echo("fluentassert (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'fluentassert')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("diff", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("want")
@click.argument("got")
@click.option(
    "--not",
    "negate",
    is_flag=True,
    default=False,
    help="Expect the values to differ (not_deep_eq)",
)
@click.pass_context
def cli_diff(ctx: click.Context, want: str, got: str, negate: bool) -> None:
    """Compare two JSON values structurally.

    Settings such as ``FLUENTASSERT_DIFF__CONTEXT`` apply to the listing.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["diff", "[1, 2]", "[1, 2]"])
    >>> result.output.strip(), result.exit_code
    ('ok', 0)
    """

    wrapper = obj(_parse_json(got, "GOT"), differ=StructuralDiffer(settings=load_settings()))
    want_value = _parse_json(want, "WANT")
    message = wrapper.not_deep_eq(want_value) if negate else wrapper.deep_eq(want_value)
    _finish(ctx, "diff", message)


@cli.command("compare", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("got")
@click.argument("operator", type=click.Choice(OPERATORS, case_sensitive=False))
@click.argument("bound")
@click.pass_context
def cli_compare(ctx: click.Context, got: str, operator: str, bound: str) -> None:
    """Check ``GOT OPERATOR BOUND`` with the ordered or comparable assertions.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["compare", "3", "lt", "3"])
    >>> result.output.strip(), result.exit_code
    ('the object is not lesser', 1)
    """

    got_value = _parse_json(got, "GOT")
    bound_value = _parse_json(bound, "BOUND")
    assertion = _select_assertion(got_value, operator.lower())
    try:
        message = assertion(bound_value)
    except TypeError as exc:
        raise click.BadParameter(f"values cannot be compared: {exc}", param_hint="GOT/BOUND") from exc
    _finish(ctx, "compare", message)


@cli.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Report a fixed failure through ``require`` to exercise the abort path."""

    try:
        FailureMessage(FAILURE_MESSAGE).require(PrintReporter(), "fluentassert fail:")
    except TestAborted as exc:
        log_error("cli_aborted", command="fail", message=str(exc))
        raise


def _select_assertion(got: object, operator: str) -> Callable[[object], FailureMessage]:
    """Map an operator name to the bound assertion method."""

    if operator in {"eq", "ne"}:
        wrapper = comparable(got)
        return wrapper.eq if operator == "eq" else wrapper.not_eq
    fluent = ordered(got)  # type: ignore[type-var]
    return {
        "lt": fluent.lesser,
        "le": fluent.lesser_or_equal,
        "gt": fluent.greater,
        "ge": fluent.greater_or_equal,
    }[operator]


def _parse_json(raw: str, hint: str) -> object:
    """Decode *raw* as JSON or raise a Click parameter error."""

    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"not valid JSON: {exc}", param_hint=hint) from exc


def _finish(ctx: click.Context, command: str, message: FailureMessage) -> None:
    """Print the outcome and exit with status 1 on failure."""

    log_debug("cli_assertion", command=command, passed=message.passed)
    if message.passed:
        click.echo("ok")
        return
    click.echo(message)
    ctx.exit(1)


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="fluentassert",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
