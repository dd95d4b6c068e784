# ruff: noqa: I001
"""CLI for the ``ach_transactions`` package.

Command handlers (``cmd_send``, ``cmd_chargeback``, ``cmd_read``,
``cmd_demo``) return a process exit code and are wrapped by a Typer app.
Environment variables are loaded from a local ``.env`` with ``python-dotenv``
before dispatch; ``ACH_TRANSACTIONS_OUTPUT_DIR`` and
``ACH_TRANSACTIONS_LOG_LEVEL`` supply defaults for the root options.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
import typer
from dotenv import load_dotenv
from typer.models import ArgumentInfo

from .logging_setup import configure_logging, get_logger

_log = get_logger("ach_transactions.cli")

_OUTPUT_DIR_ENV = "ACH_TRANSACTIONS_OUTPUT_DIR"


# ---- Command handlers --------------------------------------------------------


def _fail(context: str, err: Exception, *, message: str | None = None) -> int:
    _log.error("%s: %s", context, err)
    print(f"Error: {message or err}", file=sys.stderr)
    return 1


def _ensure_dir(output_dir: Path) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)


def cmd_send(output_dir: Path) -> int:
    """Build the sample transactions file into ``output_dir``."""

    from .api import send_transactions
    from .nacha import AchError

    try:
        _ensure_dir(output_dir)
        send_transactions(output_dir)
    except (AchError, OSError) as e:
        return _fail("send failed", e)
    return 0


def cmd_chargeback(output_dir: Path) -> int:
    """Build the sample chargebacks file into ``output_dir``."""

    from .api import charge_back_transactions
    from .nacha import AchError

    try:
        _ensure_dir(output_dir)
        charge_back_transactions(output_dir)
    except (AchError, OSError) as e:
        return _fail("chargeback failed", e)
    return 0


def cmd_read(path: Path, *, as_json: bool = False) -> int:
    """Read, validate and summarize ``path``.

    With ``as_json`` the summary is printed as JSON instead of the plain text
    lines.
    """

    from .api import read_ach
    from .nacha import AchError

    try:
        summary = read_ach(path, echo=not as_json)
    except FileNotFoundError as e:
        return _fail(f"read of {path} failed", e, message=f"File not found: {path}")
    except (AchError, OSError) as e:
        return _fail(f"read of {path} failed", e)

    if as_json:
        print(summary.model_dump_json(indent=2))
    return 0


def cmd_demo(output_dir: Path) -> int:
    """Write both sample files and read them back."""

    from .api import run_demo
    from .nacha import AchError

    try:
        _ensure_dir(output_dir)
        run_demo(output_dir)
    except (AchError, OSError) as e:
        return _fail("demo failed", e)
    return 0


# ---- Typer app ---------------------------------------------------------------

app = typer.Typer(
    name="ach-transactions",
    help="Build and inspect NACHA ACH files from sample transactions.",
    no_args_is_help=False,
    add_completion=False,
)


def _output_dir(ctx: typer.Context) -> Path:
    return ctx.obj["output_dir"]


def _exit(code: int) -> None:
    if code:
        raise typer.Exit(code)


@app.command("send")
def send_cmd(ctx: typer.Context) -> None:
    """Build the credit/debit sample and write transactions.ach."""

    _exit(cmd_send(_output_dir(ctx)))


@app.command("chargeback")
def chargeback_cmd(ctx: typer.Context) -> None:
    """Build the return sample and write chargebacks.ach."""

    _exit(cmd_chargeback(_output_dir(ctx)))


# Module-level argument object (no calls in parameter defaults).
ACH_PATH_ARGUMENT: ArgumentInfo = typer.Argument(
    None,
    help="ACH file to read (defaults to transactions.ach in the output directory).",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)


@app.command("read")
def read_cmd(
    ctx: typer.Context,
    path: Path | None = ACH_PATH_ARGUMENT,
    *,
    as_json: bool = typer.Option(False, "--json", help="Print the summary as JSON."),
) -> None:
    """Read and validate an ACH file, then print a summary."""

    from .api import TRANSACTIONS_FILE

    target = path if path is not None else _output_dir(ctx) / TRANSACTIONS_FILE
    _exit(cmd_read(target, as_json=as_json))


@app.command("demo")
def demo_cmd(ctx: typer.Context) -> None:
    """Write both sample files and read them back."""

    _exit(cmd_demo(_output_dir(ctx)))


@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    *,
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        help=f"Directory for generated files (falls back to {_OUTPUT_DIR_ENV}, then '.').",
        file_okay=False,
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (falls back to ACH_TRANSACTIONS_LOG_LEVEL)."
    ),
) -> None:
    """Root command.

    Loads ``.env`` from the current working directory without overriding
    variables that are already set, configures logging and resolves the
    output directory for subcommands.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    try:
        configure_logging(log_level, force=True)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2) from e

    resolved = output_dir or Path(os.getenv(_OUTPUT_DIR_ENV) or ".")
    ctx.obj = {"output_dir": resolved}

    if ctx.invoked_subcommand is None:
        typer.echo("No subcommand provided. Use --help to see available commands.")
        raise typer.Exit(1)


def main() -> None:
    """Console-script entry point."""

    app()


if __name__ == "__main__":  # pragma: no cover
    main()
