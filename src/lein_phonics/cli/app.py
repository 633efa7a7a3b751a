"""CLI application entry point for lein-phonics.

This module is the **sole error boundary** for the command-line tool.
It catches :class:`~lein_phonics.exceptions.PhonicsError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — encoding is delegated to the core
  layer.
* The code goes to stdout; everything else goes to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from lein_phonics.cli import exit_codes
from lein_phonics.cli.console import console, escape, output
from lein_phonics.core.models import DEFAULT_MAX_CODE_LEN
from lein_phonics.exceptions import PhonicsError
from lein_phonics.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``lein-phonics <name>``             — print the Lein code of *name*
    * ``lein-phonics <name> -n 6``        — use a code length of 6
    * ``lein-phonics <name> --strict``    — reject characters outside A–Z
    * ``lein-phonics --version``
    """
    parser = argparse.ArgumentParser(
        prog="lein-phonics",
        description="Encode a name with the Lein phonetic algorithm.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-n",
        "--max-code-len",
        type=int,
        default=DEFAULT_MAX_CODE_LEN,
        metavar="N",
        help=f"Length of the produced code (default: {DEFAULT_MAX_CODE_LEN}).",
    )
    parser.add_argument(
        "-s",
        "--strict",
        action="store_true",
        help="Fail on characters outside A-Z instead of dropping them.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log encoding details to stderr.",
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Name to encode.",
    )
    return parser


_VERBOSE_HANDLER_NAME = "lein_phonics.cli.verbose"


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logger = logging.getLogger("lein_phonics")
    logger.setLevel(logging.DEBUG)
    if any(h.get_name() == _VERBOSE_HANDLER_NAME for h in logger.handlers):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_VERBOSE_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_encode(name: str, *, max_code_len: int, strict: bool) -> int:
    """Encode a single *name* and print its code."""
    from lein_phonics.core.encoder import LeinEncoder

    encoder = LeinEncoder()
    encoder.set_max_code_len(max_code_len)
    encoder.set_strict(strict)

    output.print(encoder.encode(name), markup=False)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the lein-phonics CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.name is None:
        parser.print_help()
        return exit_codes.SUCCESS

    _configure_logging(args.verbose)
    return _handle_encode(
        args.name,
        max_code_len=args.max_code_len,
        strict=args.strict,
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except PhonicsError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
