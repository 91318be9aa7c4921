# pwnedcheck/main.py
"""
Command-line entry point for pwnedcheck.
Interactive lookup loop by default; one-shot checks, raw range dumps and the
web interface behind flags.
"""

import argparse
import getpass
import sys
from typing import Callable, Optional, Sequence

from .core.checker import PasswordChecker
from .core.exceptions import PwnedCheckError
from .core.interfaces import PwnedClient
from .utils.config import get_config
from .utils.logger import setup_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_COMPROMISED = 1
EXIT_ERROR = 2


def describe_count(count: int) -> str:
    """Human-readable verdict for a breach count."""
    if count > 0:
        return f"This password has been seen in {count} breaches"
    return "This password is ok"


def check_once(checker: PwnedClient, password: str, is_hashed: bool = False) -> int:
    """
    Look up one password and print the verdict.

    Returns:
        int: Process exit code
    """
    try:
        count = checker.get_breach_count(password, is_hashed=is_hashed)
    except PwnedCheckError as e:
        logger.error(f"Lookup failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    print(describe_count(count))
    return EXIT_COMPROMISED if count > 0 else EXIT_OK


def print_raw(checker: PwnedClient, password: str, is_hashed: bool = False) -> int:
    """Print the raw range body for the input's prefix."""
    try:
        hashed = password if is_hashed else PasswordChecker.compute_hash(password)
        print(checker.get_matches_raw(hashed))
    except PwnedCheckError as e:
        logger.error(f"Range request failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_OK


def run_interactive(
    checker: PwnedClient,
    is_hashed: bool = False,
    read_password: Callable[[str], str] = getpass.getpass,
) -> int:
    """
    Prompt for passwords until EOF or Ctrl+C.

    Lookup errors are reported and the loop carries on.
    """
    while True:
        try:
            password = read_password("Enter password to test: ")
        except (EOFError, KeyboardInterrupt):
            print()
            return EXIT_OK

        if not password:
            continue

        check_once(checker, password, is_hashed=is_hashed)
        print()


def launch_web(checker: PwnedClient) -> int:
    """Launch the Gradio interface with configured server settings."""
    from .ui.gradio_app import create_lookup_interface

    config = get_config()
    interface = create_lookup_interface(checker)
    launch_kwargs = config.get_gradio_kwargs()

    logger.info(f"Launching server on {config.server_host}:{config.server_port}")
    interface.launch(**launch_kwargs)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pwnedcheck",
        description="Check passwords against Pwned Passwords using k-anonymity"
    )

    parser.add_argument(
        "--check",
        type=str,
        metavar="PASSWORD",
        help="Check a single password and exit (exit code 1 if compromised)"
    )

    parser.add_argument(
        "--hashed",
        action="store_true",
        help="Treat input as a SHA-1 hash instead of a plain-text password"
    )

    parser.add_argument(
        "--raw",
        type=str,
        metavar="PASSWORD",
        help="Print the raw range response for the password's hash prefix"
    )

    parser.add_argument(
        "--web",
        action="store_true",
        help="Launch the web interface"
    )

    parser.add_argument(
        "--config-check",
        action="store_true",
        help="Check configuration and exit"
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None, checker: Optional[PwnedClient] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = get_config()
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_ERROR

    setup_logging(
        level=args.log_level or config.log_level,
        log_file=config.get_log_file_path()
    )

    if args.config_check:
        print(config)
        return EXIT_OK

    owns_checker = checker is None
    checker = checker or PasswordChecker(config=config)

    try:
        if args.check is not None:
            return check_once(checker, args.check, is_hashed=args.hashed)

        if args.raw is not None:
            return print_raw(checker, args.raw, is_hashed=args.hashed)

        if args.web:
            return launch_web(checker)

        return run_interactive(checker, is_hashed=args.hashed)
    finally:
        if owns_checker:
            checker.close()


if __name__ == "__main__":
    sys.exit(main())
