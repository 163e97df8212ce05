#!/usr/bin/env python
"""
Print the statement for the sample invoice.

Usage:
    python run_statement.py
    python run_statement.py --customer "Acme" --verbose
    python run_statement.py --version
"""

import argparse
import logging
import sys

from rich.console import Console

from shared.config import get_settings
from modules.statements.exceptions import StatementError
from modules.statements.samples import SAMPLE_PLAYS, sample_invoice
from modules.statements.service import get_statement_service

console = Console()


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description=f"{settings.app_name}: print a sample customer statement"
    )
    parser.add_argument("--customer", type=str, help="Customer name on the statement")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging and show error details",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{settings.app_name} {settings.app_version}",
    )
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose or settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level)

    invoice = sample_invoice(args.customer) if args.customer else sample_invoice()

    try:
        statement = get_statement_service().create_statement(invoice, SAMPLE_PLAYS)
    except StatementError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        if args.verbose:
            report = e.to_dict()
            console.print(f"  code: {report['error']}", markup=False, highlight=False)
            for key, value in report["details"].items():
                console.print(f"  {key}: {value}", markup=False, highlight=False)
        return 1

    console.print(statement, markup=False, highlight=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
