"""
FARS Command-Line Interface

Exposes two subcommands:

    fars summarize --years 2013 2014 [...]   Monthly accident counts per year
    fars map --state 1 --year 2013 [...]     Accident locations for one state

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .data.summary import summarize
from .errors import FarsError
from .reports.generators import map_state
from .utils.logging import configure_logging


# ===========================================================================
# Shared helpers
# ===========================================================================

def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\nError: {message}", file=sys.stderr)
    sys.exit(1)


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_summarize(args: argparse.Namespace) -> None:
    """Print (or write as CSV) the month-by-year accident counts.

    Args:
        args: Parsed CLI arguments.  Required field: ``args.years``.
    """
    table = summarize(args.years, data_dir=args.data_dir)

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(out_path)
        print(f"Summary saved → {out_path}")
    else:
        print(table.to_string())


def handle_map(args: argparse.Namespace) -> None:
    """Build the state accident map and write/show it.

    Args:
        args: Parsed CLI arguments.  Required fields: ``args.state``,
              ``args.year``.
    """
    fig = map_state(
        args.state,
        args.year,
        data_dir=args.data_dir,
        output=args.output,
        show=args.show,
    )
    if fig is None:
        print(f"No accidents to plot for state {args.state} in {args.year}.")
    elif args.output:
        print(f"State map saved → {args.output}")


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with ``summarize`` and ``map``
        subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "FARS – Fatality Analysis Reporting System toolkit\n"
            "Summarize yearly accident files and map accident locations."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for the 'fars' logger (default: WARNING).",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )
    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        help="Count accidents per month for one or more years.",
        description=(
            "Read accident_<year>.csv.bz2 for each year and print a table\n"
            "with months as rows and years as columns.  Years whose files\n"
            "are missing or unreadable are skipped with a warning."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        metavar="YYYY",
        help="One or more years, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Directory holding the accident files (default: cwd).",
    )
    p_sum.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="Write the summary as CSV instead of printing it.",
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Map accident locations for one state and year.",
        description=(
            "Plot every accident of a state for a year on a base map.\n"
            "Unknown coordinates (LONGITUD > 900, LATITUDE > 90) are dropped."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_map.add_argument(
        "--state",
        required=True,
        metavar="N",
        help="FARS state code, e.g. 1 for Alabama.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        metavar="YYYY",
        help="Year of the accident file to load.",
    )
    p_map.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Directory holding the accident files (default: cwd).",
    )
    p_map.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="Write the map to this .html file.",
    )
    p_map.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Open the map in the default Plotly renderer.",
    )
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    parser = _build_parser()
    args   = parser.parse_args(argv)
    configure_logging(args.log_level, json_format=args.log_json)
    try:
        args.func(args)
    except FarsError as exc:
        _die(str(exc))


if __name__ == "__main__":
    main()
