"""
Delivery Cost Calculator
========================

Calculates discount and total delivery cost for a batch of packages.

Each package is four values: ID WEIGHT DISTANCE OFFER_CODE. One line is
printed per valid package: "<id> <discount> <total>", both truncated to
whole numbers.

Usage:
    python -m delivery_cost.scripts.calculator 100 3 PKG1 5 5 OFR001 PKG2 15 5 OFR002 PKG3 10 100 OFR003
    python -m delivery_cost.scripts.calculator 100 1 PKG1 50 100 OFR003 --breakdown
    delivery-cost 100 1 PKG1 50 100 OFR003 -v
"""

import argparse
import logging
import math
import sys

import polars as pl

from delivery_cost.calculate_costs import calculate_costs, format_results
from delivery_cost.data.loaders import MAX_MEASURE, ValidationError, load_packages
from delivery_cost.version import VERSION


logger = logging.getLogger(__name__)


# =============================================================================
# ARGUMENT TYPES
# =============================================================================

def base_cost_type(value: str) -> float:
    """Base delivery cost: a non-negative number no larger than MAX_MEASURE."""
    try:
        cost = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid base delivery cost: '{value}'")
    if not math.isfinite(cost) or not 0 <= cost <= MAX_MEASURE:
        raise argparse.ArgumentTypeError(
            f"base delivery cost must be a non-negative number up to {MAX_MEASURE:g}, got '{value}'"
        )
    return cost


def package_count_type(value: str) -> int:
    """Number of packages: a non-negative integer."""
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of packages: '{value}'")
    if count < 0:
        raise argparse.ArgumentTypeError(
            f"number of packages must not be negative, got '{value}'"
        )
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="delivery-cost",
        description="A utility for calculating the total delivery cost.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Package format:
  ID WEIGHT DISTANCE OFFER_CODE, repeated once per package
  Malformed packages are left out of the output without an error.

Examples:
  delivery-cost 100 3 PKG1 5 5 OFR001 PKG2 15 5 OFR002 PKG3 10 100 OFR003
  delivery-cost 100 1 PKG1 50 100 OFR003 --breakdown
        """
    )

    parser.add_argument(
        "base_cost",
        type=base_cost_type,
        help="Base delivery cost"
    )
    parser.add_argument(
        "package_count",
        type=package_count_type,
        help="Number of packages"
    )
    parser.add_argument(
        "packages",
        nargs="*",
        metavar="PACKAGE",
        help="Package details in the format 'ID WEIGHT DISTANCE OFFER_CODE'"
    )

    parser.add_argument(
        "--breakdown",
        action="store_true",
        help="Also print raw cost, discount rate, discount and total per package"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log pipeline progress to stderr, including how many malformed "
             "packages were skipped (silent otherwise)"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}"
    )

    return parser


# =============================================================================
# OUTPUT
# =============================================================================

def print_breakdown(df: pl.DataFrame, base_cost: float) -> None:
    """Print per-package cost breakdown."""
    print("\n" + "=" * 60)
    print("COST BREAKDOWN")
    print("=" * 60)
    print(f"Base delivery cost: {base_cost:.2f}\n")

    print(f"{'Package':<12}{'Offer':<10}{'Raw':>10}{'Rate':>8}{'Discount':>10}{'Total':>10}")
    print("-" * 60)
    for row in df.iter_rows(named=True):
        print(
            f"{row['package_id']:<12}{row['offer_code']:<10}"
            f"{row['cost_raw']:>10.2f}{row['discount_rate']:>8.0%}"
            f"{row['cost_discount']:>10.2f}{row['cost_total']:>10.2f}"
        )
    print()


# =============================================================================
# MAIN
# =============================================================================

def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    # Options may sit anywhere among the package tokens
    args = parser.parse_intermixed_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        df = load_packages(args.packages, args.package_count)
    except ValidationError as e:
        parser.error(str(e))

    df = calculate_costs(df, args.base_cost)
    logger.info("Calculated costs for %d package(s)", len(df))

    for line in format_results(df):
        print(line)

    if args.breakdown:
        print_breakdown(df, args.base_cost)


if __name__ == "__main__":
    main()
