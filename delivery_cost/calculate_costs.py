"""
Delivery Cost Calculator

DataFrame in, DataFrame out. The input can come from any source (command line
tokens, CSV, manual creation) as long as it contains the required columns. The
output is the same DataFrame with cost columns appended, in input order.

REQUIRED INPUT COLUMNS
----------------------
    package_id          - Package identifier (echoed in output)
    weight              - Package weight
    distance            - Delivery distance
    offer_code          - Offer code (unknown codes get no discount)

OUTPUT COLUMNS ADDED
--------------------
    calculate_costs() adds:
        - cost_raw          (base_cost + weight and distance surcharges)
        - discount_rate     (resolved from the offer code table)
        - cost_discount     (cost_raw * discount_rate)
        - cost_total        (cost_raw - cost_discount)
        - calculator_version

USAGE
-----
    from delivery_cost.calculate_costs import calculate_costs, format_results
    result = calculate_costs(df, base_cost=100)
    lines = format_results(result)
"""

from collections.abc import Mapping

import polars as pl

from .data import WEIGHT_RATE, DISTANCE_RATE
from .offers import Offer, discount_rate
from .version import VERSION


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_costs(
    df: pl.DataFrame,
    base_cost: float,
    offers: Mapping[str, type[Offer]] | None = None
) -> pl.DataFrame:
    """
    Calculate delivery costs for a package DataFrame.

    Args:
        df: Package DataFrame with required columns (see module docstring)
        base_cost: Base delivery cost applied to every package
        offers: Offer code table (built-in OFFER_CODES if not provided)

    Returns:
        DataFrame with raw cost, discount and total cost appended.
        No rounding is applied.
    """
    df = _add_raw_cost(df, base_cost)
    df = _apply_discount(df, offers)
    df = _calculate_total(df)
    df = _stamp_version(df)
    return df


# =============================================================================
# CALCULATION STEPS
# =============================================================================

def _add_raw_cost(df: pl.DataFrame, base_cost: float) -> pl.DataFrame:
    """Raw delivery cost before any discount."""
    return df.with_columns(
        (
            pl.lit(float(base_cost)) +
            pl.col("weight") * WEIGHT_RATE +
            pl.col("distance") * DISTANCE_RATE
        ).alias("cost_raw")
    )


def _apply_discount(
    df: pl.DataFrame,
    offers: Mapping[str, type[Offer]] | None
) -> pl.DataFrame:
    """Resolve the discount rate and discount amount per package."""
    df = df.with_columns(discount_rate(offers).alias("discount_rate"))
    return df.with_columns(
        (pl.col("cost_raw") * pl.col("discount_rate")).alias("cost_discount")
    )


def _calculate_total(df: pl.DataFrame) -> pl.DataFrame:
    """Total cost after discount."""
    return df.with_columns(
        (pl.col("cost_raw") - pl.col("cost_discount")).alias("cost_total")
    )


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


# =============================================================================
# SINGLE PACKAGE
# =============================================================================

def calculate_total_cost(package, base_cost: float, discount: float) -> tuple[float, float]:
    """
    Cost for a single package, same rules as calculate_costs().

    Args:
        package: Anything with weight and distance attributes
        base_cost: Base delivery cost
        discount: Discount rate in [0, 1]

    Returns:
        (total_cost, discount_amount), unrounded
    """
    cost_raw = base_cost + package.weight * WEIGHT_RATE + package.distance * DISTANCE_RATE
    discount_amount = cost_raw * discount
    return cost_raw - discount_amount, discount_amount


# =============================================================================
# OUTPUT
# =============================================================================

def format_results(df: pl.DataFrame) -> list[str]:
    """
    Render one "<id> <discount> <total>" line per package, in row order.

    Discount and total are truncated toward zero, not rounded
    (665.9 -> 665). Python int() has no upper bound, so very large
    costs still print in full.
    """
    return [
        f"{package_id} {int(discount)} {int(total)}"
        for package_id, discount, total in df.select(
            "package_id", "cost_discount", "cost_total"
        ).iter_rows()
    ]


__all__ = [
    "calculate_costs",
    "calculate_total_cost",
    "format_results",
]
