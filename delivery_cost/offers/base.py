"""
Offer Base Class

Shared base class for all promotional offer codes.
"""

from abc import ABC
import polars as pl


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def in_band(col: str, lower: float, upper: float) -> pl.Expr:
    """
    Check if a column falls within an eligibility band.

    Both bounds are inclusive: a package sitting exactly on lower or
    upper is eligible.

    Args:
        col: Column name to test (e.g., "weight", "distance")
        lower: Inclusive lower bound
        upper: Inclusive upper bound

    Returns:
        Polars expression evaluating to True if the value is in the band
    """
    return (pl.col(col) >= lower) & (pl.col(col) <= upper)


# =============================================================================
# BASE CLASS
# =============================================================================

class Offer(ABC):
    """
    Base class for all offer codes.

    Attributes:
        IDENTITY
            code            - Offer code as typed by the customer (e.g., "OFR001")

        PRICING
            discount        - Decimal discount (0.10 = 10% off the raw cost)

        ELIGIBILITY (inclusive bands)
            min_weight      - Lowest eligible package weight
            max_weight      - Highest eligible package weight
            min_distance    - Shortest eligible delivery distance
            max_distance    - Longest eligible delivery distance
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    code: str

    # -------------------------------------------------------------------------
    # PRICING
    # -------------------------------------------------------------------------
    discount: float

    # -------------------------------------------------------------------------
    # ELIGIBILITY
    # -------------------------------------------------------------------------
    min_weight: float
    max_weight: float
    min_distance: float
    max_distance: float

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def is_eligible(cls, weight: float, distance: float) -> bool:
        """True if both weight and distance fall inside the offer's bands."""
        return (
            cls.min_weight <= weight <= cls.max_weight and
            cls.min_distance <= distance <= cls.max_distance
        )

    @classmethod
    def discount_for(cls, weight: float, distance: float) -> float:
        """Discount rate for a single package (0.0 when ineligible)."""
        if cls.is_eligible(weight, distance):
            return cls.discount
        return 0.0

    @classmethod
    def conditions(cls) -> pl.Expr:
        """Polars expression for when this offer's discount applies."""
        return (
            in_band("weight", cls.min_weight, cls.max_weight) &
            in_band("distance", cls.min_distance, cls.max_distance)
        )
