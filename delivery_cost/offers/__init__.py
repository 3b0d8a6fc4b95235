"""
Offers Package

Exports all offer classes, the offer code table, and discount resolution.

The table maps offer code -> Offer class. Every function that reads it takes
an optional `offers` mapping, so callers can resolve discounts against a
different rule set without touching the cost calculation.

Resolution:
    - Unknown offer code            -> 0.0
    - Known code, package in bands  -> offer.discount
    - Known code, package outside   -> 0.0
"""

from collections.abc import Mapping
from types import MappingProxyType

import polars as pl

from .base import Offer, in_band
from .ofr001 import OFR001
from .ofr002 import OFR002
from .ofr003 import OFR003


# All offers
ALL = [OFR001, OFR002, OFR003]

# Offer code table (read-only)
OFFER_CODES: Mapping[str, type[Offer]] = MappingProxyType({o.code: o for o in ALL})


# =============================================================================
# LOOKUP
# =============================================================================

def get_offer(
    code: str,
    offers: Mapping[str, type[Offer]] | None = None
) -> type[Offer] | None:
    """Look up an offer by exact code match. Returns None if unknown."""
    if offers is None:
        offers = OFFER_CODES
    return offers.get(code)


# =============================================================================
# DISCOUNT RESOLUTION
# =============================================================================

def resolve_discount(
    package,
    offers: Mapping[str, type[Offer]] | None = None
) -> float:
    """
    Get the discount rate for a single package.

    Args:
        package: Anything with offer_code, weight and distance attributes
        offers: Offer code table (OFFER_CODES if not provided)

    Returns:
        Discount rate in [0, 1]; 0.0 for unknown codes or ineligible packages
    """
    offer = get_offer(package.offer_code, offers)
    if offer is None:
        return 0.0
    return offer.discount_for(package.weight, package.distance)


def discount_rate(offers: Mapping[str, type[Offer]] | None = None) -> pl.Expr:
    """
    Polars expression that resolves the discount rate per package row.

    Requires columns: offer_code, weight, distance.
    Returns 0.0 for unknown codes or ineligible packages.
    """
    if offers is None:
        offers = OFFER_CODES

    # Codes are unique keys, so at most one branch can match a row
    rate = pl.lit(0.0)
    for code, offer in offers.items():
        rate = (
            pl.when((pl.col("offer_code") == code) & offer.conditions())
            .then(pl.lit(float(offer.discount)))
            .otherwise(rate)
        )

    return rate


# =============================================================================
# VALIDATION
# =============================================================================

def validate_offers(offers: Mapping[str, type[Offer]] | None = None) -> None:
    """
    Validate offer table integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    if offers is None:
        offers = OFFER_CODES
    errors = []

    if offers is OFFER_CODES and len(OFFER_CODES) != len(ALL):
        errors.append("duplicate offer codes in ALL")

    for code, o in offers.items():
        # Check discount is a rate, not a percentage
        if not 0.0 <= o.discount <= 1.0:
            errors.append(f"{code}: discount {o.discount} must be between 0 and 1")

        # Check bands are not inverted
        if o.min_weight > o.max_weight:
            errors.append(f"{code}: min_weight exceeds max_weight")
        if o.min_distance > o.max_distance:
            errors.append(f"{code}: min_distance exceeds max_distance")

    if errors:
        raise ValueError("Offer configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_offers()

__all__ = [
    # Base
    "Offer",
    "in_band",
    # Offer classes
    "OFR001",
    "OFR002",
    "OFR003",
    # Table
    "ALL",
    "OFFER_CODES",
    # Helpers
    "get_offer",
    "resolve_discount",
    "discount_rate",
    "validate_offers",
]
