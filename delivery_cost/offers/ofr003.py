"""
Offer OFR003 - 5% off

Applies to packages weighing 10-150 with a delivery distance of 50-250.
"""

from .base import Offer


class OFR003(Offer):
    """OFR003 - 5% discount inside the weight and distance bands."""

    # Identity
    code = "OFR003"

    # Pricing
    discount = 0.05

    # Eligibility (inclusive, broadest weight band of the three)
    min_weight = 10
    max_weight = 150
    min_distance = 50
    max_distance = 250
