"""
Offer OFR002 - 7% off

Applies to packages weighing 100-250 with a delivery distance of 50-150.
"""

from .base import Offer


class OFR002(Offer):
    """OFR002 - 7% discount inside the weight and distance bands."""

    # Identity
    code = "OFR002"

    # Pricing
    discount = 0.07

    # Eligibility (inclusive)
    min_weight = 100
    max_weight = 250
    min_distance = 50
    max_distance = 150
