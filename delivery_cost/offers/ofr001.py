"""
Offer OFR001 - 10% off

Applies to packages weighing 70-200 going no further than 200 in distance.
"""

from .base import Offer


class OFR001(Offer):
    """OFR001 - 10% discount inside the weight and distance bands."""

    # Identity
    code = "OFR001"

    # Pricing
    discount = 0.10

    # Eligibility (inclusive)
    min_weight = 70
    max_weight = 200
    min_distance = 0
    max_distance = 200
