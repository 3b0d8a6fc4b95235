"""
Delivery Cost Calculator

Computes delivery cost for a batch of packages from a base cost, weight and
distance surcharges, and promotional offer codes.

Structure:
    - data/: Rate constants and package loaders
    - offers/: Offer code table and discount resolution
    - calculate_costs: DataFrame pipeline and output formatting
    - scripts/: Command line entry points
"""

from .version import VERSION

__all__ = ["VERSION"]
