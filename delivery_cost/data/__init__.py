"""
Delivery Cost Data

Reference data and loaders for rates and package input.

Structure:
    - reference/: Static reference data (per-unit rates)
    - loaders/: Input loaders (command line tokens)
"""

from .reference.rates import WEIGHT_RATE, DISTANCE_RATE

# Re-export loaders for convenience
from .loaders import (
    Package,
    ValidationError,
    validate_package_count,
    parse_packages,
    packages_to_df,
    load_packages,
)


__all__ = [
    # Rates
    "WEIGHT_RATE",
    "DISTANCE_RATE",
    # Loaders
    "Package",
    "ValidationError",
    "validate_package_count",
    "parse_packages",
    "packages_to_df",
    "load_packages",
]
