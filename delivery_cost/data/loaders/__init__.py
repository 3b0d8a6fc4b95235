"""
Package Loaders

Loaders that turn raw input into the package DataFrame.
"""

from .args import (
    GROUP_SIZE,
    MAX_MEASURE,
    PACKAGE_SCHEMA,
    Package,
    ValidationError,
    validate_package_count,
    parse_packages,
    packages_to_df,
    load_packages,
)

__all__ = [
    "GROUP_SIZE",
    "MAX_MEASURE",
    "PACKAGE_SCHEMA",
    "Package",
    "ValidationError",
    "validate_package_count",
    "parse_packages",
    "packages_to_df",
    "load_packages",
]
