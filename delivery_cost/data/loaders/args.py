"""
Package Argument Loader

Turns the flat token list from the command line into package records:

    [id, weight, distance, offer_code, id, weight, distance, offer_code, ...]

FAILURE MODES
-------------
    Count mismatch      - len(tokens) != count * 4. Fatal: raises
                          ValidationError before anything is parsed.
    Malformed group     - weight or distance is not a usable number. The
                          group is skipped and parsing continues.
    Incomplete group    - fewer than 4 tokens left. Parsing stops with a
                          warning; packages parsed so far are kept.
"""

import logging
import math
import re
from typing import NamedTuple

import polars as pl


logger = logging.getLogger(__name__)

GROUP_SIZE = 4

# Plain decimal or exponent notation only: no underscores, no surrounding spaces
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Larger measures would overflow the cost arithmetic
MAX_MEASURE = 1e300

PACKAGE_SCHEMA = {
    "package_id": pl.Utf8,
    "weight": pl.Float64,
    "distance": pl.Float64,
    "offer_code": pl.Utf8,
}


class ValidationError(ValueError):
    """Raised when the package arguments cannot be processed at all."""


# =============================================================================
# PACKAGE RECORD
# =============================================================================

def _parse_measure(token: str) -> float | None:
    """Parse a weight or distance token. None if not a plain number in [0, MAX_MEASURE]."""
    if NUMBER_PATTERN.fullmatch(token) is None:
        return None
    value = float(token)
    if not math.isfinite(value) or not 0 <= value <= MAX_MEASURE:
        return None
    return value


class Package(NamedTuple):
    """A single package in the batch."""
    id: str
    weight: float
    distance: float
    offer_code: str

    @classmethod
    def from_tokens(cls, tokens: list[str]) -> "Package | None":
        """Build a package from [id, weight, distance, offer_code]. None if malformed."""
        if len(tokens) != GROUP_SIZE:
            return None

        weight = _parse_measure(tokens[1])
        distance = _parse_measure(tokens[2])
        if weight is None or distance is None:
            return None

        return cls(tokens[0], weight, distance, tokens[3])


# =============================================================================
# LOADING
# =============================================================================

def validate_package_count(tokens: list[str], count: int) -> None:
    """Raise ValidationError unless there are exactly four tokens per package."""
    if len(tokens) != count * GROUP_SIZE:
        raise ValidationError(
            "The number of packages provided does not match the expected count. "
            f"Expected {count * GROUP_SIZE} values for {count} package(s), got {len(tokens)}."
        )


def parse_packages(tokens: list[str]) -> list[Package]:
    """
    Parse consecutive groups of four tokens into packages, in input order.

    Malformed groups are skipped. An incomplete trailing group stops parsing.
    """
    packages = []

    for index in range(0, len(tokens), GROUP_SIZE):
        if index + GROUP_SIZE > len(tokens):
            logger.warning("Incomplete group at index %d", index)
            break

        package = Package.from_tokens(tokens[index:index + GROUP_SIZE])
        if package is None:
            continue
        packages.append(package)

    return packages


def packages_to_df(packages: list[Package]) -> pl.DataFrame:
    """Build the package DataFrame (one row per package, input order kept)."""
    return pl.DataFrame(
        {
            "package_id": [p.id for p in packages],
            "weight": [p.weight for p in packages],
            "distance": [p.distance for p in packages],
            "offer_code": [p.offer_code for p in packages],
        },
        schema=PACKAGE_SCHEMA,
    )


def load_packages(tokens: list[str], count: int) -> pl.DataFrame:
    """
    Load packages from command line tokens.

    Args:
        tokens: Flat list of [id, weight, distance, offer_code] groups
        count: Number of packages the caller declared

    Returns:
        DataFrame with columns: package_id, weight, distance, offer_code

    Raises:
        ValidationError: If the token count does not match count * 4
    """
    validate_package_count(tokens, count)
    packages = parse_packages(tokens)

    skipped = count - len(packages)
    if skipped:
        logger.info("Skipped %d malformed package(s)", skipped)
    logger.info("Loaded %d package(s)", len(packages))

    return packages_to_df(packages)
