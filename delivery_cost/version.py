"""Calculator version, stamped on every calculated row."""

VERSION = "2024.05.1"
