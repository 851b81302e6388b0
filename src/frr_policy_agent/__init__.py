"""Command line runtime around the frr_policy compiler."""

from .config import load_specification, parse_specification  # noqa: F401

__all__ = [
    "load_specification",
    "parse_specification",
]
