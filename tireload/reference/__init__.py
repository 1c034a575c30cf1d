"""
Reference data for tire load calculations.

Provides loading of the tire table and speed / load-factor table that the
calculations look values up in.
"""

from tireload.reference.loader import (
    load_reference_data,
    parse_reference_data,
    reference_data_exists,
    resolve_data_file,
)

__all__ = [
    "load_reference_data",
    "parse_reference_data",
    "reference_data_exists",
    "resolve_data_file",
]
