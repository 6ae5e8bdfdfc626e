"""Utility functions for kakeibo."""

from kakeibo.utils.date_parser import parse_date, parse_iso_date
from kakeibo.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_iso_date", "parse_amount"]
