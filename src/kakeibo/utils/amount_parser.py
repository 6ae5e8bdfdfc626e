"""Amount parsing utilities."""

import re


def parse_amount(amount_str: str) -> int:
    """Parse an amount string into integer minor units.

    Handles various formats:
    - "1500"
    - "-1500"
    - "¥1,500"
    - "(1500)" (negative in parentheses)

    Fractional amounts are rejected; amounts are always whole minor units.

    Args:
        amount_str: Amount string

    Returns:
        Integer amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols and thousands separators
    amount_str = re.sub(r"[$€£¥,]", "", amount_str).strip()

    if not re.fullmatch(r"[+-]?\d+", amount_str):
        raise ValueError(f"Could not parse amount '{amount_str}': expected a whole number")

    amount = int(amount_str)
    return -amount if is_negative else amount
