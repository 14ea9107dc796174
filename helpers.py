"""
Helper functions for the dashboard application.
"""

import math

import pandas as pd

from config import HIDDEN_STYLE, VISIBLE_STYLE


SI_PREFIXES = {
    -24: "y", -21: "z", -18: "a", -15: "f", -12: "p", -9: "n", -6: "µ", -3: "m",
    0: "", 3: "k", 6: "M", 9: "G", 12: "T", 15: "P", 18: "E", 21: "Z", 24: "Y",
}


def format_price(price):
    """Format a price for the hover tooltip.

    Args:
        price (float | None): The price to format.

    Returns:
        str: Pound sign and thousands-grouped integer (e.g. "£500,000"),
        or "N/A" if null.
    """
    if pd.isnull(price):
        return "N/A"
    return f"£{price:,.0f}"


def si_format(num, precision=2):
    """Format a number with an SI prefix to a number of significant figures.

    Rounds to ``precision`` significant figures first, then picks the prefix
    from the rounded exponent, so trailing zeros are kept.

    Args:
        num (float | int): The number to format.
        precision (int): Significant figures. Defaults to 2.

    Returns:
        str: Formatted string (e.g. "450k", "1.0M").

    Examples:
        si_format(450000) returns "450k"
        si_format(1200000) returns "1.2M"
        si_format(2000000) returns "2.0M"
    """
    if num == 0:
        return "0." + "0" * (precision - 1) if precision > 1 else "0"

    sign = "-" if num < 0 else ""
    mantissa, exponent = f"{abs(num):.{precision - 1}e}".split("e")
    exponent = int(exponent)
    digits = mantissa.replace(".", "")

    prefix_exponent = max(-8, min(8, math.floor(exponent / 3))) * 3
    i = exponent - prefix_exponent + 1
    n = len(digits)

    if i == n:
        body = digits
    elif i > n:
        body = digits + "0" * (i - n)
    elif i > 0:
        body = digits[:i] + "." + digits[i:]
    else:
        body = "0." + "0" * -i + digits

    return f"{sign}{body}{SI_PREFIXES[prefix_exponent]}"


def format_si_price(value):
    """Format a legend tick label, e.g. 450000 -> "£450k"."""
    return f"£{si_format(value)}"


def tooltip_html(name, price):
    """Tooltip markup for a region: name, line break, formatted price."""
    return f"{name}<br>{format_price(price)}"


def toggle_map_visibility(england_hidden):
    """Flip which map is shown.

    Args:
        england_hidden (bool): Whether the England map is currently hidden.

    Returns:
        tuple[bool, bool]: New (england_hidden, london_hidden) flags. Exactly
        one of them is True.
    """
    return (not england_hidden, england_hidden)


def visibility_style(hidden):
    """Return the container style for a hidden or visible map."""
    return dict(HIDDEN_STYLE) if hidden else dict(VISIBLE_STYLE)
