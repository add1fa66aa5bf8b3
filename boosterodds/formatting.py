"""
Display helpers for probability figures and prices
"""

from typing import Optional


def format_probability(probability: float) -> str:
    """
    :param probability: Probability in [0, 1]
    :return: Percentage with two decimals, ie "12.34%"
    """
    return f"{probability * 100:.2f}%"


def format_price(price: Optional[str]) -> str:
    """
    :param price: Price as found in a compact card, ie "1.5"
    :return: Dollar amount with two decimals, or N/A when missing
    """
    if not price:
        return "N/A"
    return f"${float(price):.2f}"
