from typing import Optional

from txconfidence import config


def _trim_fraction(fraction: str, min_decimals: int) -> str:
    trimmed = fraction.rstrip("0")
    if len(trimmed) < min_decimals:
        trimmed = fraction[:min_decimals]
    return trimmed


def format_units(amount: int, unit: Optional[str] = None) -> str:
    """Format an amount of base units as a coin string (e.g. 150000000 -> 1.50)."""
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(f"Amount must be an integer number of base units, got {amount!r}")
    if amount < 0:
        raise ValueError(f"Amount must not be negative, got {amount}")

    decimals = config.get_int("TXCONF_COIN_DECIMALS")
    min_decimals = config.get_int("TXCONF_MIN_DECIMALS")
    if decimals < 0:
        decimals = 0
    if min_decimals < 0:
        min_decimals = 0
    if min_decimals > decimals:
        min_decimals = decimals

    whole, remainder = divmod(amount, 10 ** decimals)
    text = str(whole)
    if decimals > 0:
        fraction = _trim_fraction(str(remainder).zfill(decimals), min_decimals)
        if fraction:
            text = f"{text}.{fraction}"

    suffix = config.get_str("TXCONF_CURRENCY_UNIT") if unit is None else unit
    if suffix:
        return f"{text} {suffix}"
    return text
