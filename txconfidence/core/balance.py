from dataclasses import dataclass
from typing import Optional

from txconfidence.utils.formatting import format_units


@dataclass(frozen=True)
class BalanceProjection:
    """Display text for a balance plus whether any coins are held"""
    text: str
    positive: bool


def project_balance(amount: int, unit: Optional[str] = None) -> str:
    """Display string for a wallet balance given in base units."""
    return format_units(amount, unit)


def project(amount: int, unit: Optional[str] = None) -> BalanceProjection:
    return BalanceProjection(project_balance(amount, unit), amount > 0)
