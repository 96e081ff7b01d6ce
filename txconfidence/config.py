"""Runtime configuration profiles for txconfidence."""
from __future__ import annotations

import os
from typing import Dict

PROFILE = os.getenv("TXCONF_PROFILE", "default")

DEFAULTS: Dict[str, str] = {
    "TXCONF_CONFIRMATION_TARGET": "6",
    "TXCONF_INDICATOR_SIZE": "50",
    "TXCONF_PENDING_INDICATOR_SIZE": "20",
    "TXCONF_COIN_DECIMALS": "8",
    "TXCONF_MIN_DECIMALS": "2",
    "TXCONF_CURRENCY_UNIT": "",
    "TXCONF_DEBUG": "0",
    "TXCONF_DIAGNOSTIC_CACHE": "100",
}

PROFILES: Dict[str, Dict[str, str]] = {
    "default": dict(DEFAULTS),
    "debug": {
        **DEFAULTS,
        "TXCONF_DEBUG": "1",
        "TXCONF_DIAGNOSTIC_CACHE": "1000",
    },
    # Some wallets treat a single block as final for small amounts
    "fast": {
        **DEFAULTS,
        "TXCONF_CONFIRMATION_TARGET": "1",
    },
}


def apply_profile() -> None:
    profile = os.getenv("TXCONF_PROFILE", PROFILE)
    if not profile:
        return
    settings = PROFILES.get(profile)
    if not settings:
        return
    for key, value in settings.items():
        os.environ.setdefault(key, value)


def get_int(name: str) -> int:
    """Read an integer setting, falling back to the built-in default."""
    default = int(DEFAULTS[name])
    try:
        return int(os.getenv(name, DEFAULTS[name]))
    except (TypeError, ValueError):
        return default


def get_float(name: str) -> float:
    default = float(DEFAULTS[name])
    try:
        return float(os.getenv(name, DEFAULTS[name]))
    except (TypeError, ValueError):
        return default


def get_str(name: str) -> str:
    return os.getenv(name, DEFAULTS[name])


def confirmation_target() -> int:
    target = get_int("TXCONF_CONFIRMATION_TARGET")
    if target < 1:
        target = int(DEFAULTS["TXCONF_CONFIRMATION_TARGET"])
    return target


def indicator_size() -> float:
    return get_float("TXCONF_INDICATOR_SIZE")


def pending_indicator_size() -> float:
    return get_float("TXCONF_PENDING_INDICATOR_SIZE")


def diagnostic_cache_size() -> int:
    size = get_int("TXCONF_DIAGNOSTIC_CACHE")
    if size < 1:
        size = 1
    return size
