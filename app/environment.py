from __future__ import annotations

import os
from pathlib import Path

_FALSE_VALUES = {"0", "false", "no", "off"}

DEFAULT_MAX_SEQUENTIAL_ADDRESSES = 65536


def is_docker_runtime() -> bool:
    override = os.getenv("VLANPOOL_DOCKER_RUNTIME")
    if override is not None:
        return override.strip().lower() not in _FALSE_VALUES
    return Path("/.dockerenv").exists()


def get_max_sequential_addresses() -> int:
    raw_value = os.getenv("VLANPOOL_MAX_SEQUENTIAL_ADDRESSES")
    if raw_value is None or not raw_value.strip():
        return DEFAULT_MAX_SEQUENTIAL_ADDRESSES
    try:
        value = int(raw_value.strip())
    except ValueError:
        return DEFAULT_MAX_SEQUENTIAL_ADDRESSES
    return value if value > 0 else DEFAULT_MAX_SEQUENTIAL_ADDRESSES
