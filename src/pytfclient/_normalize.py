"""Normalization helpers.

Centralizes frame-id handling and lenient option parsing.
"""

from __future__ import annotations

import math
from typing import Any

from pytfclient._constants import FRAME_SEPARATOR


def normalize_frame_id(frame_id: str) -> str:
    """Strip a single leading ``/`` so ``"/odom"`` and ``"odom"`` are the same frame."""
    if frame_id.startswith(FRAME_SEPARATOR):
        return frame_id[1:]
    return frame_id


def safe_float(value: Any) -> float | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def positive_float(value: Any) -> float | None:
    parsed = safe_float(value)
    if parsed is None or parsed <= 0:
        return None
    return parsed


def positive_int(value: Any) -> int | None:
    parsed = positive_float(value)
    if parsed is None:
        return None
    result = int(parsed)
    return result if result > 0 else None


def non_empty_str(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    text = value.strip()
    return text if text else None
