from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

import numpy as np


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]


def coerce_numeric(values: Any) -> np.ndarray:
    """Coerce a 1-D value collection into float64, non-numeric entries become nan."""

    if values is None:
        return np.empty(0, dtype=np.float64)

    if pd is not None and isinstance(values, pd.DataFrame):
        numeric_cols = [c for c in values.columns if _is_numeric_dtype(values[c])]
        if not numeric_cols:
            return np.empty(0, dtype=np.float64)
        return _coerce_ndarray(values[numeric_cols].to_numpy().ravel())

    if pd is not None and isinstance(values, pd.Series):
        return _coerce_ndarray(values.to_numpy())

    if isinstance(values, np.ndarray):
        return _coerce_ndarray(values.ravel())

    if isinstance(values, (str, bytes, bytearray)) or not isinstance(values, Iterable):
        return _coerce_ndarray(np.asarray([values], dtype=object))

    return _coerce_ndarray(np.asarray(list(values), dtype=object).ravel())


def datum_field(datum: Any, key: str, default: Any = None) -> Any:
    """Read `key` from a mapping datum or an attribute of an object datum."""

    if isinstance(datum, Mapping):
        return datum.get(key, default)
    return getattr(datum, key, default)


def datum_number(datum: Any, key: str) -> float:
    return _to_float(datum_field(datum, key))


def _is_numeric_dtype(series: Any) -> bool:
    if pd is None:
        return False
    try:
        return bool(pd.api.types.is_numeric_dtype(series))
    except Exception:
        return False


def _coerce_ndarray(arr: np.ndarray) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        out[i] = _to_float(raw)
    return out


def _to_float(raw: Any) -> float:
    if raw is None:
        return float("nan")
    if isinstance(raw, Decimal):
        return float(raw)
    try:
        return float(raw)
    except (TypeError, ValueError):
        return float("nan")
