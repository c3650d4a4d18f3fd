from __future__ import annotations

from typing import Any

import numpy as np

from tigercat_chart.adapters.normalize import coerce_numeric


Extent = tuple[float, float]

DEFAULT_EXTENT: Extent = (0.0, 1.0)


def compute_extent(
    values: Any,
    *,
    include_zero: bool = False,
    fallback: Extent = DEFAULT_EXTENT,
    padding: float = 0.0,
) -> Extent:
    """Return the `(min, max)` of the finite numbers in `values`.

    Non-finite and non-numeric entries are skipped. An input with no finite
    numbers resolves to `fallback`. A zero-span result is returned unchanged;
    linear scales map it to the range midpoint.
    """

    arr = coerce_numeric(values)
    finite = arr[np.isfinite(arr)]
    if finite.size == 0:
        return (float(fallback[0]), float(fallback[1]))

    vmin = float(np.min(finite))
    vmax = float(np.max(finite))

    if include_zero:
        vmin = min(vmin, 0.0)
        vmax = max(vmax, 0.0)

    if vmin == vmax:
        return (vmin, vmax)

    if padding > 0 and np.isfinite(padding):
        pad = (vmax - vmin) * padding
        vmin -= pad
        vmax += pad

    return (vmin, vmax)

