from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class Padding:
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0


@dataclass(frozen=True)
class InnerRect:
    x: float
    y: float
    width: float
    height: float


PaddingLike = Union[float, int, Padding, Mapping[str, Any], None]


def normalize_padding(padding: PaddingLike = None) -> Padding:
    """Resolve a single number or a partial per-side record into four sides."""

    if padding is None:
        return Padding()
    if isinstance(padding, Padding):
        return padding
    if isinstance(padding, (int, float)):
        value = float(padding)
        return Padding(top=value, right=value, bottom=value, left=value)
    return Padding(
        top=float(padding.get("top") or 0.0),
        right=float(padding.get("right") or 0.0),
        bottom=float(padding.get("bottom") or 0.0),
        left=float(padding.get("left") or 0.0),
    )


def compute_inner_rect(width: float, height: float, padding: PaddingLike = None) -> InnerRect:
    resolved = normalize_padding(padding)
    return InnerRect(
        x=resolved.left,
        y=resolved.top,
        width=max(0.0, float(width) - resolved.left - resolved.right),
        height=max(0.0, float(height) - resolved.top - resolved.bottom),
    )
