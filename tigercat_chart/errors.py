from __future__ import annotations


class ChartConfigError(ValueError):
    """Raised for invalid engine configuration (theme overrides, curve registry)."""
