from __future__ import annotations

from tigercat_chart.style.theme import DEFAULT_THEME, ChartTheme


def resolve_opacity(
    index: int,
    active_index: int | None,
    *,
    active_opacity: float | None = None,
    inactive_opacity: float | None = None,
    default_opacity: float | None = None,
    theme: ChartTheme = DEFAULT_THEME,
) -> float | None:
    """Opacity for element `index` given the hovered/selected `active_index`.

    `None` means "no override": the element keeps its own opacity. Opacities
    left as `None` come from the theme.
    """

    if active_index is None:
        return default_opacity
    if index == active_index:
        return theme.active_opacity if active_opacity is None else active_opacity
    return theme.inactive_opacity if inactive_opacity is None else inactive_opacity


def resolve_active_index(
    hovered_index: int | None,
    selected_index: int | None,
    controlled_hovered: int | None = None,
    controlled_selected: int | None = None,
) -> int | None:
    # Selection wins over hover, controlled wins over internal state.
    if controlled_selected is not None:
        return controlled_selected
    if selected_index is not None:
        return selected_index
    if controlled_hovered is not None:
        return controlled_hovered
    return hovered_index
