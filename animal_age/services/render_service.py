"""Presentation of conversion results as lifespan bars or structured records."""

from typing import Any, Iterable, Optional, Union

import click

from animal_age.config import settings
from animal_age.models.conversion import ConversionResult, RenderMode

MIN_LABEL_WIDTH = 10
MIN_BAR_WIDTH = 10
HUMAN_LABEL = "Human"
# " |" before the bar and "| " after it
BAR_FRAME = 4


def format_years(value: float) -> str:
    """Format a year count without a trailing '.0' (3.0 -> '3', 2.5 -> '2.5')."""
    return f"{value:g}"


def bar_color(progress: float) -> str:
    """Pick the bar color for a progress ratio."""
    if progress >= 0.8:
        return "red"
    if progress >= 0.6:
        return "yellow"
    return "cyan"


def human_label(key: str, multi: bool = False) -> str:
    """Label of the human bar; names the pet when several are shown."""
    return f"human({key})" if multi else HUMAN_LABEL


def label_width_for(keys: Iterable[str], multi: bool = False) -> int:
    """Width that fits every bar label of the given keys."""
    widths = [MIN_LABEL_WIDTH, len(HUMAN_LABEL)]
    for key in keys:
        widths.extend((len(key), len(human_label(key, multi))))
    return max(widths)


def percent_text(progress: float) -> str:
    return f"{progress * 100:>3.0f}%"


def fit_width(columns: int, label_width: int, percent_width: int = 4) -> int:
    """Bar width that keeps a whole line within ``columns``."""
    gutter = label_width + BAR_FRAME + percent_width
    return max(MIN_BAR_WIDTH, min(settings.BAR_WIDTH, columns - gutter))


def lifespan_bar(label: str, progress: float, width: int, label_width: int, color_enabled: bool) -> str:
    """Render one ``label |=====     | NN%`` line.

    The fill is clamped to the bar width; the percentage is not.
    """
    filled = int(min(max(progress, 0.0), 1.0) * width)
    bar = "=" * filled + " " * (width - filled)
    if color_enabled:
        bar = click.style(bar, fg=bar_color(progress))
    return f"{label:<{label_width}} |{bar}| {percent_text(progress)}"


def overage_warning(result: ConversionResult) -> Optional[str]:
    """Return the warning line for pets far beyond their typical lifespan."""
    if result.animal_progress <= settings.OVERAGE_RATIO:
        return None
    return (
        f"Warning: age {format_years(result.age)} exceeds typical {result.display_name or result.animal} "
        f"lifespan of {format_years(result.animal_max_lifespan)} years."
    )


def render_bar(
    result: ConversionResult,
    color_enabled: bool = True,
    width: Optional[int] = None,
    columns: Optional[int] = None,
    label_width: Optional[int] = None,
    multi: bool = False,
) -> str:
    """Render a human-readable block: summary line, human bar, animal bar.

    ``width`` fixes the bar width; otherwise it is fitted to ``columns``
    when given, or taken from settings. ``multi`` switches the human bar
    label to ``human(<key>)`` for output listing several pets.
    """
    label_width = label_width or label_width_for([result.animal], multi)
    progresses = (result.human_progress, result.animal_progress)
    if width is None:
        if columns is None:
            width = settings.BAR_WIDTH
        else:
            width = fit_width(columns, label_width, max(len(percent_text(p)) for p in progresses))
    name = result.display_name or result.animal
    lines = [
        f"{format_years(result.age)} years old {name} ≈ {result.human_age:.1f} human years",
        lifespan_bar(human_label(result.animal, multi), result.human_progress, width, label_width, color_enabled),
        lifespan_bar(result.animal, result.animal_progress, width, label_width, color_enabled),
    ]
    warning = overage_warning(result)
    if warning is not None:
        lines.append(click.style(warning, fg="yellow") if color_enabled else warning)
    return "\n".join(lines)


def render_structured(result: ConversionResult) -> dict[str, Any]:
    """Return the seven-field machine-readable record."""
    return result.model_dump()


def render(
    result: ConversionResult,
    mode: RenderMode = RenderMode.BAR,
    color_enabled: bool = True,
    width: Optional[int] = None,
    columns: Optional[int] = None,
    label_width: Optional[int] = None,
    multi: bool = False,
) -> Union[str, dict[str, Any]]:
    """Render ``result`` in the requested mode."""
    if RenderMode(mode) is RenderMode.STRUCTURED:
        return render_structured(result)
    return render_bar(
        result,
        color_enabled=color_enabled,
        width=width,
        columns=columns,
        label_width=label_width,
        multi=multi,
    )
