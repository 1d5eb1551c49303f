"""Business logic for converting animal years to human years."""

import logging
import math

from animal_age.config import HUMAN_MAX_LIFESPAN
from animal_age.errors import InvalidAge
from animal_age.models.animal import AgingFormula, AnimalProfile, FormulaKind
from animal_age.models.conversion import ConversionResult

logger = logging.getLogger(__name__)


def _tiered(age: float, anchors: tuple[tuple[float, float], ...]) -> float:
    """Interpolate between anchors; past the last one keep the final slope."""
    for (x0, y0), (x1, y1) in zip(anchors, anchors[1:]):
        if age <= x1:
            return y0 + (age - x0) * (y1 - y0) / (x1 - x0)
    (x0, y0), (x1, y1) = anchors[-2], anchors[-1]
    return y1 + (age - x1) * (y1 - y0) / (x1 - x0)


def _logarithmic(age: float, rate: float, max_lifespan: float) -> float:
    return HUMAN_MAX_LIFESPAN * math.log1p(rate * age) / math.log1p(rate * max_lifespan)


def human_years(age: float, formula: AgingFormula, max_lifespan: float) -> float:
    """Apply a species curve to a real age in years."""
    if formula.kind is FormulaKind.TIERED:
        return _tiered(age, formula.anchors)
    if formula.kind is FormulaKind.LOGARITHMIC:
        return _logarithmic(age, formula.rate, max_lifespan)
    raise ValueError(f"Unsupported formula kind: {formula.kind}")


def validate_age(age: float) -> float:
    """Return ``age`` as a float or raise InvalidAge."""
    try:
        value = float(age)
    except (TypeError, ValueError):
        raise InvalidAge(age) from None
    if not math.isfinite(value) or value < 0:
        raise InvalidAge(age)
    return value


def convert(age: float, profile: AnimalProfile) -> ConversionResult:
    """Convert a real age into a human-equivalent age for ``profile``.

    Progress ratios are left unclamped so callers can detect pets older
    than their species' typical lifespan.
    """
    age = validate_age(age)
    human_age = human_years(age, profile.formula, profile.max_lifespan_years)
    if not math.isfinite(human_age):
        raise InvalidAge(age)
    logger.debug("Converted %s age %s -> %.3f human years", profile.key, age, human_age)
    return ConversionResult(
        animal=profile.key,
        age=age,
        human_age=human_age,
        animal_max_lifespan=profile.max_lifespan_years,
        human_max_lifespan=HUMAN_MAX_LIFESPAN,
        animal_progress=age / profile.max_lifespan_years,
        human_progress=human_age / HUMAN_MAX_LIFESPAN,
        display_name=profile.display_name,
    )
