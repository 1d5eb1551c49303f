"""Batch processing: resolve, convert and render a list of requested animals."""

import logging
from typing import Optional, Sequence

from animal_age.config import settings
from animal_age.db.registry import AnimalRegistry, get_registry
from animal_age.errors import EmptyAnimalList, UnknownAnimal
from animal_age.models.conversion import PetOutcome, RenderMode, Suggestion
from animal_age.services.converter_service import convert, validate_age
from animal_age.services.fuzzy_service import suggest
from animal_age.services.render_service import label_width_for, render

logger = logging.getLogger(__name__)


def normalize_key(raw_key: str) -> str:
    """Trim and lowercase a user-supplied key to registry convention."""
    return raw_key.strip().lower()


def format_unknown(raw_key: str, suggestions: Sequence[Suggestion]) -> str:
    """Build the user-facing message for an unknown animal key."""
    return str(UnknownAnimal(raw_key, tuple(suggestions)))


def process(
    keys: Sequence[str],
    age: float,
    mode: RenderMode = RenderMode.BAR,
    color_enabled: bool = True,
    registry: Optional[AnimalRegistry] = None,
    width: Optional[int] = None,
    columns: Optional[int] = None,
) -> list[PetOutcome]:
    """Convert every requested animal at the shared ``age``.

    Raises EmptyAnimalList or InvalidAge before any output is rendered.
    Unknown keys do not stop the batch; they become failed outcomes
    carrying suggestions. Output order follows input order.
    """
    normalized = [normalize_key(k) for k in keys]
    if not any(normalized):
        raise EmptyAnimalList()
    age = validate_age(age)
    registry = registry or get_registry()

    known = [key for key in normalized if key in registry]
    multi = len(known) > 1
    label_width = label_width_for(known, multi)

    outcomes: list[PetOutcome] = []
    for raw_key, key in zip(keys, normalized):
        if not key:
            continue
        try:
            profile = registry.lookup(key)
        except UnknownAnimal:
            suggestions = suggest(
                key,
                registry.all_keys(),
                limit=settings.SUGGESTION_LIMIT,
                max_distance=settings.SUGGESTION_MAX_DISTANCE,
            )
            error = UnknownAnimal(raw_key.strip(), tuple(suggestions))
            logger.info("Unknown animal %r (suggestions: %s)", raw_key, [s.candidate_key for s in suggestions])
            outcomes.append(
                PetOutcome(
                    raw_key=raw_key,
                    key=key,
                    suggestions=list(error.suggestions),
                    error=str(error),
                )
            )
            continue

        result = convert(age, profile)
        outcomes.append(
            PetOutcome(
                raw_key=raw_key,
                key=key,
                result=result,
                output=render(
                    result,
                    mode=mode,
                    color_enabled=color_enabled,
                    width=width,
                    columns=columns,
                    label_width=label_width,
                    multi=multi,
                ),
            )
        )
    return outcomes
