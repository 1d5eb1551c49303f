"""Static animal registry loaded from the bundled JSON data file."""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterable

from animal_age.errors import UnknownAnimal
from animal_age.models.animal import AnimalProfile

logger = logging.getLogger(__name__)

DATA_FILE = Path(__file__).resolve().parent.parent / "data" / "animals.json"


class AnimalRegistry:
    """Read-only, ordered mapping of animal key -> profile."""

    def __init__(self, profiles: Iterable[AnimalProfile]) -> None:
        self._profiles: dict[str, AnimalProfile] = {}
        for profile in profiles:
            if profile.key in self._profiles:
                raise ValueError(f"Duplicate animal key in registry: {profile.key}")
            self._profiles[profile.key] = profile
        if not self._profiles:
            raise ValueError("Animal registry must contain at least one profile")

    def lookup(self, key: str) -> AnimalProfile:
        """Return the profile for ``key`` or raise UnknownAnimal."""
        try:
            return self._profiles[key]
        except KeyError:
            raise UnknownAnimal(key) from None

    def all_keys(self) -> list[str]:
        """Return registry keys in declaration order."""
        return list(self._profiles)

    def profiles(self) -> list[AnimalProfile]:
        """Return profiles in declaration order."""
        return list(self._profiles.values())

    def __contains__(self, key: object) -> bool:
        return key in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)


@lru_cache(maxsize=1)
def load_profiles() -> tuple[AnimalProfile, ...]:
    """Load all animal profiles from the JSON data file.

    Returns a tuple (hashable for lru_cache) of AnimalProfile objects.
    """
    try:
        with open(DATA_FILE, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        logger.error("Animal data file not found: %s", DATA_FILE)
        raise
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in animal data file: %s", e)
        raise
    profiles = tuple(AnimalProfile(**item) for item in raw)
    logger.info("Loaded %d animal profiles from %s", len(profiles), DATA_FILE)
    return profiles


@lru_cache(maxsize=1)
def get_registry() -> AnimalRegistry:
    """Return the process-wide registry, built once on first use."""
    return AnimalRegistry(load_profiles())


def clear_cache() -> None:
    """Clear the registry cache."""
    get_registry.cache_clear()
    load_profiles.cache_clear()
