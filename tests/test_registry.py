"""Tests for the static animal registry."""

import json

import pytest
from pydantic import ValidationError

from animal_age.db import registry as registry_module
from animal_age.db.registry import AnimalRegistry, clear_cache, get_registry, load_profiles
from animal_age.errors import UnknownAnimal
from animal_age.models.animal import AgingFormula, AnimalProfile, FormulaKind

EXPECTED_KEYS = [
    "small_dog",
    "medium_dog",
    "big_dog",
    "cat",
    "horse",
    "pig",
    "parakeet",
    "snake",
    "goldfish",
    "rabbit",
    "hamster",
]


def _profile(key: str, max_lifespan: float = 10.0) -> AnimalProfile:
    return AnimalProfile(
        key=key,
        display_name=key.title(),
        description=key,
        max_lifespan_years=max_lifespan,
        formula=AgingFormula(kind=FormulaKind.LOGARITHMIC, rate=0.5),
    )


class TestBundledRegistry:
    """Registry loaded from animals.json."""

    def test_declaration_order(self):
        assert get_registry().all_keys() == EXPECTED_KEYS

    def test_at_least_eleven_entries(self):
        assert len(get_registry()) >= 11

    def test_keys_are_unique(self):
        keys = [p.key for p in load_profiles()]
        assert len(keys) == len(set(keys))

    def test_lifespans_are_positive(self):
        assert all(p.max_lifespan_years > 0 for p in get_registry().profiles())

    def test_known_lifespans(self):
        registry = get_registry()
        assert registry.lookup("cat").max_lifespan_years == 18.0
        assert registry.lookup("small_dog").max_lifespan_years == 16.0
        assert registry.lookup("hamster").max_lifespan_years == 3.0

    def test_lookup_returns_profile(self):
        profile = get_registry().lookup("cat")
        assert profile.key == "cat"
        assert profile.description == "Domestic cat"

    def test_lookup_is_case_sensitive(self):
        with pytest.raises(UnknownAnimal):
            get_registry().lookup("CAT")

    def test_lookup_unknown(self):
        with pytest.raises(UnknownAnimal) as exc_info:
            get_registry().lookup("unicorn")
        assert exc_info.value.raw_key == "unicorn"
        assert "unicorn" in str(exc_info.value)

    def test_registry_is_cached(self):
        assert get_registry() is get_registry()

    def test_contains(self):
        registry = get_registry()
        assert "rabbit" in registry
        assert "dragon" not in registry


class TestCustomRegistry:
    """Registries built from explicit profiles."""

    def test_rejects_duplicate_keys(self):
        with pytest.raises(ValueError, match="Duplicate"):
            AnimalRegistry([_profile("cat"), _profile("cat")])

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            AnimalRegistry([])

    def test_keeps_order(self):
        registry = AnimalRegistry([_profile("zebra"), _profile("ant")])
        assert registry.all_keys() == ["zebra", "ant"]


class TestProfileValidation:
    """Validation of profile and formula data."""

    def test_non_positive_lifespan(self):
        with pytest.raises(ValidationError):
            _profile("cat", max_lifespan=0)

    def test_uppercase_key(self):
        with pytest.raises(ValidationError):
            _profile("Cat")

    def test_tiered_must_end_at_human_baseline(self):
        with pytest.raises(ValidationError):
            AnimalProfile(
                key="cat",
                display_name="Cat",
                description="Domestic cat",
                max_lifespan_years=18.0,
                formula=AgingFormula(kind=FormulaKind.TIERED, anchors=((0, 0), (2, 25), (18, 89))),
            )

    def test_tiered_anchors_must_increase(self):
        with pytest.raises(ValidationError):
            AgingFormula(kind=FormulaKind.TIERED, anchors=((0, 0), (2, 25), (1, 30)))

    def test_tiered_must_start_at_zero(self):
        with pytest.raises(ValidationError):
            AgingFormula(kind=FormulaKind.TIERED, anchors=((1, 5), (2, 25)))

    def test_logarithmic_needs_rate(self):
        with pytest.raises(ValidationError):
            AgingFormula(kind=FormulaKind.LOGARITHMIC)

    def test_profile_is_frozen(self):
        profile = get_registry().lookup("cat")
        with pytest.raises(ValidationError):
            profile.max_lifespan_years = 1.0


@pytest.fixture
def data_file(tmp_path, monkeypatch):
    """Point the loader at a temporary data file and rebuild the caches around the test."""
    path = tmp_path / "animals.json"
    monkeypatch.setattr(registry_module, "DATA_FILE", path)
    clear_cache()
    yield path
    clear_cache()


class TestLoading:
    """Loading the registry from its data file."""

    def test_loads_replacement_file(self, data_file):
        data_file.write_text(
            json.dumps(
                [
                    {
                        "key": "tortoise",
                        "display_name": "Tortoise",
                        "description": "Tortoise",
                        "max_lifespan_years": 100,
                        "formula": {"kind": "logarithmic", "rate": 0.1},
                    }
                ]
            )
        )
        assert get_registry().all_keys() == ["tortoise"]

    def test_clear_cache_rebuilds_registry(self, data_file):
        data_file.write_text(json.dumps([_profile("ant").model_dump(mode="json")]))
        first = get_registry()
        data_file.write_text(json.dumps([_profile("bee").model_dump(mode="json")]))
        assert get_registry() is first
        clear_cache()
        assert get_registry().all_keys() == ["bee"]

    def test_missing_file(self, data_file):
        with pytest.raises(FileNotFoundError):
            load_profiles()

    def test_invalid_json(self, data_file):
        data_file.write_text("[{not json")
        with pytest.raises(json.JSONDecodeError):
            load_profiles()

    def test_invalid_profile(self, data_file):
        data_file.write_text(json.dumps([{"key": "cat", "max_lifespan_years": -1}]))
        with pytest.raises(ValidationError):
            load_profiles()
