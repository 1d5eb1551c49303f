"""Pydantic models for animal profiles and their aging formulas."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from animal_age.config import HUMAN_MAX_LIFESPAN


class FormulaKind(str, Enum):
    """Shape of a species aging curve."""

    TIERED = "tiered"
    LOGARITHMIC = "logarithmic"


class AgingFormula(BaseModel):
    """Tuning parameters for one species curve.

    ``tiered`` curves interpolate linearly between ``anchors`` of
    ``(real_years, human_years)`` and keep the last slope past the final
    anchor. ``logarithmic`` curves use ``rate`` as the growth parameter of
    ``log1p(rate * age)``.
    """

    model_config = ConfigDict(frozen=True)

    kind: FormulaKind = Field(..., description="Formula variant")
    anchors: tuple[tuple[float, float], ...] = Field(
        default=(), description="(real_years, human_years) points for tiered curves"
    )
    rate: Optional[float] = Field(None, gt=0, description="Growth rate for logarithmic curves")

    @model_validator(mode="after")
    def _check_parameters(self) -> "AgingFormula":
        if self.kind is FormulaKind.TIERED:
            if len(self.anchors) < 2:
                raise ValueError("tiered formula needs at least two anchors")
            if self.anchors[0] != (0.0, 0.0):
                raise ValueError("tiered formula must start at (0, 0)")
            for (x0, y0), (x1, y1) in zip(self.anchors, self.anchors[1:]):
                if x1 <= x0 or y1 <= y0:
                    raise ValueError("tiered anchors must be strictly increasing")
        elif self.rate is None:
            raise ValueError("logarithmic formula needs a rate")
        return self


class AnimalProfile(BaseModel):
    """Schema representing one registry entry."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Lowercase animal key, e.g. 'small_dog'")
    display_name: str = Field(..., description="Short human readable name")
    description: str = Field(..., description="Description shown by --list")
    max_lifespan_years: float = Field(..., gt=0, description="Typical maximum lifespan in years")
    formula: AgingFormula = Field(..., description="Aging curve for this species")

    @model_validator(mode="after")
    def _check_anchor(self) -> "AnimalProfile":
        if self.key != self.key.lower():
            raise ValueError(f"animal key '{self.key}' must be lowercase")
        if self.formula.kind is FormulaKind.TIERED:
            last = self.formula.anchors[-1]
            if last != (self.max_lifespan_years, HUMAN_MAX_LIFESPAN):
                raise ValueError(
                    f"tiered formula for '{self.key}' must end at "
                    f"({self.max_lifespan_years}, {HUMAN_MAX_LIFESPAN})"
                )
        return self
