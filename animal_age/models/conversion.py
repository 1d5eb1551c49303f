"""Pydantic models for conversion results and batch outcomes."""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class RenderMode(str, Enum):
    """Output mode selected on the command line."""

    BAR = "bar"
    STRUCTURED = "structured"


class ConversionResult(BaseModel):
    """Human-equivalent age of one pet.

    Only the seven public fields are serialized; ``display_name`` is carried
    for the bar renderer.
    """

    model_config = ConfigDict(frozen=True)

    animal: str = Field(..., description="Animal key")
    age: float = Field(..., ge=0, description="Real age in years")
    human_age: float = Field(..., description="Human-equivalent age in years")
    animal_max_lifespan: float = Field(..., description="Typical maximum lifespan of the species")
    human_max_lifespan: float = Field(..., description="Human baseline lifespan")
    animal_progress: float = Field(..., description="age / animal_max_lifespan, unbounded")
    human_progress: float = Field(..., description="human_age / human_max_lifespan, unbounded")
    display_name: str = Field("", exclude=True, description="Name used in bar output")


class Suggestion(BaseModel):
    """A registry key close to a mistyped one."""

    model_config = ConfigDict(frozen=True)

    candidate_key: str = Field(..., description="Registry key")
    distance: int = Field(..., ge=0, description="Levenshtein distance to the input")


class PetOutcome(BaseModel):
    """Result of processing one requested key, successful or not."""

    raw_key: str = Field(..., description="Key as given by the user")
    key: str = Field(..., description="Trimmed, lowercased key")
    result: Optional[ConversionResult] = Field(None, description="Conversion result on success")
    suggestions: list[Suggestion] = Field(default_factory=list, description="Close matches for unknown keys")
    output: Union[str, dict[str, Any], None] = Field(None, description="Rendered bar text or structured record")
    error: Optional[str] = Field(None, description="User-facing error message")

    @property
    def ok(self) -> bool:
        return self.result is not None
