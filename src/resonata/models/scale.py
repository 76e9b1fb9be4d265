"""
Scale models - named step patterns and their modes.

Definitions are what the catalog loads from YAML. Steps are kept as
interval notation so bundles stay human-editable.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from resonata.core.interval import Interval
from resonata.core.scale import Scale


def normalize_name(name: str) -> str:
    """'Harmonic Minor' and 'harmonic-minor' both become 'harmonic_minor'."""
    return name.strip().lower().replace(" ", "_").replace("-", "_")


class ScaleDefinition(BaseModel):
    """
    A scale family: its step pattern and the names of its rotations.

    modes[i] names the scale obtained by rotating the steps left by i,
    so modes[0] names the family itself when present.
    """

    name: str = Field(..., description="Scale family name")
    description: str = Field("", description="Human-readable description")
    steps: list[str] = Field(..., min_length=1, description="Step intervals in notation")
    modes: list[str] = Field(default_factory=list, description="Mode names by rotation")

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        name = normalize_name(v)
        if not name.replace("_", "").isalnum():
            raise ValueError(f"Invalid scale name: {v}")
        return name

    @field_validator("steps")
    @classmethod
    def validate_steps(cls, v: list[str]) -> list[str]:
        """Each step must be valid notation; stored in canonical form."""
        return [str(Interval.parse(step)) for step in v]

    @field_validator("modes")
    @classmethod
    def validate_modes(cls, v: list[str]) -> list[str]:
        return [normalize_name(mode) for mode in v]

    @model_validator(mode="after")
    def validate_mode_count(self) -> ScaleDefinition:
        if len(self.modes) > len(self.steps):
            raise ValueError(
                f"{self.name} has {len(self.steps)} steps but {len(self.modes)} modes"
            )
        return self

    def to_scale(self) -> Scale:
        return Scale(tuple(Interval.parse(step) for step in self.steps), self.name)

    def mode_name(self, index: int) -> str | None:
        """Name of rotation `index`, or None if it is unnamed."""
        if index < len(self.modes):
            return self.modes[index]
        if index == 0:
            return self.name
        return None

    def mode(self, index: int) -> Scale:
        """The scale obtained by rotating the family left by `index`."""
        rotated = self.to_scale().rotated(index)
        return Scale(rotated.intervals, self.mode_name(index % len(self.steps)) or "")


class ScaleMetadata(BaseModel):
    """Lightweight metadata for listing scales."""

    name: str
    description: str
    step_count: int
    modes: list[str]

    model_config = {"frozen": True}

    @classmethod
    def from_definition(cls, definition: ScaleDefinition) -> ScaleMetadata:
        """Create metadata from a definition."""
        return cls(
            name=definition.name,
            description=definition.description,
            step_count=len(definition.steps),
            modes=list(definition.modes),
        )
