"""
Interval model - serializable form of an Interval.

Stores the spelling field by field so it survives JSON/YAML round trips
without relying on notation parsing at the edges.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from resonata.core.interval import Interval
from resonata.core.quality import Quality, Size


class IntervalModel(BaseModel):
    """A spelled interval: quality symbol, simple size number, octaves."""

    quality: str = Field(..., description="Quality symbol: M, m, P, or a run of A / d")
    size: int = Field(..., ge=1, le=7, description="Simple size number (1 = unison)")
    octaves: int = Field(0, ge=0, description="Octaves above the simple interval")

    model_config = {"frozen": True}

    @field_validator("quality")
    @classmethod
    def validate_quality(cls, v: str) -> str:
        """Normalize to the canonical symbol ('aa' -> 'AA')."""
        return Quality.parse(v).symbol

    @model_validator(mode="after")
    def validate_interval(self) -> IntervalModel:
        """Quality and size must combine into an in-range interval."""
        self.to_interval()
        return self

    def to_interval(self) -> Interval:
        return Interval(Quality.parse(self.quality), Size(self.size - 1), self.octaves)

    @classmethod
    def from_interval(cls, interval: Interval) -> IntervalModel:
        return cls(
            quality=interval.quality.symbol,
            size=interval.size.number,
            octaves=interval.octaves,
        )

    @classmethod
    def from_notation(cls, notation: str) -> IntervalModel:
        return cls.from_interval(Interval.parse(notation))

    @property
    def notation(self) -> str:
        return str(self.to_interval())

    @property
    def semitones(self) -> int:
        return self.to_interval().semitones
