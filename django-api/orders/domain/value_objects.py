"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class OrderId:
    """Unique identifier for a submitted order."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class SleeveCounts:
    """Long and ruffled sleeve counts for one garment type.

    Short sleeves are never stored; they are whatever remains of the
    garment total once long and ruffled are taken out.
    """

    long: int = 0
    ruffled: int = 0

    def __post_init__(self) -> None:
        if self.long < 0 or self.ruffled < 0:
            raise ValueError("Sleeve counts cannot be negative")

    @property
    def assigned(self) -> int:
        return self.long + self.ruffled

    def short_for(self, total_units: int) -> int:
        return max(0, total_units - self.assigned)

    def clamped_to(self, total_units: int) -> Self:
        """Shrink to fit ``total_units``, long first, then ruffled."""
        long = min(self.long, total_units)
        ruffled = min(self.ruffled, total_units - long)
        return type(self)(long=long, ruffled=ruffled)


def clamp_quantity(value: int) -> int:
    """Quantities are non-negative integers; anything below zero becomes zero."""
    return max(0, int(value))
