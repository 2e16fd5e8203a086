"""Static product catalog: garments, sizes, sleeve styles and accessories.

The catalog is built once at process start and handed to the builder and
pricing engine. Nothing here mutates after construction.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Self

from orders.domain.errors import UnknownSizeError


class GarmentType(Enum):
    POLO = "Polo"
    TEE = "Tee"


class SleeveStyle(Enum):
    LONG = "Long"
    RUFFLED = "Ruffled"


class Accessory(Enum):
    CAP = "Cap"
    MUG = "Mug"


@dataclass(frozen=True)
class SizeOption:
    """A size offered for a garment and what it adds to the base price."""

    id: str
    surcharge: int = 0

    def __post_init__(self) -> None:
        if self.surcharge < 0:
            raise ValueError("Size surcharge cannot be negative")


@dataclass(frozen=True)
class GarmentSpec:
    """Base price and ordered sizes (smallest first) of one garment type."""

    base_price: int
    sizes: tuple[SizeOption, ...]

    def __post_init__(self) -> None:
        if self.base_price < 0:
            raise ValueError("Base price cannot be negative")
        surcharges = [size.surcharge for size in self.sizes]
        if surcharges != sorted(surcharges):
            raise ValueError("Size surcharges must not decrease with size")
        ids = [size.id for size in self.sizes]
        if len(set(ids)) != len(ids):
            raise ValueError("Size ids must be unique per garment")


@dataclass(frozen=True)
class Catalog:
    """Read-only lookup of every price the order form needs."""

    garments: Mapping[GarmentType, GarmentSpec]
    sleeve_surcharges: Mapping[SleeveStyle, int]
    accessory_prices: Mapping[Accessory, int]
    _surcharges: Mapping[GarmentType, Mapping[str, int]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        for name, members in (
            ("garments", GarmentType),
            ("sleeve_surcharges", SleeveStyle),
            ("accessory_prices", Accessory),
        ):
            missing = [m.value for m in members if m not in getattr(self, name)]
            if missing:
                raise ValueError(f"Catalog {name} missing entries for {', '.join(missing)}")
        if any(amount < 0 for amount in (*self.sleeve_surcharges.values(), *self.accessory_prices.values())):
            raise ValueError("Catalog prices cannot be negative")

        object.__setattr__(self, "garments", MappingProxyType(dict(self.garments)))
        object.__setattr__(self, "sleeve_surcharges", MappingProxyType(dict(self.sleeve_surcharges)))
        object.__setattr__(self, "accessory_prices", MappingProxyType(dict(self.accessory_prices)))
        object.__setattr__(
            self,
            "_surcharges",
            MappingProxyType(
                {
                    garment: MappingProxyType({s.id: s.surcharge for s in spec.sizes})
                    for garment, spec in self.garments.items()
                }
            ),
        )

    def sizes_for(self, garment: GarmentType) -> tuple[SizeOption, ...]:
        return self.garments[garment].sizes

    def size_ids(self, garment: GarmentType) -> tuple[str, ...]:
        return tuple(size.id for size in self.sizes_for(garment))

    def has_size(self, garment: GarmentType, size_id: str) -> bool:
        return size_id in self._surcharges[garment]

    def base_price(self, garment: GarmentType) -> int:
        return self.garments[garment].base_price

    def price_for(self, garment: GarmentType, size_id: str) -> int:
        """Unit price of ``garment`` in ``size_id``.

        Raises:
            UnknownSizeError: If the size is not offered for the garment.
        """
        try:
            surcharge = self._surcharges[garment][size_id]
        except KeyError:
            raise UnknownSizeError(garment, size_id) from None
        return self.garments[garment].base_price + surcharge

    def sleeve_surcharge(self, style: SleeveStyle) -> int:
        return self.sleeve_surcharges[style]

    def accessory_price(self, accessory: Accessory) -> int:
        return self.accessory_prices[accessory]

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> Self:
        """Build a catalog from plain settings data.

        Expected shape::

            {
                "garments": {"Polo": {"base_price": 85000, "sizes": [["S", 0], ...]}, ...},
                "sleeves": {"Long": 5000, "Ruffled": 7000},
                "accessories": {"Cap": 35000, "Mug": 25000},
            }
        """
        garments = {
            GarmentType(name): GarmentSpec(
                base_price=int(spec["base_price"]),
                sizes=tuple(SizeOption(id=str(size_id), surcharge=int(extra)) for size_id, extra in spec["sizes"]),
            )
            for name, spec in config["garments"].items()
        }
        return cls(
            garments=garments,
            sleeve_surcharges={SleeveStyle(name): int(v) for name, v in config["sleeves"].items()},
            accessory_prices={Accessory(name): int(v) for name, v in config["accessories"].items()},
        )


STANDARD_SIZES = (
    SizeOption("S"),
    SizeOption("M"),
    SizeOption("L"),
    SizeOption("XL"),
    SizeOption("XXL", 5000),
    SizeOption("XXXL", 10000),
    SizeOption("XXXXL", 15000),
    SizeOption("XXXXXL", 20000),
)


def default_catalog() -> Catalog:
    return Catalog(
        garments={
            GarmentType.POLO: GarmentSpec(base_price=85000, sizes=STANDARD_SIZES),
            GarmentType.TEE: GarmentSpec(base_price=75000, sizes=STANDARD_SIZES),
        },
        sleeve_surcharges={SleeveStyle.LONG: 5000, SleeveStyle.RUFFLED: 7000},
        accessory_prices={Accessory.CAP: 35000, Accessory.MUG: 25000},
    )
