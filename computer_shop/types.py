"""
Typed data models for the computer shop.

Computer is the product assembled by builders; Component is a catalog
entry held by the warehouse. JSON-serializable via dataclasses.asdict().
"""
from __future__ import annotations
from dataclasses import dataclass, fields
from enum import Enum


class BuilderVariant(str, Enum):
    GAMING = "gaming"
    OFFICE = "office"


# ── Product ───────────────────────────────────────────────────

@dataclass
class Computer:
    cpu: str = ""
    gpu: str = ""
    ram: str = ""
    storage: str = ""
    cooling: str = ""

    def missing_fields(self) -> list[str]:
        """Names of the fields no build step has set yet."""
        return [f.name for f in fields(self) if not getattr(self, f.name)]

    def __str__(self) -> str:
        return (
            f"Computer Spec: [CPU={self.cpu}, GPU={self.gpu}, "
            f"RAM={self.ram}, HDD/SSD={self.storage}, Cooling={self.cooling}]"
        )


# ── Catalog ───────────────────────────────────────────────────

@dataclass(frozen=True)
class Component:
    name: str
    price: float

    def __str__(self) -> str:
        # Whole amounts drop the trailing ".0"; others keep every digit.
        price = float(self.price)
        shown = int(price) if price.is_integer() else price
        return f"{self.name} (${shown})"
