from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vehicle:
    """Catalog entry consumed by the finance engine.

    Only `price` takes part in calculations; `name` is a display label.
    """

    id: str
    name: str
    price: float
