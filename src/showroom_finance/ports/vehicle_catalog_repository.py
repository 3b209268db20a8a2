from __future__ import annotations

from abc import ABC, abstractmethod

from showroom_finance.domain.vehicle import Vehicle


class VehicleCatalogRepository(ABC):
    """
    Port for vehicle catalog access.

    The finance engine only needs a vehicle's price (to seed defaults) and
    name (display label). The catalog itself lives outside this package.
    """

    @abstractmethod
    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        """
        Get a vehicle by ID.

        Args:
            vehicle_id: Catalog identifier

        Returns:
            Vehicle if found, None otherwise
        """
        ...
