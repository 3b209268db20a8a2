from __future__ import annotations

from showroom_finance.domain.vehicle import Vehicle
from showroom_finance.ports.vehicle_catalog_repository import VehicleCatalogRepository


DEFAULT_VEHICLES = [
    Vehicle(id="land-cruiser-hybrid-se", name="Land Cruiser Hybrid SE", price=94_900.0),
    Vehicle(id="land-cruiser-hybrid-xle", name="Land Cruiser Hybrid XLE", price=105_900.0),
    Vehicle(id="land-cruiser-hybrid-limited", name="Land Cruiser Hybrid Limited", price=118_900.0),
]


class InMemoryVehicleCatalogRepository(VehicleCatalogRepository):
    """
    In-memory catalog for tests and local use.

    - Stores vehicles keyed by ID
    - Looks vehicles up by exact ID
    """

    def __init__(self, vehicles: list[Vehicle] | None = None) -> None:
        self._vehicles = {
            vehicle.id: vehicle
            for vehicle in (DEFAULT_VEHICLES if vehicles is None else vehicles)
        }

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        return self._vehicles.get(vehicle_id)
