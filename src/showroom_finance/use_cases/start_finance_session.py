"""Start finance session use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from showroom_finance.domain.errors import NotFoundError, ValidationError
from showroom_finance.domain.finance_inputs import FinanceDefaults
from showroom_finance.domain.vehicle import Vehicle
from showroom_finance.ports.vehicle_catalog_repository import VehicleCatalogRepository
from showroom_finance.use_cases.finance_session import FinanceSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StartFinanceSessionRequest:
    """Request to open a finance calculator for a vehicle."""

    vehicle_id: str


@dataclass(frozen=True, slots=True)
class StartFinanceSessionResponse:
    """Response containing the vehicle and its freshly seeded session."""

    vehicle: Vehicle
    session: FinanceSession


class StartFinanceSession:
    """
    Use case for opening a finance calculator session.

    Responsibilities:
    - Validate vehicle_id (must not be blank)
    - Look the vehicle up in the catalog
    - Raise NotFoundError if the vehicle doesn't exist
    - Seed the session from the vehicle price and configured defaults
    """

    def __init__(
        self,
        vehicle_catalog_repository: VehicleCatalogRepository,
        defaults: FinanceDefaults | None = None,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            vehicle_catalog_repository: Repository for vehicle lookups
            defaults: Starting values for new sessions (built-in defaults if None)
        """
        self._repository = vehicle_catalog_repository
        self._defaults = defaults or FinanceDefaults()

    def execute(self, request: StartFinanceSessionRequest) -> StartFinanceSessionResponse:
        """
        Execute the start finance session use case.

        Args:
            request: Request containing vehicle_id

        Returns:
            StartFinanceSessionResponse with the vehicle and session

        Raises:
            ValidationError: If vehicle_id is blank
            NotFoundError: If no vehicle has the given ID
        """
        if not request.vehicle_id or not request.vehicle_id.strip():
            raise ValidationError(
                errors=[
                    {
                        "field": "vehicle_id",
                        "message": "Must not be blank",
                        "code": "REQUIRED",
                    }
                ]
            )

        vehicle = self._repository.get_by_id(request.vehicle_id)

        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        session = FinanceSession.for_vehicle(vehicle, self._defaults)

        logger.info(
            "Finance session started",
            extra={
                "vehicle_id": vehicle.id,
                "vehicle_price": vehicle.price,
                "monthly_payment": session.results.monthly_payment,
            },
        )

        return StartFinanceSessionResponse(vehicle=vehicle, session=session)
