"""
Service catalog manager for clinical service offerings.
Groups, ranks and reprices services held in memory.
"""

import logging
from collections import defaultdict
from decimal import Decimal
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from clinic_registry.arithmetic import mean, round_half_up
from clinic_registry.config import RegistryConfig, get_config
from clinic_registry.entities import Service
from clinic_registry.exceptions import EmptyCollectionError
from clinic_registry.models import (
    CostDurationSummary,
    InsertionResult,
    Placement,
    UpdatedCost,
)

logger = logging.getLogger(__name__)


class ServiceManager:
    """
    Ordered collection of services.

    Complete services are kept in descending cost order relative to each
    other; incomplete ones are appended at the tail.
    """

    def __init__(
        self,
        services: Optional[Iterable[Service]] = None,
        config: Optional[RegistryConfig] = None,
    ):
        self.config = config or get_config()
        self._services: List[Service] = list(services or [])

    @property
    def services(self) -> Tuple[Service, ...]:
        """Read-only snapshot of the collection"""
        return tuple(self._services)

    def __len__(self) -> int:
        return len(self._services)

    def __iter__(self) -> Iterator[Service]:
        return iter(self.services)

    def sort_by_cost_with_average_duration(self) -> List[CostDurationSummary]:
        """Average duration per distinct cost, ascending by cost"""
        grouped: Dict[float, List[int]] = defaultdict(list)
        for service in self._services:
            if service.cost is None or service.duration_minutes is None:
                logger.debug(f"Skipping service {service.id} without cost or duration")
                continue
            grouped[service.cost].append(service.duration_minutes)

        return [
            CostDurationSummary(
                cost=cost,
                average_duration=mean(durations, self.config.rounding_places),
                count=len(durations),
            )
            for cost, durations in sorted(grouped.items())
        ]

    def find_most_read_service_month1(self) -> Service:
        """
        Service with the most users in the first month.
        The first one encountered wins a tie.

        Raises:
            EmptyCollectionError: If no service has a month 1 user count
        """
        best: Optional[Service] = None
        for service in self._services:
            if service.users_month1 is None:
                continue
            if best is None or service.users_month1 > best.users_month1:
                best = service

        if best is None:
            logger.warning("Most read service requested from an empty collection")
            raise EmptyCollectionError("find_most_read_service_month1")
        return best

    def add_service(self, raw_service: Union[Service, Mapping[str, Any]]) -> InsertionResult:
        """
        Add a service, keeping complete services sorted by descending cost.

        Incomplete services go to the end. A complete service is placed before
        the first element whose cost is not strictly greater than its own.

        Raises:
            CoercionError: If a raw record cannot be turned into a Service
        """
        service = (
            raw_service if isinstance(raw_service, Service) else Service.from_raw(raw_service)
        )

        if not service.has_complete_info():
            self._services.append(service)
            index = len(self._services) - 1
            logger.info(f"Appended incomplete service {service.id} at index {index}")
            return InsertionResult(placement=Placement.APPENDED, index=index)

        index = 0
        while index < len(self._services) and self._costs_more(self._services[index], service):
            index += 1
        self._services.insert(index, service)
        logger.info(f"Inserted service {service.id} (cost {service.cost}) at index {index}")
        return InsertionResult(placement=Placement.SORTED, index=index)

    @staticmethod
    def _costs_more(existing: Service, new: Service) -> bool:
        return existing.cost is not None and existing.cost > new.cost

    def compute_updated_costs(self) -> List[UpdatedCost]:
        """Next-period cost of every service, driven by the change in usage"""
        return [
            UpdatedCost(
                name=service.name,
                doctor=service.doctor,
                updated_cost=self._updated_cost(service),
            )
            for service in self._services
        ]

    def _multiplier(self, service: Service) -> Decimal:
        if service.users_month2 > service.users_month1:
            return self.config.growth_multiplier
        if service.users_month2 == service.users_month1:
            return self.config.steady_multiplier
        return self.config.decline_multiplier

    def _updated_cost(self, service: Service) -> Optional[float]:
        if service.cost is None or service.users_month1 is None or service.users_month2 is None:
            return None
        raw = Decimal(str(service.cost)) * self._multiplier(service)
        return round_half_up(raw, self.config.rounding_places)
