"""
Type-safe result models for registry queries
Uses dataclasses and enums for better type safety and IDE support
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Placement(str, Enum):
    """Where add_service put a new service"""

    APPENDED = "appended"
    SORTED = "sorted"


@dataclass(frozen=True)
class CostDurationSummary:
    """Average duration of all services sharing one cost"""

    cost: float
    average_duration: float
    count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"cost": self.cost, "averageDuration": self.average_duration}


@dataclass(frozen=True)
class InsertionResult:
    """Outcome of an insertion into the service collection"""

    placement: Placement
    index: int

    def to_dict(self) -> Dict[str, Any]:
        return {"placement": self.placement.value, "index": self.index}


@dataclass(frozen=True)
class UpdatedCost:
    """Projected cost of a service for the next period"""

    name: Optional[str]
    doctor: Optional[str]
    updated_cost: Optional[float]

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "doctor": self.doctor, "updatedCost": self.updated_cost}


@dataclass(frozen=True)
class YoungestUserInfo:
    first_name: str
    last_name: str
    age: int
    education: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "age": self.age,
            "education": self.education,
        }


@dataclass(frozen=True)
class BucketSummary:
    """Count and average age of users in one time-of-day bucket"""

    count: int
    average_age: float

    def to_dict(self) -> Dict[str, Any]:
        return {"count": self.count, "averageAge": self.average_age}


@dataclass(frozen=True)
class WorkingHoursClassification:
    working: BucketSummary
    off: BucketSummary

    def to_dict(self) -> Dict[str, Any]:
        return {"working": self.working.to_dict(), "off": self.off.to_dict()}


@dataclass(frozen=True)
class AlphabeticalEntry:
    """User name and request goal, as listed in alphabetical order"""

    full_name: str
    goal: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"fullName": self.full_name, "goal": self.goal}
