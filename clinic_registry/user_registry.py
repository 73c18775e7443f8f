"""
Registry of user feedback requests
Filtering, ranking and bucketing over a fixed set of accounts
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from clinic_registry.arithmetic import mean
from clinic_registry.collation import collation_key
from clinic_registry.config import RegistryConfig, get_config
from clinic_registry.entities import UserAccount
from clinic_registry.exceptions import EmptyCollectionError
from clinic_registry.models import (
    AlphabeticalEntry,
    BucketSummary,
    WorkingHoursClassification,
    YoungestUserInfo,
)

logger = logging.getLogger(__name__)


class UserRegistry:
    """Read-only queries over user accounts"""

    def __init__(
        self,
        users: Optional[Iterable[UserAccount]] = None,
        config: Optional[RegistryConfig] = None,
    ):
        self.config = config or get_config()
        self._users: Tuple[UserAccount, ...] = tuple(users or ())

    @property
    def users(self) -> Tuple[UserAccount, ...]:
        return self._users

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[UserAccount]:
        return iter(self._users)

    def list_by_month_and_exact_time(self, month: int, time: str) -> List[UserAccount]:
        """Users who wrote in the given month at exactly the given HH:MM"""
        matches = [user for user in self._users if user.month == month and user.occurs_at(time)]
        logger.debug(f"{len(matches)} user(s) matched month {month} at {time}")
        return matches

    def find_youngest_user_info(self) -> YoungestUserInfo:
        """
        Youngest user; the first one encountered wins a tie.

        Raises:
            EmptyCollectionError: If the registry has no users
        """
        if not self._users:
            logger.warning("Youngest user requested from an empty registry")
            raise EmptyCollectionError("find_youngest_user_info")

        youngest = self._users[0]
        for user in self._users:
            if user.age < youngest.age:
                youngest = user

        return YoungestUserInfo(
            first_name=youngest.first_name,
            last_name=youngest.last_name,
            age=youngest.age,
            education=youngest.education,
        )

    def classify_by_working_hours(self) -> WorkingHoursClassification:
        """Split users by whether they wrote during working hours"""
        working_ages: List[int] = []
        off_ages: List[int] = []
        for user in self._users:
            if user.is_within_working_hours(self.config):
                working_ages.append(user.age)
            else:
                off_ages.append(user.age)

        places = self.config.rounding_places
        return WorkingHoursClassification(
            working=BucketSummary(count=len(working_ages), average_age=mean(working_ages, places)),
            off=BucketSummary(count=len(off_ages), average_age=mean(off_ages, places)),
        )

    def sort_users_alphabetically(self) -> List[AlphabeticalEntry]:
        """Name and goal of every user, ordered by "last first" name"""
        ordered = sorted(self._users, key=lambda user: collation_key(user.full_name))
        return [
            AlphabeticalEntry(full_name=user.full_name, goal=user.feedback_goal)
            for user in ordered
        ]
