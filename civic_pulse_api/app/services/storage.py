"""
Storage layer for civic records.

``Storage`` describes every operation the API handlers need, grouped
by entity kind.  ``MemStorage`` implements it with one
:class:`Collection` per kind: an insertion-ordered dictionary keyed by
a generated identifier and guarded by a lock.

Lookups never raise for unknown keys; they return ``None`` and leave it
to the caller to decide what a miss means.  Records are validated
against their model when built or merged, but the store does not check
that reference fields
(``official_id``, ``activity_id``, ``issue_id``,
``matched_activity_id``) point at existing records.
"""

from __future__ import annotations

import logging
import threading
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from civic_pulse_api.app.schemas.action_plan import ActionPlan, ActionPlanCreate
from civic_pulse_api.app.schemas.activity import GovernmentActivity, GovernmentActivityCreate
from civic_pulse_api.app.schemas.issue import CitizenIssue, CitizenIssueCreate, CitizenIssueUpdate
from civic_pulse_api.app.schemas.official import Official, OfficialCreate
from civic_pulse_api.app.schemas.statistic import Statistic, StatisticCreate
from civic_pulse_api.app.schemas.user import User, UserCreate
from civic_pulse_api.app.schemas.vote_record import VoteRecord, VoteRecordCreate

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return str(uuid.uuid4())


class Collection(Generic[T]):
    """In-memory records of a single kind, keyed by identifier.

    Every read returns a snapshot, so records created after a call to
    :meth:`list` or :meth:`filter` do not show up in the returned list.
    """

    def __init__(self, model: Type[T]) -> None:
        self._model = model
        self._records: Dict[str, T] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def create(self, data: BaseModel, **defaults: Any) -> T:
        """Store a new record built from ``data`` plus server defaults.

        ``defaults`` take precedence over the payload so that server
        assigned fields cannot be supplied by a client.
        """
        fields = data.model_dump()
        fields.update(defaults)
        with self._lock:
            record_id = new_id()
            while record_id in self._records:
                record_id = new_id()
            fields["id"] = record_id
            record = self._model(**fields)
            self._records[record_id] = record
        return record

    def get(self, record_id: str) -> Optional[T]:
        with self._lock:
            return self._records.get(record_id)

    def list(self) -> List[T]:
        with self._lock:
            return list(self._records.values())

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first record matching ``predicate`` or ``None``."""
        with self._lock:
            return next((r for r in self._records.values() if predicate(r)), None)

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        with self._lock:
            return [r for r in self._records.values() if predicate(r)]

    def update(self, record_id: str, changes: Dict[str, Any]) -> Optional[T]:
        """Shallow-merge ``changes`` into an existing record.

        Only the keys present in ``changes`` are overwritten; nested
        values such as lists are replaced, not merged.  Returns ``None``
        if no record has the given identifier.

        The merged record is validated against the record model before it
        is stored; a merge that produces an invalid record raises
        ``pydantic.ValidationError`` and leaves the stored record as it was.
        """
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            fields = current.model_dump()
            fields.update((k, v) for k, v in changes.items() if k != "id")
            updated = self._model.model_validate(fields)
            self._records[record_id] = updated
            return updated


class Storage(ABC):
    """Operations available to the request layer, per entity kind."""

    # Users
    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    def create_user(self, data: UserCreate) -> User: ...

    # Government activities
    @abstractmethod
    def get_all_government_activities(self) -> List[GovernmentActivity]: ...

    @abstractmethod
    def get_government_activity(self, activity_id: str) -> Optional[GovernmentActivity]: ...

    @abstractmethod
    def create_government_activity(self, data: GovernmentActivityCreate) -> GovernmentActivity: ...

    # Citizen issues
    @abstractmethod
    def get_all_citizen_issues(self) -> List[CitizenIssue]: ...

    @abstractmethod
    def get_citizen_issue(self, issue_id: str) -> Optional[CitizenIssue]: ...

    @abstractmethod
    def create_citizen_issue(self, data: CitizenIssueCreate) -> CitizenIssue: ...

    @abstractmethod
    def update_citizen_issue(
        self, issue_id: str, updates: CitizenIssueUpdate
    ) -> Optional[CitizenIssue]: ...

    # Officials
    @abstractmethod
    def get_all_officials(self) -> List[Official]: ...

    @abstractmethod
    def get_official(self, official_id: str) -> Optional[Official]: ...

    @abstractmethod
    def create_official(self, data: OfficialCreate) -> Official: ...

    # Vote records
    @abstractmethod
    def get_all_vote_records(self) -> List[VoteRecord]: ...

    @abstractmethod
    def get_vote_records_by_official(self, official_id: str) -> List[VoteRecord]: ...

    @abstractmethod
    def create_vote_record(self, data: VoteRecordCreate) -> VoteRecord: ...

    # Statistics
    @abstractmethod
    def get_all_statistics(self) -> List[Statistic]: ...

    @abstractmethod
    def get_statistic_by_area(self, area: str) -> Optional[Statistic]: ...

    @abstractmethod
    def create_statistic(self, data: StatisticCreate) -> Statistic: ...

    # Action plans
    @abstractmethod
    def get_all_action_plans(self) -> List[ActionPlan]: ...

    @abstractmethod
    def get_action_plan(self, plan_id: str) -> Optional[ActionPlan]: ...

    @abstractmethod
    def create_action_plan(self, data: ActionPlanCreate) -> ActionPlan: ...


class MemStorage(Storage):
    """Process-local implementation of :class:`Storage`.

    A fresh instance is empty; call
    :func:`civic_pulse_api.app.services.seed.seed_storage` to load the
    demo dataset.
    """

    def __init__(self) -> None:
        self.users: Collection[User] = Collection(User)
        self.government_activities: Collection[GovernmentActivity] = Collection(GovernmentActivity)
        self.citizen_issues: Collection[CitizenIssue] = Collection(CitizenIssue)
        self.officials: Collection[Official] = Collection(Official)
        self.vote_records: Collection[VoteRecord] = Collection(VoteRecord)
        self.statistics: Collection[Statistic] = Collection(Statistic)
        self.action_plans: Collection[ActionPlan] = Collection(ActionPlan)

    # Users
    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.find(lambda user: user.username == username)

    def create_user(self, data: UserCreate) -> User:
        user = self.users.create(data)
        logger.info("Created user %s (%s)", user.id, user.username)
        return user

    # Government activities
    def get_all_government_activities(self) -> List[GovernmentActivity]:
        return self.government_activities.list()

    def get_government_activity(self, activity_id: str) -> Optional[GovernmentActivity]:
        return self.government_activities.get(activity_id)

    def create_government_activity(self, data: GovernmentActivityCreate) -> GovernmentActivity:
        activity = self.government_activities.create(data)
        logger.info("Created government activity %s", activity.id)
        return activity

    # Citizen issues
    def get_all_citizen_issues(self) -> List[CitizenIssue]:
        return self.citizen_issues.list()

    def get_citizen_issue(self, issue_id: str) -> Optional[CitizenIssue]:
        return self.citizen_issues.get(issue_id)

    def create_citizen_issue(self, data: CitizenIssueCreate) -> CitizenIssue:
        issue = self.citizen_issues.create(
            data,
            votes=0,
            status="pending",
            created_at=datetime.now(timezone.utc),
            matched_activity_id=None,
        )
        logger.info("Created citizen issue %s", issue.id)
        return issue

    def update_citizen_issue(
        self, issue_id: str, updates: CitizenIssueUpdate
    ) -> Optional[CitizenIssue]:
        """Apply the fields explicitly set on ``updates``.

        Returns ``None`` if the issue does not exist.
        """
        changes = updates.model_dump(exclude_unset=True)
        issue = self.citizen_issues.update(issue_id, changes)
        if issue is None:
            logger.debug("Citizen issue %s not found for update", issue_id)
            return None
        logger.info("Updated citizen issue %s: %s", issue_id, sorted(changes))
        return issue

    # Officials
    def get_all_officials(self) -> List[Official]:
        return self.officials.list()

    def get_official(self, official_id: str) -> Optional[Official]:
        return self.officials.get(official_id)

    def create_official(self, data: OfficialCreate) -> Official:
        official = self.officials.create(data)
        logger.info("Created official %s", official.id)
        return official

    # Vote records
    def get_all_vote_records(self) -> List[VoteRecord]:
        return self.vote_records.list()

    def get_vote_records_by_official(self, official_id: str) -> List[VoteRecord]:
        return self.vote_records.filter(lambda record: record.official_id == official_id)

    def create_vote_record(self, data: VoteRecordCreate) -> VoteRecord:
        record = self.vote_records.create(data)
        logger.info("Created vote record %s", record.id)
        return record

    # Statistics
    def get_all_statistics(self) -> List[Statistic]:
        return self.statistics.list()

    def get_statistic_by_area(self, area: str) -> Optional[Statistic]:
        return self.statistics.find(lambda stat: stat.area == area)

    def create_statistic(self, data: StatisticCreate) -> Statistic:
        stat = self.statistics.create(data)
        logger.info("Created statistic %s for %s", stat.id, stat.area)
        return stat

    # Action plans
    def get_all_action_plans(self) -> List[ActionPlan]:
        return self.action_plans.list()

    def get_action_plan(self, plan_id: str) -> Optional[ActionPlan]:
        return self.action_plans.get(plan_id)

    def create_action_plan(self, data: ActionPlanCreate) -> ActionPlan:
        plan = self.action_plans.create(data)
        logger.info("Created action plan %s", plan.id)
        return plan
