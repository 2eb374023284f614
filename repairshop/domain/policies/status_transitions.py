"""
Job status transition table.

The table maps every status to the set of statuses a job may move to next.
The default table is permissive: any status may move to any other status.
Tightening the workflow means passing a different table, not changing code.
"""

from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from repairshop.domain.value_objects.job_status import JobStatus

TransitionMap = Mapping[JobStatus, FrozenSet[JobStatus]]


def permissive_transitions() -> Dict[JobStatus, FrozenSet[JobStatus]]:
    """Every status may move to every other status."""
    return {
        current: frozenset(status for status in JobStatus if status != current)
        for current in JobStatus
    }


class TransitionTable:
    """Allowed status moves, held as data."""

    def __init__(self, transitions: Optional[TransitionMap] = None):
        table = transitions if transitions is not None else permissive_transitions()
        self._transitions: Dict[JobStatus, FrozenSet[JobStatus]] = {
            JobStatus(current): frozenset(JobStatus(s) for s in targets)
            for current, targets in table.items()
        }

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "TransitionTable":
        """Build a table from ``(from_status, to_status)`` pairs."""
        table: Dict[JobStatus, set] = {status: set() for status in JobStatus}
        for current, target in pairs:
            table[JobStatus(current)].add(JobStatus(target))
        return cls({k: frozenset(v) for k, v in table.items()})

    def allowed_from(self, current: JobStatus) -> FrozenSet[JobStatus]:
        return self._transitions.get(current, frozenset())

    def is_allowed(self, current: JobStatus, target: JobStatus) -> bool:
        return target in self.allowed_from(current)

    def as_dict(self) -> Dict[str, list]:
        return {
            current.value: sorted(target.value for target in targets)
            for current, targets in self._transitions.items()
        }


DEFAULT_TRANSITIONS = TransitionTable()
