# Path: sched_match/process/matcher/models/candidates.py
"""
Catalog and Query Models

Immutable records for the meeting catalog, the user catalog and
the schedule queries matched against them.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MeetingCandidate:
    """
    A registered meeting. Identity is the id.

    Attributes:
        id: Provider meeting id
        topic: Free-text meeting title
        host_id: Id of the user hosting the meeting
        start_time: Provider start time, kept verbatim
    """
    id: str
    topic: str
    host_id: str = ''
    start_time: str = ''

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'topic': self.topic,
            'host_id': self.host_id,
            'start_time': self.start_time,
        }


@dataclass(frozen=True)
class UserCandidate:
    """A user that can host meetings."""
    id: str
    email: str = ''
    first_name: str = ''
    last_name: str = ''
    display_name: str = ''

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return f"{self.first_name} {self.last_name}".strip()

    def to_dict(self) -> dict:
        """Convert to the summary exposed in match results."""
        return {
            'id': self.id,
            'email': self.email,
            'display_name': self.display_name,
        }


@dataclass(frozen=True)
class MatchOptions:
    """
    Matching relaxations for a single query.

    Attributes:
        ignore_level_mismatch: Downgrade level conflicts to a mild penalty
            and relax structural, numeric and coverage checks
    """
    ignore_level_mismatch: bool = False


@dataclass(frozen=True)
class ScheduleQuery:
    """A human-typed schedule line: program text plus instructor name."""
    program_text: str
    instructor_text: str = ''
    options: MatchOptions = field(default_factory=MatchOptions)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'program': self.program_text,
            'instructor': self.instructor_text,
            'ignore_level_mismatch': self.options.ignore_level_mismatch,
        }


__all__ = ['MeetingCandidate', 'UserCandidate', 'MatchOptions', 'ScheduleQuery']
