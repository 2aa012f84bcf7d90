# Path: sched_match/loaders/catalog_reader.py
"""
Catalog Reader for sched_match

Reads the meeting catalog, the user catalog and the schedule queries
from JSON files and converts them into matcher records.

Each file holds either a JSON list of entries, or an object wrapping
that list under its collection key ('meetings', 'users', 'queries').
Provider exports are accepted as-is: meeting ids may come as
'meeting_id' and ids may be numbers.
"""

import json
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

from sched_match.constants import MeetingKeys, QueryKeys, UserKeys
from sched_match.core.logger import get_input_logger
from sched_match.exceptions import CatalogError
from sched_match.process.matcher.models import (
    MatchOptions,
    MeetingCandidate,
    ScheduleQuery,
    UserCandidate,
)


T = TypeVar('T')


class CatalogReader:
    """
    Reader for catalog and query files.

    Malformed files raise CatalogError. Individual entries that lack
    a required field are skipped with a warning.

    Example:
        reader = CatalogReader()

        meetings = reader.read_meetings(Path('meetings.json'))
        users = reader.read_users(Path('users.json'))
        queries = reader.read_queries(Path('schedule.json'))
    """

    def __init__(self):
        """Initialize catalog reader."""
        self.logger = get_input_logger('catalog_reader')

    # ========================================================================
    # PUBLIC API
    # ========================================================================

    def read_meetings(self, path: Path) -> list[MeetingCandidate]:
        """
        Read the meeting catalog.

        Args:
            path: JSON file with meeting entries

        Returns:
            List of MeetingCandidate

        Raises:
            CatalogError: If the file is missing, unreadable or malformed
        """
        return self._read_collection(path, 'meetings', self._parse_meeting)

    def read_users(self, path: Path) -> list[UserCandidate]:
        """
        Read the user catalog.

        Args:
            path: JSON file with user entries

        Returns:
            List of UserCandidate

        Raises:
            CatalogError: If the file is missing, unreadable or malformed
        """
        return self._read_collection(path, 'users', self._parse_user)

    def read_queries(self, path: Path, ignore_level_mismatch: bool = False) -> list[ScheduleQuery]:
        """
        Read schedule queries.

        Args:
            path: JSON file with query entries
            ignore_level_mismatch: Default for entries without their own options

        Returns:
            List of ScheduleQuery

        Raises:
            CatalogError: If the file is missing, unreadable or malformed
        """
        return self._read_collection(
            path,
            'queries',
            lambda entry: self._parse_query(entry, ignore_level_mismatch),
        )

    # ========================================================================
    # ENTRY PARSERS
    # ========================================================================

    @staticmethod
    def _parse_meeting(entry: dict) -> Optional[MeetingCandidate]:
        meeting_id = entry.get(MeetingKeys.ID, entry.get(MeetingKeys.ID_ALT))
        topic = entry.get(MeetingKeys.TOPIC)
        if meeting_id in (None, '') or topic is None:
            return None
        return MeetingCandidate(
            id=str(meeting_id),
            topic=str(topic),
            host_id=_text(entry.get(MeetingKeys.HOST_ID)),
            start_time=_text(entry.get(MeetingKeys.START_TIME)),
        )

    @staticmethod
    def _parse_user(entry: dict) -> Optional[UserCandidate]:
        user_id = entry.get(UserKeys.ID)
        if user_id in (None, ''):
            return None
        return UserCandidate(
            id=str(user_id),
            email=_text(entry.get(UserKeys.EMAIL)),
            first_name=_text(entry.get(UserKeys.FIRST_NAME)),
            last_name=_text(entry.get(UserKeys.LAST_NAME)),
            display_name=_text(entry.get(UserKeys.DISPLAY_NAME)),
        )

    @staticmethod
    def _parse_query(entry: dict, ignore_level_mismatch: bool) -> Optional[ScheduleQuery]:
        program = entry.get(QueryKeys.PROGRAM)
        if program is None:
            return None

        options = entry.get(QueryKeys.OPTIONS) or {}
        if not isinstance(options, dict):
            return None

        return ScheduleQuery(
            program_text=str(program),
            instructor_text=_text(entry.get(QueryKeys.INSTRUCTOR)),
            options=MatchOptions(
                ignore_level_mismatch=_flag(
                    options.get(QueryKeys.IGNORE_LEVEL_MISMATCH), ignore_level_mismatch
                ),
            ),
        )

    # ========================================================================
    # FILE HANDLING
    # ========================================================================

    def _read_collection(
        self,
        path: Path,
        key: str,
        parse: Callable[[dict], Optional[T]]
    ) -> list[T]:
        """Load a JSON collection and parse each entry, skipping bad ones."""
        entries = self._extract_entries(self._load_json(Path(path)), key, path)

        records = []
        for index, entry in enumerate(entries):
            record = parse(entry) if isinstance(entry, dict) else None
            if record is None:
                self.logger.warning(f"Skipping invalid {key} entry #{index} in {path}")
                continue
            records.append(record)

        self.logger.info(f"Read {len(records)}/{len(entries)} {key} from {path}")
        return records

    def _load_json(self, path: Path) -> Any:
        """Load a JSON file, raising CatalogError on failure."""
        if not path.exists():
            raise CatalogError(f"File not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            self.logger.error(f"JSON parse error in {path}: {e}")
            raise CatalogError(f"JSON parse error in {path}: {e}") from e
        except OSError as e:
            self.logger.error(f"Cannot read {path}: {e}")
            raise CatalogError(f"Cannot read {path}: {e}") from e

    @staticmethod
    def _extract_entries(data: Any, key: str, path: Path) -> list:
        """Accept a bare list or an object wrapping it under key."""
        if isinstance(data, dict):
            data = data.get(key)
        if not isinstance(data, list):
            raise CatalogError(f"{path}: expected a list of {key} or an object with '{key}'")
        return data


def _text(value: Any) -> str:
    """Optional field as a string ('' when missing)."""
    return '' if value is None else str(value)


def _flag(value: Any, default: bool) -> bool:
    """Optional boolean field; strings use the same spellings as ConfigLoader."""
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1', 'yes', 'on')
    return bool(value)


__all__ = ['CatalogReader']
