"""Read-only access to the tracker's JSON export.

The export is the document the browser app downloads: an object with
``courses``, ``rounds`` and ``settings`` keys. Records are validated into
:mod:`golfstats.rounds.models`; a record that fails validation is skipped
with a warning so one bad round does not hide the rest of a season.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from golfstats.config import get_settings
from golfstats.rounds.filters import RoundFilter, filter_rounds
from golfstats.rounds.models import Course, Round

_LOG = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class ExportNotFound(Exception):
    pass


class ExportFormatError(Exception):
    pass


class CourseNotFound(Exception):
    pass


def _parse_records(
    raw: Any, model: Type[_ModelT], kind: str, source: Path
) -> List[_ModelT]:
    if not isinstance(raw, list):
        raise ExportFormatError(f"{source}: '{kind}' must be a list")

    records: List[_ModelT] = []
    for index, item in enumerate(raw):
        try:
            records.append(model.model_validate(item))
        except ValidationError as exc:
            _LOG.warning(
                "skipping %s[%d] in %s: %d validation errors",
                kind,
                index,
                source,
                exc.error_count(),
            )
    return records


class RoundStore:
    def __init__(self, data_file: Path | str | None = None):
        path = Path(data_file or get_settings().data_file).expanduser()
        self._path = path.resolve()
        self._courses: List[Course] | None = None
        self._rounds: List[Round] | None = None

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        if self._courses is not None and self._rounds is not None:
            return
        if not self._path.exists():
            raise ExportNotFound(str(self._path))
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ExportFormatError(f"{self._path}: invalid JSON ({exc})") from exc
        if not isinstance(payload, dict):
            raise ExportFormatError(f"{self._path}: top level must be an object")

        self._courses = _parse_records(
            payload.get("courses", []), Course, "courses", self._path
        )
        self._rounds = _parse_records(
            payload.get("rounds", []), Round, "rounds", self._path
        )
        _LOG.debug(
            "loaded %d courses and %d rounds from %s",
            len(self._courses),
            len(self._rounds),
            self._path,
        )

    def list_courses(self) -> List[Course]:
        self._load()
        return list(self._courses or [])

    def get_course(self, course_id: str) -> Course:
        for course in self.list_courses():
            if course.id == course_id:
                return course
        raise CourseNotFound(course_id)

    def all_rounds(self) -> List[Round]:
        self._load()
        return list(self._rounds or [])

    def list_rounds(self, options: RoundFilter | dict | None = None, **kwargs) -> List[Round]:
        return filter_rounds(self.all_rounds(), options, **kwargs)


__all__ = [
    "CourseNotFound",
    "ExportFormatError",
    "ExportNotFound",
    "RoundStore",
]
