from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .models import Round

_LOG = logging.getLogger(__name__)

ALL = "all"


class RoundFilter(BaseModel):
    """Options accepted by :func:`filter_rounds`.

    ``count``, ``course_id`` and ``round_type`` accept the literal ``"all"`` to
    disable that step; ``count`` may be given as a string (``"10"``) the way
    the dashboard select stores it.
    """

    start_date: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("start_date", "startDate")
    )
    end_date: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("end_date", "endDate")
    )
    count: Optional[Union[int, str]] = None
    course_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("course_id", "courseId")
    )
    round_type: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("round_type", "roundType")
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @property
    def limit(self) -> int | None:
        if not self.count or self.count == ALL:
            return None
        return int(self.count)


def _is_set(value: object) -> bool:
    return value is not None and value != "" and value != ALL


def filter_rounds(
    rounds: Sequence[Round],
    options: RoundFilter | dict | None = None,
    **kwargs,
) -> List[Round]:
    """Return a new list of rounds matching ``options``, most recent first.

    Options can be passed as a :class:`RoundFilter`, a mapping (camelCase or
    snake_case keys) or keyword arguments; keyword arguments override
    fields of ``options``. The input sequence is never modified.
    """

    if options is None:
        options = RoundFilter(**kwargs)
    elif isinstance(options, dict):
        options = RoundFilter.model_validate({**options, **kwargs})
    elif kwargs:
        overrides = RoundFilter.model_validate(kwargs).model_dump(exclude_unset=True)
        options = options.model_copy(update=overrides)

    filtered = list(rounds)
    if _is_set(options.course_id):
        filtered = [r for r in filtered if r.course_id == options.course_id]
    if _is_set(options.round_type):
        # Unknown types match nothing.
        filtered = [r for r in filtered if r.round_type == options.round_type]
    if options.start_date:
        filtered = [r for r in filtered if r.date >= options.start_date]
    if options.end_date:
        filtered = [r for r in filtered if r.date <= options.end_date]

    filtered.sort(key=lambda r: r.date, reverse=True)

    limit = options.limit
    if limit is not None:
        filtered = filtered[:limit]

    _LOG.debug("filter_rounds kept %d of %d rounds", len(filtered), len(rounds))
    return filtered


__all__ = ["ALL", "RoundFilter", "filter_rounds"]
