"""Input records fed to the graph layout."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable, List, Mapping, Tuple

from .errors import InvalidRecordError


@dataclass(frozen=True)
class PostRecord:
    slug: str
    title: str
    date: str
    day: date
    summary: str | None = None
    tags: Tuple[str, ...] = field(default_factory=tuple)
    draft: bool = False

    @property
    def primary_tag(self) -> str | None:
        if not self.tags:
            return None
        tag = self.tags[0]
        return tag if tag else None


def parse_day(value: Any, slug: str | None = None) -> date:
    """Calendar day of an ISO date or datetime, as written (no tz shift)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value or "").strip()
    if not text:
        raise InvalidRecordError(f"Record {slug!r} has no date", slug=slug)
    if text.endswith("Z") or text.endswith("z"):
        text = f"{text[:-1]}+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as error:
        raise InvalidRecordError(f"Record {slug!r} has unparseable date {value!r}", slug=slug) from error


_TRUE_STRINGS = {"true", "yes", "1"}
_FALSE_STRINGS = {"false", "no", "0", ""}


def parse_draft(value: Any, slug: str | None = None) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise InvalidRecordError(f"Record {slug!r} has unrecognised draft flag {value!r}", slug=slug)


def coerce_record(payload: Mapping[str, Any] | PostRecord) -> PostRecord:
    if isinstance(payload, PostRecord):
        return payload

    slug = str(payload.get("slug") or "").strip()
    if not slug:
        raise InvalidRecordError("Record has no slug")
    title = payload.get("title")
    if title is None or not str(title).strip():
        raise InvalidRecordError(f"Record {slug!r} has no title", slug=slug)

    raw_date = payload.get("date")
    day = parse_day(raw_date, slug=slug)
    date_text = raw_date if isinstance(raw_date, str) else day.isoformat()

    tags = payload.get("tags") or ()
    if isinstance(tags, str):
        tags = (tags,)
    summary = payload.get("summary")
    return PostRecord(
        slug=slug,
        title=str(title),
        date=date_text,
        day=day,
        summary=str(summary) if summary is not None else None,
        tags=tuple(tag if isinstance(tag, str) else "" for tag in tags),
        draft=parse_draft(payload.get("draft", False), slug=slug),
    )


def coerce_records(payloads: Iterable[Mapping[str, Any] | PostRecord]) -> List[PostRecord]:
    return [coerce_record(payload) for payload in payloads]


def published(records: Iterable[PostRecord]) -> List[PostRecord]:
    return [record for record in records if not record.draft]
