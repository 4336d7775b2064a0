"""Flat record shapes of the tabroom published-tournament feed.

The feed is one wrapper element holding a ``TOURN`` header followed by a flat
list of records (``EVENT``, ``ENTRY``, ``JUDGE`` ...). Records reference each
other only through integer ids, so this module does no joining at all; see
:mod:`debatestats.resolver` for that.
"""

from __future__ import annotations

import logging
import re
import warnings
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from typing import Any, Protocol, TypeVar

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning
from bs4.element import Tag

from .errors import DecodeFailed

LOGGER = logging.getLogger(__name__)
DATE_FORMAT = "%m/%d/%Y"
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_TRUE = {"1", "true"}
_FALSE = {"0", "false"}


def _tag(name: str) -> Any:
    return field(metadata={"tag": name})


@dataclass(frozen=True, slots=True)
class TournRecord:
    id: int = _tag("ID")
    name: str = _tag("TOURNNAME")
    start_date: date = _tag("STARTDATE")
    end_date: date = _tag("ENDDATE")
    download_site: str = _tag("DOWNLOADSITE")


@dataclass(frozen=True, slots=True)
class EventRecord:
    abbr: str = _tag("ABBR")
    name: str = _tag("EVENTNAME")
    id: int = _tag("ID")
    judge_group: int = _tag("JUDGE_GROUP")
    event_type: str = _tag("TYPE")


@dataclass(frozen=True, slots=True)
class EntryRecord:
    id: int = _tag("ID")
    school: int = _tag("SCHOOL")
    event: int = _tag("EVENT")
    rating: int = _tag("RATING")
    code: str = _tag("CODE")
    full_name: str = _tag("FULLNAME")
    dropped: bool = _tag("DROPPED")
    waitlist: bool = _tag("WAITLIST")
    ada: bool = _tag("ADA")
    tub_disability: bool = _tag("TUBDISABILITY")


@dataclass(frozen=True, slots=True)
class JudgeRecord:
    id: int = _tag("ID")
    download_record: bool = _tag("DOWNLOADRECORD")
    school: int = _tag("SCHOOL")
    first: str = _tag("FIRST")
    last: str = _tag("LAST")
    person: int = _tag("PERSON")
    obligation: int = _tag("OBLIGATION")
    hired: bool = _tag("HIRED")
    tab_rating: int = _tag("TABRATING")
    stop_scheduling: bool = _tag("STOPSCHEDULING")
    ada: bool = _tag("ADA")
    diverse: bool = _tag("DIVERSE")
    notes: bool = _tag("NOTES")
    email: bool = _tag("EMAIL")


@dataclass(frozen=True, slots=True)
class SchoolRecord:
    id: int = _tag("ID")
    download_record: bool = _tag("DOWNLOADRECORD")
    code: str = _tag("CODE")
    name: str = _tag("SCHOOLNAME")
    coaches: int = _tag("COACHES")
    chapter: bool = _tag("CHAPTER")
    nsda: bool = _tag("NSDA")


@dataclass(frozen=True, slots=True)
class RoundRecord:
    id: int = _tag("ID")
    event: int = _tag("EVENT")
    time_slot: int = _tag("TIMESLOT")
    tiebreak_set: int = _tag("TB_SET")
    rd_name: int = _tag("RD_NAME")
    label: str = _tag("LABEL")
    flighting: int = _tag("FLIGHTING")
    judges_per_panel: int = _tag("JUDGESPERPANEL")
    judge_place_scheme: bool = _tag("JUDGEPLACESCHEME")
    pairing_scheme: str = _tag("PAIRINGSCHEME")
    runoff: bool = _tag("RUNOFF")
    topic: bool = _tag("TOPIC")
    created_offline: bool = _tag("CREATEDOFFLINE")


@dataclass(frozen=True, slots=True)
class PanelRecord:
    id: int = _tag("ID")
    round: int = _tag("ROUND")
    room: int = _tag("ROOM")
    flight: int = _tag("FLIGHT")
    bye: bool = _tag("BYE")


@dataclass(frozen=True, slots=True)
class BallotRecord:
    id: int = _tag("ID")
    judge: int = _tag("JUDGE")
    panel: int = _tag("PANEL")
    entry: int = _tag("ENTRY")
    side: int = _tag("SIDE")
    room: int = _tag("ROOM")
    bye: bool = _tag("BYE")
    no_show: bool = _tag("NOSHOW")
    chair: bool = _tag("CHAIR")


@dataclass(frozen=True, slots=True)
class BallotScoreRecord:
    id: int = _tag("ID")
    ballot: int = _tag("BALLOT")
    recipient: int = _tag("RECIPIENT")
    score_id: str = _tag("SCORE_ID")
    speech: int = _tag("SPEECH")
    score: float = _tag("SCORE")


@dataclass(frozen=True, slots=True)
class TiebreakRecord:
    id: int = _tag("ID")
    sort_order: int = _tag("SortOrder")
    drops: int = _tag("DROPS")
    for_opponent: bool = _tag("FOROPPONENT")
    label: str = _tag("LABEL")
    tag: str = _tag("TAG")
    tiebreak_set: int = _tag("TB_SET")


@dataclass(frozen=True, slots=True)
class TiebreakSetRecord:
    id: int = _tag("ID")
    score_for: str = _tag("SCOREFOR")
    name: str = _tag("TBSET_NAME")


@dataclass(frozen=True, slots=True)
class TimeSlotRecord:
    id: int = _tag("ID")
    name: str = _tag("TIMESLOTNAME")
    start: str = _tag("START")
    end: str = _tag("END")


@dataclass(frozen=True, slots=True)
class RoomRecord:
    id: int = _tag("ID")
    building: int = _tag("BUILDING")
    name: str = _tag("ROOMNAME")
    quality: int = _tag("QUALITY")
    capacity: int = _tag("CAPACITY")
    inactive: bool = _tag("INACTIVE")
    notes: bool = _tag("NOTES")


@dataclass(slots=True)
class FeedRecords:
    tourn: TournRecord
    events: list[EventRecord] = field(default_factory=list)
    entries: list[EntryRecord] = field(default_factory=list)
    judges: list[JudgeRecord] = field(default_factory=list)
    schools: list[SchoolRecord] = field(default_factory=list)
    rounds: list[RoundRecord] = field(default_factory=list)
    panels: list[PanelRecord] = field(default_factory=list)
    ballots: list[BallotRecord] = field(default_factory=list)
    ballot_scores: list[BallotScoreRecord] = field(default_factory=list)
    tiebreaks: list[TiebreakRecord] = field(default_factory=list)
    tiebreak_sets: list[TiebreakSetRecord] = field(default_factory=list)
    time_slots: list[TimeSlotRecord] = field(default_factory=list)
    rooms: list[RoomRecord] = field(default_factory=list)


# feed tag -> (record type, FeedRecords attribute)
RECORD_KINDS: dict[str, tuple[type, str]] = {
    "EVENT": (EventRecord, "events"),
    "ENTRY": (EntryRecord, "entries"),
    "JUDGE": (JudgeRecord, "judges"),
    "SCHOOL": (SchoolRecord, "schools"),
    "ROUND": (RoundRecord, "rounds"),
    "PANEL": (PanelRecord, "panels"),
    "BALLOT": (BallotRecord, "ballots"),
    "BALLOT_SCORE": (BallotScoreRecord, "ballot_scores"),
    "TIEBREAK": (TiebreakRecord, "tiebreaks"),
    "TIEBREAK_SET": (TiebreakSetRecord, "tiebreak_sets"),
    "TIMESLOT": (TimeSlotRecord, "time_slots"),
    "ROOM": (RoomRecord, "rooms"),
}


class _Identified(Protocol):
    @property
    def id(self) -> int: ...


R = TypeVar("R")
RecordT = TypeVar("RecordT", bound=_Identified)


def index_by_id(records: Iterable[RecordT]) -> dict[int, RecordT]:
    return {record.id: record for record in records}


def decode_feed(body: str) -> FeedRecords:
    """Decode a feed body into flat records.

    Decoding is all-or-nothing: a missing field or a malformed scalar on any
    record raises :class:`DecodeFailed` naming the offending record path.
    """
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", XMLParsedAsHTMLWarning)
        soup = BeautifulSoup(body, "html.parser")
    headers = soup.find_all("tourn")
    if not headers:
        raise DecodeFailed("missing TOURN record")
    if len(headers) > 1:
        raise DecodeFailed(f"expected one TOURN record, found {len(headers)}")

    header = headers[0]
    tourn = _decode_record(TournRecord, header, "TOURN")
    collected: dict[str, list[Any]] = {attr: [] for _, attr in RECORD_KINDS.values()}
    skipped: dict[str, int] = {}

    container = header.parent
    for node in container.find_all(True, recursive=False):
        kind = node.name.upper()
        if node is header:
            continue
        if kind not in RECORD_KINDS:
            skipped[kind] = skipped.get(kind, 0) + 1
            continue
        record_type, attr = RECORD_KINDS[kind]
        path = f"{kind}[{len(collected[attr])}]"
        collected[attr].append(_decode_record(record_type, node, path))

    if skipped:
        LOGGER.debug("Ignored unknown feed records: %s", skipped)
    LOGGER.debug(
        "Decoded feed records: %s",
        ", ".join(f"{attr}={len(items)}" for attr, items in collected.items()),
    )
    return FeedRecords(tourn=tourn, **collected)


def _decode_record(record_type: type[R], node: Tag, path: str) -> R:
    values: dict[str, Any] = {}
    for f in fields(record_type):
        tag = f.metadata["tag"]
        child = node.find(tag.lower(), recursive=False)
        if child is None:
            raise DecodeFailed(f"{path}.{tag}: missing field")
        parser = _PARSERS[f.type]
        try:
            values[f.name] = parser(child.get_text().strip())
        except ValueError as exc:
            raise DecodeFailed(f"{path}.{tag}: {exc}") from exc
    return record_type(**values)


def _parse_int(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"expected an integer, got {text!r}")
    return int(text)


def _parse_float(text: str) -> float:
    if not _FLOAT_PATTERN.fullmatch(text):
        raise ValueError(f"expected a number, got {text!r}")
    return float(text)


def _parse_bool(text: str) -> bool:
    lowered = text.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"expected a boolean, got {text!r}")


def _parse_date(text: str) -> date:
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        raise ValueError(f"expected a date like MM/DD/YYYY, got {text!r}") from None


def _parse_str(text: str) -> str:
    return text


# Keyed by the annotation string, which is what fields() reports under
# postponed evaluation of annotations.
_PARSERS: dict[str, Callable[[str], Any]] = {
    "int": _parse_int,
    "float": _parse_float,
    "bool": _parse_bool,
    "date": _parse_date,
    "str": _parse_str,
}
