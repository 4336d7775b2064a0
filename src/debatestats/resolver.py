from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field

from .models import Entry, Event, Tournament
from .records import EventRecord, FeedRecords, TournRecord, index_by_id

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class _PendingEvent:
    record: EventRecord
    entries: list[Entry] = field(default_factory=list)

    def freeze(self) -> Event:
        return Event(
            abbr=self.record.abbr,
            name=self.record.name,
            kind_label=self.record.event_type,
            entries=tuple(self.entries),
        )


def resolve(records: FeedRecords, header: TournRecord | None = None) -> Tournament:
    """Join flat feed records into a tournament.

    Entries pointing at an event id the feed never declared are dropped.
    Tabroom's live feeds are briefly inconsistent now and then, so this is
    expected and not an error.
    """
    header = header or records.tourn
    pending = {event_id: _PendingEvent(record) for event_id, record in index_by_id(records.events).items()}

    dropped = 0
    for record in records.entries:
        owner = pending.get(record.event)
        if owner is None:
            dropped += 1
            LOGGER.debug("Dropping entry %d: unknown event id %d", record.id, record.event)
            continue
        owner.entries.append(Entry(code=record.code, full_name=record.full_name))

    if dropped:
        LOGGER.info("Dropped %d entries with unknown event ids", dropped)

    events = tuple(event.freeze() for event in pending.values())
    LOGGER.info(
        "Resolved %s: %d events, %d entries",
        header.name,
        len(events),
        sum(len(e.entries) for e in events),
    )
    return Tournament(
        name=header.name,
        start_date=header.start_date,
        end_date=header.end_date,
        events=events,
    )


def index_ballots(records: FeedRecords) -> dict[int, tuple[Entry, ...]]:
    """Map ballot ids to the entries each ballot was written for.

    A ballot id repeated across records collects one entry per record, in
    feed order. Records naming an unknown entry are left out, same as
    dangling entries in :func:`resolve`.
    """
    entries = index_by_id(records.entries)
    out: dict[int, list[Entry]] = defaultdict(list)
    for ballot in records.ballots:
        entry = entries.get(ballot.entry)
        if entry is None:
            LOGGER.debug("Dropping ballot %d: unknown entry id %d", ballot.id, ballot.entry)
            continue
        out[ballot.id].append(Entry(code=entry.code, full_name=entry.full_name))
    return {ballot_id: tuple(sides) for ballot_id, sides in out.items()}
