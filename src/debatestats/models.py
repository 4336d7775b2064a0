from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class EventKind(Enum):
    DEBATE = "debate"
    SPEECH = "speech"
    # Congress, worlds and friends; Event.kind_label keeps the raw category.
    OTHER = "other"

    @classmethod
    def from_label(cls, label: str) -> "EventKind":
        if label == cls.DEBATE.value:
            return cls.DEBATE
        if label == cls.SPEECH.value:
            return cls.SPEECH
        return cls.OTHER


@dataclass(frozen=True, slots=True)
class Entry:
    code: str
    full_name: str


@dataclass(frozen=True, slots=True)
class Event:
    abbr: str
    name: str
    kind_label: str
    entries: tuple[Entry, ...] = field(default_factory=tuple)

    @property
    def kind(self) -> EventKind:
        return EventKind.from_label(self.kind_label)

    @property
    def is_debate(self) -> bool:
        return self.kind is EventKind.DEBATE

    @property
    def is_speech(self) -> bool:
        return self.kind is EventKind.SPEECH


@dataclass(frozen=True, slots=True)
class Tournament:
    """A resolved tournament.

    Events and their entries come in no particular order. ``end_date`` is the
    day after the last day of competition, as the host reports it.
    """

    name: str
    start_date: date
    end_date: date
    events: tuple[Event, ...] = field(default_factory=tuple)

    @property
    def entry_count(self) -> int:
        return sum(len(event.entries) for event in self.events)

    def event_named(self, name: str) -> Event | None:
        for event in self.events:
            if event.name == name:
                return event
        return None
