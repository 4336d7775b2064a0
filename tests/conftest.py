from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


class FeedBuilder:
    """Builds small tabroom feeds for tests."""

    def tourn(
        self,
        name: str = "Test Invitational",
        start: str = "01/09/2021",
        end: str = "01/11/2021",
        tourn_id: int = 1,
    ) -> str:
        return (
            "<TOURN>"
            f"<ID>{tourn_id}</ID><TOURNNAME>{name}</TOURNNAME>"
            f"<STARTDATE>{start}</STARTDATE><ENDDATE>{end}</ENDDATE>"
            "<DOWNLOADSITE>tabroom.com</DOWNLOADSITE>"
            "</TOURN>"
        )

    def event(self, event_id: int, abbr: str, name: str, event_type: str = "debate") -> str:
        return (
            "<EVENT>"
            f"<ABBR>{abbr}</ABBR><EVENTNAME>{name}</EVENTNAME><ID>{event_id}</ID>"
            f"<JUDGE_GROUP>1</JUDGE_GROUP><TYPE>{event_type}</TYPE>"
            "</EVENT>"
        )

    def entry(self, entry_id: int, event_id: int | str, code: str, full_name: str = "") -> str:
        return (
            "<ENTRY>"
            f"<ID>{entry_id}</ID><SCHOOL>1</SCHOOL><EVENT>{event_id}</EVENT><RATING>0</RATING>"
            f"<CODE>{code}</CODE><FULLNAME>{full_name or code}</FULLNAME>"
            "<DROPPED>0</DROPPED><WAITLIST>0</WAITLIST><ADA>0</ADA><TUBDISABILITY>0</TUBDISABILITY>"
            "</ENTRY>"
        )

    def ballot(self, ballot_id: int, entry_id: int) -> str:
        return (
            "<BALLOT>"
            f"<ID>{ballot_id}</ID><JUDGE>1</JUDGE><PANEL>1</PANEL><ENTRY>{entry_id}</ENTRY>"
            "<SIDE>1</SIDE><ROOM>1</ROOM><BYE>0</BYE><NOSHOW>0</NOSHOW><CHAIR>0</CHAIR>"
            "</BALLOT>"
        )

    def feed(self, *records: str, tourn: str | None = None) -> str:
        header = self.tourn() if tourn is None else tourn
        return f"<TOURNAMENTRESULTS>{header}{''.join(records)}</TOURNAMENTRESULTS>"


@pytest.fixture
def feeds() -> FeedBuilder:
    return FeedBuilder()


@pytest.fixture
def npdi_xml() -> str:
    return (FIXTURES / "npdi.xml").read_text(encoding="utf-8")
