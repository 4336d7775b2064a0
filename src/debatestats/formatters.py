from __future__ import annotations

from .models import Event, Tournament


def format_tournament(tournament: Tournament) -> str:
    lines = [
        tournament.name,
        f"Dates: {tournament.start_date:%b %d, %Y} - {tournament.end_date:%b %d, %Y}",
        f"Events: {len(tournament.events)} | Entries: {tournament.entry_count}",
    ]
    if not tournament.events:
        lines.append("No events published for this tournament.")
        return "\n".join(lines)

    for event in sorted(tournament.events, key=lambda e: e.name.lower()):
        lines.append("")
        lines.extend(format_event(event))
    return "\n".join(lines)


def format_event(event: Event) -> list[str]:
    out = [f"{event.name} ({event.abbr}) [{event.kind_label}] - {len(event.entries)} entries"]
    for entry in sorted(event.entries, key=lambda x: x.code):
        out.append(f"- {entry.code}: {entry.full_name}")
    return out
