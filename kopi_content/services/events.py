"""Events repository.

Event dates are free text entered by editors ("Saturday, August 17, 2024").
Listing orders them soonest first on a best-effort parse; dates that match no
known format keep their store order after the parsed ones.
"""

from __future__ import annotations

from datetime import datetime, timezone

from kopi_content.schemas import Event, EventCreate, EventUpdate
from kopi_content.services import collections
from kopi_content.services.content import ContentRepository, parse_iso_timestamp, sort_by_timestamp

_DATE_FORMATS = (
    "%A, %B %d, %Y",  # Saturday, August 17, 2024
    "%B %d, %Y",  # August 17, 2024
    "%d %B %Y",  # 17 August 2024
    "%Y-%m-%d",
)


def parse_event_date(value: str) -> float | None:
    text = value.strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).replace(tzinfo=timezone.utc).timestamp()
        except ValueError:
            continue
    return parse_iso_timestamp(text)


class EventRepository(ContentRepository[Event]):
    collection = collections.EVENTS
    entity = Event
    patch = EventUpdate
    ordered = True

    def _sort(self, items: list[Event]) -> list[Event]:
        return sort_by_timestamp(items, lambda event: parse_event_date(event.date), descending=False)

    async def add(self, data: EventCreate) -> Event:
        return await self._add_document(data.to_document())
