"""
Station record store.

A thin document-collection facade over a SQLAlchemy session. Records are keyed
by 24-char hex object ids generated here (4-byte seconds timestamp, 5-byte
process-random value, 3-byte counter), so ids are never reused after deletion.
Every lookup by id validates the token first and raises ``InvalidIdentifier``
for anything that could not have been issued by ``new_object_id``.
"""
from __future__ import annotations

import itertools
import logging
import os
import re
import time
from typing import Any, Optional

from sqlalchemy.orm import Session

from .models import Station

logger = logging.getLogger(__name__)

_OBJECT_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")
_PROCESS_RANDOM = os.urandom(5)
_counter = itertools.count(int.from_bytes(os.urandom(3), "big"))

STATION_FIELDS = ("name", "freq", "actual")


class InvalidIdentifier(ValueError):
    """Raised when an id string is not a well-formed object id."""

    def __init__(self, value: Any):
        super().__init__(f"Invalid station id: {value!r}")
        self.value = value


def new_object_id() -> str:
    ts = int(time.time()) & 0xFFFFFFFF
    count = next(_counter) & 0xFFFFFF
    raw = ts.to_bytes(4, "big") + _PROCESS_RANDOM + count.to_bytes(3, "big")
    return raw.hex()


def is_valid_id(value: Any) -> bool:
    return isinstance(value, str) and bool(_OBJECT_ID_RE.match(value))


def _normalize_id(value: Any) -> str:
    if not is_valid_id(value):
        raise InvalidIdentifier(value)
    return value.lower()


class StationStore:
    def __init__(self, db: Session):
        self.db = db

    def insert_one(self, fields: dict[str, Any]) -> Station:
        obj = Station(id=new_object_id(), **{k: v for k, v in fields.items() if k in STATION_FIELDS})
        if obj.actual is None:
            obj.actual = False
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        logger.debug("Inserted station %s", obj.id)
        return obj

    def find_all(self) -> list[Station]:
        return self.db.query(Station).all()

    def find_by_id(self, station_id: str) -> Optional[Station]:
        return self.db.get(Station, _normalize_id(station_id))

    def update_by_id(self, station_id: str, fields: dict[str, Any]) -> Optional[Station]:
        obj = self.find_by_id(station_id)
        if obj is None:
            return None
        for key, value in fields.items():
            if key in STATION_FIELDS:
                setattr(obj, key, value)
        self.db.commit()
        self.db.refresh(obj)
        logger.debug("Updated station %s fields=%s", obj.id, sorted(fields))
        return obj

    def delete_by_id(self, station_id: str) -> Optional[Station]:
        obj = self.find_by_id(station_id)
        if obj is None:
            return None
        # Detached copy; the session expires the deleted instance on commit
        removed = Station(id=obj.id, name=obj.name, freq=obj.freq, actual=obj.actual)
        self.db.delete(obj)
        self.db.commit()
        logger.debug("Deleted station %s", removed.id)
        return removed
