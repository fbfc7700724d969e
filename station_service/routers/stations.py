from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from prometheus_client import Counter
from sqlalchemy.orm import Session

from ..db import get_session
from ..events import log_event
from ..models import Station
from ..schemas import StationCreate, StationEnvelope, StationList, StationOut, StationUpdate
from ..store import InvalidIdentifier, StationStore

router = APIRouter(prefix="/stations", tags=["stations"])

STATION_OPS = Counter(
    "station_operations_total",
    "Station API operations by outcome",
    ["operation", "outcome"],
)


def get_store(db: Session = Depends(get_session)) -> StationStore:
    return StationStore(db)


def _not_found(operation: str) -> HTTPException:
    STATION_OPS.labels(operation=operation, outcome="not_found").inc()
    return HTTPException(status_code=404, detail="Not found")


def _ok(operation: str) -> None:
    STATION_OPS.labels(operation=operation, outcome="ok").inc()


@router.post("", response_model=StationOut)
def create_station(payload: StationCreate, store: StationStore = Depends(get_store)):
    obj = store.insert_one(payload.model_dump())
    _ok("create")
    log_event("create", obj.id, {"name": obj.name})
    return obj


@router.get("", response_model=StationList)
def list_stations(store: StationStore = Depends(get_store)):
    stations = store.find_all()
    _ok("list")
    return {"stations": stations}


@router.get("/{station_id}", response_model=StationOut)
def get_station(station_id: str, store: StationStore = Depends(get_store)):
    # Malformed and unknown ids are both reported as 404
    try:
        obj = store.find_by_id(station_id)
    except InvalidIdentifier:
        raise _not_found("get")
    if obj is None:
        raise _not_found("get")
    _ok("get")
    return obj


@router.delete("/{station_id}", response_model=StationEnvelope)
def delete_station(station_id: str, store: StationStore = Depends(get_store)):
    try:
        obj: Station | None = store.delete_by_id(station_id)
    except InvalidIdentifier:
        raise _not_found("delete")
    if obj is None:
        raise _not_found("delete")
    _ok("delete")
    log_event("delete", obj.id, {"name": obj.name})
    return {"station": obj}


@router.patch("/{station_id}", response_model=StationOut)
def update_station(station_id: str, payload: StationUpdate | None = None, store: StationStore = Depends(get_store)):
    # A missing body is an empty partial update
    changes = payload.changes() if payload is not None else {}
    try:
        obj = store.update_by_id(station_id, changes)
    except InvalidIdentifier:
        raise _not_found("update")
    if obj is None:
        raise _not_found("update")
    _ok("update")
    log_event("update", obj.id, {"fields": sorted(changes)})
    return obj
