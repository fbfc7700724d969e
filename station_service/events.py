from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)


def log_event(action: str, resource_id: Any | None, extra: dict | None = None, resource: str = "station") -> None:
    """
    Emit one structured JSON line per station mutation on the ``station_service.events`` logger.
    Fields: ts, action, resource, resource_id, extra.
    Controlled by EVENT_LOG_ENABLED env (defaults to enabled).
    """
    if os.getenv("EVENT_LOG_ENABLED", "1") != "1":
        return
    evt = {
        "ts": datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z",
        "action": action,
        "resource": resource,
        "resource_id": resource_id,
        "extra": extra or {},
    }
    try:
        line = json.dumps({"event": evt}, separators=(",", ":"))
    except (TypeError, ValueError):
        logger.warning("Unserializable event for %s %s", action, resource_id)
        return
    logger.info(line)
