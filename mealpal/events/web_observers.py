"""Web-facing observers for inventory events.

This module subscribes to the GLOBAL_EVENT_BUS for:
  - inventory.low_stock
  - inventory.depleted
  - inventory.category_cleared

and stores a lightweight in-memory ring buffer of recent events that the
API exposes at /api/inventory/alerts.

Design:
  * Each event stored with an auto-increment integer id (cursor) so clients
    can request only newer events (since=<last_id_seen>).
  * A Lock guards the buffer; uvicorn workers in one process share it, and
    separate processes each keep their own buffer.
  * MAX_EVENTS caps memory use.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import (
    GLOBAL_EVENT_BUS, INVENTORY_LOW_STOCK, INVENTORY_DEPLETED, INVENTORY_CATEGORY_CLEARED
)

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300  # keep a few hundred recent events
_started = False


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }
        # Normalize payload fields we care about for UI
        if isinstance(payload, dict):
            ing = payload.get('ingredient')
            if ing is not None and hasattr(ing, 'item'):
                evt['item'] = ing.item
                evt['unit'] = ing.unit
                evt['quantity'] = ing.quantity
            for k in ('item', 'remaining', 'threshold', 'category'):
                if k in payload and k not in evt:
                    evt[k] = payload[k]
            if 'removed' in payload:
                evt['removed_count'] = len(payload['removed'])
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in (INVENTORY_LOW_STOCK, INVENTORY_DEPLETED, INVENTORY_CATEGORY_CLEARED):
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True
    logger.info("Web observers for inventory events started")


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the buffered events.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events']
