"""Simple Event Bus / Observer implementation for inventory alerts.

Event names used so far:
  inventory.low_stock -> payload {"ingredient": Ingredient, "remaining": int, "threshold": int}
  inventory.depleted -> payload {"item": str}
  inventory.category_cleared -> payload {"category": str, "removed": [dict, ...]}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
INVENTORY_LOW_STOCK = "inventory.low_stock"
INVENTORY_DEPLETED = "inventory.depleted"
INVENTORY_CATEGORY_CLEARED = "inventory.category_cleared"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:  # listener errors are logged, never raised
				logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def publish(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'publish',
	'INVENTORY_LOW_STOCK', 'INVENTORY_DEPLETED', 'INVENTORY_CATEGORY_CLEARED'
]
