import unittest

from mealpal.events import web_observers
from mealpal.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS, INVENTORY_DEPLETED, INVENTORY_LOW_STOCK
from mealpal.logic.inventory.service import InventoryService


class TestEventBus(unittest.TestCase):

    def test_subscribe_publish_unsubscribe(self):
        bus = EventBus()
        seen = []
        cb = lambda name, payload: seen.append((name, payload))
        bus.subscribe("x", cb)
        bus.subscribe("x", cb)
        bus.publish("x", 1)
        bus.unsubscribe("x", cb)
        bus.publish("x", 2)
        self.assertEqual(seen, [("x", 1)])

    def test_failing_listener_does_not_stop_others(self):
        bus = EventBus()
        seen = []

        def broken(name, payload):
            raise RuntimeError("boom")

        bus.subscribe("x", broken)
        bus.subscribe("x", lambda name, payload: seen.append(payload))
        with self.assertLogs("mealpal.events.Event_Bus", level="ERROR"):
            bus.publish("x", "ok")
        self.assertEqual(seen, ["ok"])


def test_web_observers_record_inventory_events():
    web_observers.start()
    web_observers.start()
    cursor = web_observers.get_events()["next_cursor"]

    service = InventoryService()
    service.add_item("milk", 600, "ml")
    service.remove_item("milk", 200)
    service.remove_item("milk", 400)

    events = web_observers.get_events(cursor)["events"]
    assert [e["type"] for e in events] == [INVENTORY_LOW_STOCK, INVENTORY_DEPLETED]
    assert events[0]["item"] == "milk"
    assert events[0]["remaining"] == 400
    assert events[1]["item"] == "milk"
    assert GLOBAL_EVENT_BUS._subscribers[INVENTORY_LOW_STOCK].count(web_observers._record) == 1
