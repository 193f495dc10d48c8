import logging

import pytest

from barchart.charting.coordinator import BarChart
from barchart.services.event_bus import ChartEvent, EventBus
from barchart.services.logging_service import LoggingService


@pytest.fixture
def capture():
    bus = EventBus()
    svc = LoggingService(capacity=5, event_bus=bus)
    svc.attach()
    yield svc, bus
    svc.detach()


def test_capture_barchart_records(capture):
    svc, _ = capture
    logging.getLogger("barchart.test").info("Hello %s", "chart")
    logging.getLogger("elsewhere").warning("not captured")
    messages = [e.message for e in svc.recent()]
    assert "Hello chart" in messages
    assert "not captured" not in messages


def test_capacity_eviction(capture):
    svc, _ = capture
    for i in range(10):
        logging.getLogger("barchart.cap").info("M%d", i)
    recents = svc.recent()
    assert len(recents) == 5
    assert recents[0].message == "M5"
    assert [e.message for e in svc.recent(limit=2)] == ["M8", "M9"]


def test_filtering(capture):
    svc, _ = capture
    logging.getLogger("barchart.charting.bars").debug("rise")
    logging.getLogger("barchart.charting.coordinator").warning("rejected")
    assert [e.message for e in svc.filter(level="WARNING")] == ["rejected"]
    assert [e.message for e in svc.filter(name_contains="bars")] == ["rise"]
    svc.clear()
    assert svc.recent() == []


def test_event_emission(capture):
    svc, bus = capture
    payloads = []
    bus.subscribe(ChartEvent.LOG_RECORD_ADDED, lambda evt: payloads.append(evt.payload))
    logging.getLogger("barchart.evt").warning("Something happened")
    assert payloads[-1]["level"] == "WARNING"
    assert payloads[-1]["message"] == "Something happened"


def test_render_diagnostics_captured(capture, canvas, scheduler, config, rows):
    svc, _ = capture
    BarChart(canvas, scheduler=scheduler).render(config, rows)
    names = {e.name for e in svc.recent()}
    assert "barchart.charting.coordinator" in names


def test_detach_restores_level():
    logger = logging.getLogger("barchart")
    before = logger.level
    svc = LoggingService()
    svc.attach()
    svc.attach()
    assert svc.attached
    svc.detach()
    assert logger.level == before
    assert not svc.attached
