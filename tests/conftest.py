# Shared fixtures. Forces headless backends before matplotlib / Qt are imported
# by any test module.

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from barchart.charting.types import ChartConfig, Margins
from barchart.design.scheduler import ManualScheduler
from barchart.testing import RecordingCanvas


@pytest.fixture
def rows():
    return [
        {"cat": "A", "val": 10},
        {"cat": "B", "val": 20},
        {"cat": "C", "val": 5},
    ]


@pytest.fixture
def config():
    return ChartConfig(
        x_field="cat",
        y_field="val",
        width=400,
        height=400,
        margins=Margins(top=60, right=60, bottom=60, left=60),
    )


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def scheduler():
    return ManualScheduler()
