import pytest
from smithchart.core.chart import compose_chart
from smithchart.core.options import ChartOptions
from smithchart.render.recording import RecordingSink

@pytest.fixture
def sink():
    return RecordingSink()

@pytest.fixture
def impedance_options():
    # impedance grid and outer rings only
    return ChartOptions(show_rx=True, show_gb=False, draw_ring=True)

@pytest.fixture
def impedance_chart(impedance_options):
    sink = RecordingSink()
    frame = compose_chart(sink, 0.0, 0.0, 100.0, impedance_options)
    return sink, frame

@pytest.fixture
def dummy_logger(caplog):
    caplog.set_level("DEBUG")
    return caplog
