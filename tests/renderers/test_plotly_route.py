"""Tests for the plotly route figure."""

import plotly.graph_objects as go
import pytest

from flight_progress.config import ChartConfig
from flight_progress.renderers import create_progress_figure
from flight_progress.services import FlightProgressService, compute_map_region


@pytest.fixture
def snapshot(scheduled_window, waw, bcn, midflight):
    return FlightProgressService().compute(scheduled_window, waw, bcn, midflight)


class TestCreateProgressFigure:
    """Tests for create_progress_figure()."""

    def test_traces(self, snapshot):
        fig = create_progress_figure(snapshot)

        assert isinstance(fig, go.Figure)
        assert [trace.name for trace in fig.data] == [
            "Remaining",
            "Traveled",
            "Airports",
            "In Air",
        ]
        assert len(fig.data[1].lat) == len(snapshot.traveled_path)
        assert len(fig.data[0].lat) == len(snapshot.remaining_path)
        assert fig.data[3].text == "In Air: 50%"

    def test_remaining_is_dashed(self, snapshot):
        fig = create_progress_figure(snapshot, config=ChartConfig(remaining_dash="dot"))
        assert fig.data[0].line.dash == "dot"

    def test_region_sets_axis_ranges(self, snapshot, waw, bcn):
        region = compute_map_region(waw, bcn)
        fig = create_progress_figure(snapshot, region=region, title="LO445")

        assert tuple(fig.layout.geo.lataxis.range) == pytest.approx(region.lat_range)
        assert fig.layout.title.text == "LO445"

    def test_fitbounds_without_region(self, snapshot):
        fig = create_progress_figure(snapshot)
        assert fig.layout.geo.fitbounds == "locations"

    def test_marker_rotated_to_heading(self, snapshot):
        fig = create_progress_figure(snapshot)
        assert fig.data[3].marker.angle == pytest.approx(snapshot.heading_degrees)
