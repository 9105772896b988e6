"""
Route progress visualization component.

Turns an immutable FlightProgressSnapshot into a Plotly figure: a solid
stroke for the traveled part, a dashed stroke for the remaining part
and a marker at the aircraft's current position, rotated to its heading.
"""

from typing import Optional, Sequence

import plotly.graph_objects as go

from flight_progress.config import ChartConfig
from flight_progress.schemas.flight import FlightProgressSnapshot
from flight_progress.schemas.geo import GeoCoordinate, MapRegion


def _lats(points: Sequence[GeoCoordinate]) -> list:
    return [p.latitude for p in points]


def _lngs(points: Sequence[GeoCoordinate]) -> list:
    return [p.longitude for p in points]


def create_progress_figure(
    snapshot: FlightProgressSnapshot,
    region: Optional[MapRegion] = None,
    config: Optional[ChartConfig] = None,
    title: Optional[str] = None,
) -> go.Figure:
    """
    Create a map figure showing a flight's progress along its route.

    Args:
        snapshot: Computed progress snapshot.
        region: Map framing; Plotly auto-fits the traces if None.
        config: Chart styling; ChartConfig() if None.
        title: Optional figure title.

    Returns:
        Plotly Figure with traveled, remaining, airport and aircraft traces.
    """
    config = config or ChartConfig()
    departure = snapshot.traveled_path[0]
    arrival = snapshot.remaining_path[-1]

    fig = go.Figure()

    # Remaining path first so the traveled stroke draws on top
    fig.add_trace(
        go.Scattergeo(
            lat=_lats(snapshot.remaining_path),
            lon=_lngs(snapshot.remaining_path),
            mode="lines",
            line=dict(
                width=config.remaining_width,
                color=config.remaining_color,
                dash=config.remaining_dash,
            ),
            opacity=config.remaining_opacity,
            name="Remaining",
            hoverinfo="none",
        )
    )

    fig.add_trace(
        go.Scattergeo(
            lat=_lats(snapshot.traveled_path),
            lon=_lngs(snapshot.traveled_path),
            mode="lines",
            line=dict(width=config.traveled_width, color=config.traveled_color),
            name="Traveled",
            hoverinfo="none",
        )
    )

    fig.add_trace(
        go.Scattergeo(
            lat=[departure.latitude, arrival.latitude],
            lon=[departure.longitude, arrival.longitude],
            mode="markers",
            marker=dict(
                size=config.airport_marker_size,
                color=config.airport_marker_color,
                symbol="circle",
            ),
            name="Airports",
            hoverinfo="skip",
        )
    )

    fig.add_trace(
        go.Scattergeo(
            lat=[snapshot.current_position.latitude],
            lon=[snapshot.current_position.longitude],
            mode="markers",
            marker=dict(
                size=config.aircraft_marker_size,
                color=config.aircraft_marker_color,
                symbol="triangle-up",
                angle=snapshot.heading_degrees,
            ),
            name=snapshot.status_text,
            text=f"{snapshot.status_text}: {snapshot.fraction:.0%}",
            hoverinfo="text",
        )
    )

    geo = dict(
        projection_type=config.map_projection,
        showland=True,
        landcolor=config.land_color,
        countrycolor=config.country_border_color,
    )
    if region is not None:
        geo["lataxis"] = dict(range=list(region.lat_range))
        geo["lonaxis"] = dict(range=list(region.lng_range))
    else:
        geo["fitbounds"] = "locations"

    fig.update_layout(
        geo=geo,
        title=title,
        margin={"r": 0, "t": 40 if title else 0, "l": 0, "b": 0},
        height=config.height,
        showlegend=False,
    )

    return fig
