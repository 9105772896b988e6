"""
Renderers turning progress snapshots into figures.
"""

from flight_progress.renderers.plotly_route import create_progress_figure

__all__ = ["create_progress_figure"]
