"""
curvedtext: curved-arc text layout for circular progress rings.

Positions elapsed/remaining time labels along the ring of a countdown timer:
polar to cartesian mapping, arc path generation per ring side, a font size
legibility floor and the radial offset that keeps text clear of the stroke.
"""
from curvedtext.model.geometry_primitives import ArcPath, ArcSegment, Point, Side, SweepDirection
from curvedtext.model.geometry_utils import (
    arc_points,
    arc_sweep_angle,
    build_arc_path,
    deg2rad,
    generate_arc_path,
    get_arc_direction,
    polar_to_cartesian,
)
from curvedtext.model.legibility import calculate_effective_radius, ensure_minimum_font_size
from curvedtext.model.layout import (
    CurvedTextLayout,
    CurvedTimeConfig,
    layout_curved_text,
    layout_ring_time_text,
)
from curvedtext.utils import format_time

__version__ = "0.1.0"

__all__ = [
    "ArcPath",
    "ArcSegment",
    "CurvedTextLayout",
    "CurvedTimeConfig",
    "Point",
    "Side",
    "SweepDirection",
    "arc_points",
    "arc_sweep_angle",
    "build_arc_path",
    "calculate_effective_radius",
    "deg2rad",
    "ensure_minimum_font_size",
    "format_time",
    "generate_arc_path",
    "get_arc_direction",
    "layout_curved_text",
    "layout_ring_time_text",
    "polar_to_cartesian",
]
