"""
Curved Text Layout
==================
Composes the geometry and legibility rules into everything a renderer needs
to draw one label along the progress ring: canvas size, ring center, font
size and the arc path the text follows.

The renderer is expected to place the path in its definitions under
`path_id`, draw the text along it anchored at the middle of the path, and
overlay the canvas on top of the ring (the canvas center is the ring center).
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, asdict, replace
from typing import Any, Optional

from curvedtext.config import (
    CANVAS_PADDING,
    DEFAULT_FONT_SIZE,
    DEFAULT_LABEL_OFFSET,
    ELAPSED_ARC,
    PATH_ID_PREFIX,
    REMAINING_ARC,
)
from curvedtext.model.geometry_primitives import ArcSegment, Point, Side, SweepDirection
from curvedtext.model.geometry_utils import generate_arc_path, get_arc_direction
from curvedtext.model.legibility import calculate_effective_radius, ensure_minimum_font_size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurvedTextLayout:
    """Render-ready placement of one curved label."""
    text: str
    side: Side
    font_size: float
    effective_radius: float
    canvas_size: float
    center: Point
    sweep: SweepDirection
    path_id: str
    arc_path: str

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["side"] = str(self.side)
        data["sweep"] = int(self.sweep)
        return data


@dataclass(frozen=True)
class CurvedTimeConfig:
    """Labels and font size for the elapsed/remaining time text."""
    elapsed_label: str = ""
    remaining_label: str = ""
    font_size: float = DEFAULT_FONT_SIZE

    def merged(self, **overrides: Any) -> CurvedTimeConfig:
        """Return a copy with every override that is not None applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


DEFAULT_CURVED_TIME_CONFIG = CurvedTimeConfig()


def _new_path_id(side: Side) -> str:
    return f"{PATH_ID_PREFIX}-{side}-{uuid.uuid4().hex[:9]}"


def _canvas_size_for(effective_radius: float, font_size: float) -> float:
    return (effective_radius + font_size + CANVAS_PADDING) * 2


def layout_curved_text(
    text: str,
    radius: float,
    start_angle: float,
    end_angle: float,
    font_size: float,
    side: Side | str,
    label_offset: float = DEFAULT_LABEL_OFFSET,
    container_size: Optional[float] = None,
) -> CurvedTextLayout:
    """
    Lay out `text` along the ring between `start_angle` and `end_angle`.

    Args:
        text: The label, e.g. "12:30".
        radius: Radius of the ring stroke.
        start_angle: Start of the arc in degrees.
        end_angle: End of the arc in degrees.
        font_size: Requested font size, raised to the legibility floor if needed.
        side: Ring side, decides the direction the text runs in.
        label_offset: Distance of the text baseline outside the ring.
        container_size: Diameter of the parent canvas. When missing (or 0)
            the canvas is sized to fit the text.

    Returns:
        The computed layout.
    """
    side = Side(side)
    safe_font_size = ensure_minimum_font_size(font_size)
    effective_radius = calculate_effective_radius(radius, label_offset)

    canvas_size = container_size or _canvas_size_for(effective_radius, safe_font_size)
    center = Point(canvas_size / 2, canvas_size / 2)

    sweep = get_arc_direction(side)
    arc_path = generate_arc_path(center, effective_radius, start_angle, end_angle, sweep)

    layout = CurvedTextLayout(
        text=text,
        side=side,
        font_size=safe_font_size,
        effective_radius=effective_radius,
        canvas_size=canvas_size,
        center=center,
        sweep=sweep,
        path_id=_new_path_id(side),
        arc_path=arc_path,
    )
    logger.debug(f"Laid out '{text}' on the {side} side: {arc_path}")
    return layout


def _label_text(label: str, time_text: str) -> str:
    return f"{label} {time_text}" if label else time_text


def layout_ring_time_text(
    elapsed_time: str,
    ring_radius: float,
    remaining_time: Optional[str] = None,
    config: Optional[CurvedTimeConfig] = None,
    container_size: Optional[float] = None,
) -> dict[Side, CurvedTextLayout]:
    """
    Lay out the elapsed (left) and, if given, remaining (right) time labels.

    Both labels share one canvas so they can be overlaid on the same ring.
    """
    config = config or DEFAULT_CURVED_TIME_CONFIG

    segments: dict[Side, tuple[str, ArcSegment]] = {
        Side.LEFT: (_label_text(config.elapsed_label, elapsed_time), ELAPSED_ARC),
    }
    if remaining_time is not None:
        segments[Side.RIGHT] = (_label_text(config.remaining_label, remaining_time), REMAINING_ARC)

    if not container_size:
        font_size = ensure_minimum_font_size(config.font_size)
        container_size = max(
            _canvas_size_for(calculate_effective_radius(ring_radius, segment.label_offset), font_size)
            for _, segment in segments.values()
        )

    layouts = {
        side: layout_curved_text(
            text=text,
            radius=ring_radius,
            start_angle=segment.start_angle,
            end_angle=segment.end_angle,
            font_size=config.font_size,
            side=side,
            label_offset=segment.label_offset,
            container_size=container_size,
        )
        for side, (text, segment) in segments.items()
    }
    logger.debug(f"Ring time text laid out for {len(layouts)} side(s) on a {container_size} canvas.")
    return layouts
