"""
Configuration & Layout Constants
================================
This module serves as the central registry for the fixed layout constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (font floors, paddings, ring
   angles) scattered throughout the code.
2. Product decisions: The values below are part of the look of the timer,
   not runtime parameters. Change them here, not per call.

Exports:
    MIN_FONT_SIZE (int): Smallest font size label text is drawn with.
    DEFAULT_LABEL_OFFSET (float): Gap between the ring and the text baseline.
    ELAPSED_ARC / REMAINING_ARC (ArcSegment): Where each time label sits.
"""
from curvedtext.model.geometry_primitives import ArcSegment


# Legibility
MIN_FONT_SIZE: int = 12
DEFAULT_FONT_SIZE: float = 14.0

# Text placement
DEFAULT_LABEL_OFFSET: float = 10.0
CANVAS_PADDING: float = 10.0
PATH_ID_PREFIX: str = "curved-text-path"

# Ring presets (degrees, 0 = 3 o'clock, clockwise positive)
# Elapsed: 60 degrees centred on 9 o'clock, drawn counter-clockwise.
ELAPSED_ARC: ArcSegment = ArcSegment(start_angle=210.0, end_angle=150.0, label_offset=DEFAULT_LABEL_OFFSET)
# Remaining: 60 degrees centred on 3 o'clock, drawn clockwise.
REMAINING_ARC: ArcSegment = ArcSegment(start_angle=-30.0, end_angle=30.0, label_offset=DEFAULT_LABEL_OFFSET)

# Absolute tolerance for comparing computed positions
POSITION_TOLERANCE: float = 1e-3
