"""Legibility rules for text drawn around the ring."""
from curvedtext.config import MIN_FONT_SIZE


def ensure_minimum_font_size(font_size: float) -> float:
    """Clamp the font size to the legibility floor."""
    return max(font_size, MIN_FONT_SIZE)


def calculate_effective_radius(radius: float, label_offset: float) -> float:
    """Radius of the text baseline, pushed outward so it clears the ring stroke."""
    return radius + label_offset
