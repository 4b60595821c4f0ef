# collision.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float


def overlaps(a: Rect, b: Rect, pad: float = 0) -> bool:
    """
    Axis-aligned overlap test. Touching edges count as overlapping.
    `pad` grows both rectangles by that amount on every side, so a positive
    pad makes near misses count as hits.
    """
    return not (
        a.x + a.w + pad < b.x - pad
        or a.x - pad > b.x + b.w + pad
        or a.y + a.h + pad < b.y - pad
        or a.y - pad > b.y + b.h + pad
    )
