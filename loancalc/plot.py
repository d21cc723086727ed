from __future__ import annotations

from typing import List, Optional

from loancalc.geometry import AffineTransform, Line, PolyLine


def graph_segments(
    curve: PolyLine,
    width: float,
    height: float,
    xmax: Optional[float] = None,
    ymax: Optional[float] = None,
) -> List[Line]:
    """Device-space segments to stroke for a model-space ``curve``.

    ``xmax``/``ymax`` default to the curve's own maxima so the curve fills the
    canvas.
    """

    xmax = curve.max_x() if xmax is None else xmax
    ymax = curve.max_y() if ymax is None else ymax
    transform = AffineTransform.for_viewport(xmax, ymax, width, height)
    return [transform.apply_line(seg) for seg in curve.segments()]


def axes_segments(width: float, height: float) -> List[Line]:
    """The x axis along the bottom edge and the y axis along the left edge."""

    origin = AffineTransform.for_viewport(1.0, 1.0, width, height)
    corner = PolyLine.from_pairs([(0.0, 1.0), (0.0, 0.0), (1.0, 0.0)])
    return origin.apply_polyline(corner).segments()
