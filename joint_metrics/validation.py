import math
from collections.abc import Mapping
from typing import Any, Iterable, Optional, Tuple

from geometry import Point2D
from pose_types import Landmark2D, LandmarkFrame


def _number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _field(lm: Any, name: str) -> Any:
    if isinstance(lm, Mapping):
        return lm.get(name)
    return getattr(lm, name, None)


def _to_landmark(lm: Any, min_visibility: Optional[float] = None) -> Optional[Landmark2D]:
    if lm is None:
        return None
    x = _number(_field(lm, "x"))
    y = _number(_field(lm, "y"))
    if x is None or y is None:
        return None
    if not (0.0 <= x <= 1.0 and 0.0 <= y <= 1.0):
        return None
    visibility = _number(_field(lm, "visibility"))
    if min_visibility is not None and visibility is not None and visibility < min_visibility:
        return None
    return Landmark2D(x, y, _number(_field(lm, "z")), visibility)


def _indexed(raw: Any) -> Iterable[Tuple[int, Any]]:
    if isinstance(raw, Mapping):
        return raw.items()
    return enumerate(raw)


def validate_landmark(frame: Any, index: int) -> Optional[Point2D]:
    """Return (x, y) for a landmark inside the unit image square, else None."""
    if frame is None:
        return None
    try:
        lm = frame[index]
    except (IndexError, KeyError, TypeError):
        return None
    checked = _to_landmark(lm)
    if checked is None:
        return None
    return checked.x, checked.y


def validate_frame(raw: Any, min_visibility: Optional[float] = None) -> Optional[LandmarkFrame]:
    """
    Normalize a raw detection into a LandmarkFrame of valid landmarks only.

    ``raw`` may be a sequence ordered by canonical index (as MediaPipe returns
    it) or a mapping of index -> landmark; landmarks may be Landmark2D, any
    object with x/y attributes, or dicts. None or an empty container means
    nothing was detected and yields None.
    """
    if raw is None:
        return None
    try:
        items = list(_indexed(raw))
    except TypeError:
        return None
    if not items:
        return None

    frame: LandmarkFrame = {}
    for index, lm in items:
        if isinstance(index, bool) or not isinstance(index, int):
            continue
        checked = _to_landmark(lm, min_visibility)
        if checked is not None:
            frame[index] = checked
    return frame


def point(frame: LandmarkFrame, index: int) -> Optional[Point2D]:
    lm = frame.get(index)
    if lm is None:
        return None
    return lm.x, lm.y
