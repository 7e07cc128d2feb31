from .background import DEFAULT_THRESHOLD_SQ, DEFAULT_WHITE_RADIUS, remove_background, whiteness_distance_sq
from .resample import resize_area_average

__all__ = [
    "DEFAULT_THRESHOLD_SQ",
    "DEFAULT_WHITE_RADIUS",
    "remove_background",
    "resize_area_average",
    "whiteness_distance_sq",
]
