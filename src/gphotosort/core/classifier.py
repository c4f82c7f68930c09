"""
core/classifier.py
Separates real photos and videos from the metadata noise in an export
(JSON sidecars, HTML indexes, archives).
"""

from pathlib import Path
from typing import Union

IMAGE_EXTENSIONS = frozenset({
    "jpg", "jpeg", "png", "gif", "heic", "webp", "bmp", "tif", "tiff",
})
VIDEO_EXTENSIONS = frozenset({
    "mp4", "mov", "m4v", "3gp", "avi", "mkv",
})
MEDIA_EXTENSIONS = IMAGE_EXTENSIONS | VIDEO_EXTENSIONS


def is_of_interest(path: Union[str, Path]) -> bool:
    """True if the path has a media extension (case-insensitive)."""
    ext = Path(path).suffix
    if not ext:
        return False
    return ext[1:].lower() in MEDIA_EXTENSIONS
