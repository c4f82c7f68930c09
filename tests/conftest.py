"""
Shared fixtures for merge tests.
Creates isolated temporary export and destination trees with controlled files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'gphotosort' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def takeout(temp_dir) -> Dict[str, Path]:
    """
    Creates a small Takeout export and an empty destination library:
    - dated photo and video (date in file name)
    - undated photo inside a dated album folder
    - undated photo inside an undated album (must be skipped)
    - JSON sidecar (noise)
    - photo inside a Hangout chat export (must never be visited)
    """
    source = temp_dir / "Takeout"
    photos = source / "Google Photos"
    dest = temp_dir / "Google Drive" / "Google Photos"
    dest.mkdir(parents=True)

    files = {"source": source, "dest": dest}

    album = photos / "Photos from 2013"
    album.mkdir(parents=True)
    files["dated_img"] = album / "IMG_2013_04_02_0001.jpg"
    files["dated_img"].write_bytes(b"image 2013-04")
    files["dated_vid"] = album / "VID_20140502_101010.mp4"
    files["dated_vid"].write_bytes(b"video 2014-05")
    files["sidecar"] = album / "IMG_2013_04_02_0001.jpg.json"
    files["sidecar"].write_text('{"photoTakenTime": {"timestamp": "0"}}')

    dated_album = photos / "2013-03-16 #2"
    dated_album.mkdir()
    files["album_img"] = dated_album / "IMG_0003-edited(1).jpg"
    files["album_img"].write_bytes(b"album image")

    undated_album = photos / "Holidays"
    undated_album.mkdir()
    files["undated_img"] = undated_album / "beach.jpg"
    files["undated_img"].write_bytes(b"no date anywhere")

    hangout = photos / "Hangout_ John Doe"
    hangout.mkdir()
    files["hangout_img"] = hangout / "IMG_2015_01_01_0001.jpg"
    files["hangout_img"].write_bytes(b"chat image")

    return files
