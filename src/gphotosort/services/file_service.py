"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
Physical file operations used when a merge decision is committed:
creating bucket directories, moving files into place and removing duplicates
(permanently or via the system trash).
"""
import errno
import os
import shutil
import tempfile
from pathlib import Path
from typing import Union

from send2trash import send2trash


class FileService:
    """
    Thin wrappers around filesystem mutations.
    All failures surface as OSError.
    """

    @staticmethod
    def ensure_directory(path: Union[str, Path]) -> None:
        """Creates path and its parents; an existing directory is not an error."""
        Path(path).mkdir(parents=True, exist_ok=True)

    @staticmethod
    def move_file(source: Union[str, Path], target: Union[str, Path]) -> None:
        """
        Moves source to target. A plain rename when both live on the same volume.
        Across volumes the bytes are copied to a temporary file next to target and
        renamed into place, so a failed copy never leaves a partial file at target.
        """
        try:
            os.rename(source, target)
            return
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise

        target = Path(target)
        fd, tmp_name = tempfile.mkstemp(dir=str(target.parent), prefix=f".{target.name}.", suffix=".part")
        try:
            with os.fdopen(fd, "wb") as dst, open(source, "rb") as src:
                shutil.copyfileobj(src, dst)
            shutil.copystat(str(source), tmp_name)
            os.replace(tmp_name, target)
        except BaseException:
            try:
                os.remove(tmp_name)
            except FileNotFoundError:
                pass
            raise
        os.remove(source)

    @staticmethod
    def remove_file(file_path: Union[str, Path], use_trash: bool = False) -> None:
        """Deletes a file, or moves it to the system trash when use_trash is set."""
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        if not use_trash:
            os.remove(path)
            return

        try:
            send2trash(str(path.resolve()))
        except OSError:
            raise
        except Exception as e:
            raise OSError(f"Failed to move to trash: {e}") from e
