"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/dates.py
Derives the (year, month) bucket for a file from its name or its folder.

Recognised layouts:
  * IMG_<year>_<month>_<day>*.jpg
  * VID_<year>_<month>_<day>*.mp4
  * MVIMG_<year><month><day>*.jpg
  * <year>-<month>-<day>*.<ext>
  * 2013-03-16 #2/IMG_0003-edited(1).jpg   (date only in the album folder)

Year and month are returned exactly as captured; "2020-14-17" yields month "14".
"""

import re
from typing import Optional

from gphotosort.core.models import DateBucket

# Group 1 is the device prefix, groups 2 and 3 are year and month, group 4 the day.
YEAR_DATE_RE = re.compile(r"^((?i:IMG_|VID_|MVIMG_))?(\d{4})[-_]?(\d{2})[-_]?(\d{2}).*$", re.ASCII)


def match_bucket(text: str, strict_months: bool = False) -> Optional[DateBucket]:
    """Applies the date pattern to a single string."""
    match = YEAR_DATE_RE.match(text)
    if not match:
        return None
    year, month = match.group(2), match.group(3)
    if strict_months and not 1 <= int(month) <= 12:
        return None
    return DateBucket(year, month)


def extract_bucket(containing_dir_name: str, file_stem: str,
                   strict_months: bool = False) -> Optional[DateBucket]:
    """
    Returns the bucket for a file, trying the file stem first and the containing
    folder name second. None means the file cannot be placed and must be skipped.

    With strict_months, a candidate whose month falls outside 01-12 is treated
    as a non-match, so the folder name still gets its chance.
    """
    bucket = match_bucket(file_stem, strict_months)
    if bucket is None:
        bucket = match_bucket(containing_dir_name, strict_months)
    return bucket
