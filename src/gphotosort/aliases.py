from gphotosort.core.models import HashAlgorithmName

HASH_ALIASES = {
    "xxhash": HashAlgorithmName.XXHASH,
    "xxh64": HashAlgorithmName.XXHASH,
    "md5": HashAlgorithmName.MD5,
}

HASH_CHOICES = list(HASH_ALIASES.keys())

HASH_HELP_TEXT = (
    "Content hash used to detect duplicates:\n"
    "  xxhash : " + HashAlgorithmName.XXHASH.description + "\n"
    "  md5    : " + HashAlgorithmName.MD5.description + "\n"
    "Default: xxhash\n"
)

EPILOG_TEXT = """
Examples:
  Preview what would happen, without touching anything
  %(prog)s ~/Downloads/Takeout ~/GoogleDrive/"Google Photos" --dry-run

  Merge for real: move new photos into <year>/<month>, delete exact duplicates
  %(prog)s ~/Downloads/Takeout ~/GoogleDrive/"Google Photos"

  Send duplicates to the system trash instead of deleting them
  %(prog)s ~/Downloads/Takeout ~/GoogleDrive/"Google Photos" --trash

  Refuse buckets with impossible months (e.g. an album named 2020-14-17)
  %(prog)s ~/Downloads/Takeout ~/GoogleDrive/"Google Photos" --strict-months
"""
