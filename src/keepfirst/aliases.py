from keepfirst.core.models import KeyScheme

KEY_SCHEME_ALIASES = {
    "prefix": KeyScheme.PREFIX,
    "raw": KeyScheme.PREFIX,
    "xxhash": KeyScheme.XXHASH,
}

KEY_SCHEME_CHOICES = list(KEY_SCHEME_ALIASES.keys())

KEY_SCHEME_HELP_TEXT = (
    "How files are grouped before full comparison:\n"
    "  prefix     : First N bytes as a native-endian integer (default)\n"
    "  xxhash     : xxHash64 of the first N bytes\n"
    "Example    : %(prog)s ~/Downloads --key-scheme xxhash --key-width 4096\n"
)

EPILOG_TEXT = """
Examples:
  Remove exact duplicates from Downloads, keeping the first file of each content
  %(prog)s ~/Downloads

  Show what would be removed without touching anything
  %(prog)s ~/Downloads --dry-run

  Move duplicates to the system trash instead of deleting them
  %(prog)s ~/Downloads --trash

  Files are compared in name order; only regular files directly inside the
  directory are considered. Files shorter than the key width are never touched.
"""
