"""
keepfirst — removes exact duplicate files from a single directory.

Core features:
- Files are grouped by a key read from their first bytes, then compared byte for byte
- The first file seen with a given content always survives
- Permanent deletion, move to system trash (via send2trash) or dry run
- CLI interface for headless/server usage
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("keepfirst")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from keepfirst.commands import DeduplicationCommand
from keepfirst.core import (
    DeduplicationParams, DeduplicationEngine, DeletionMode, KeyScheme, ScanCounters,
    ProgressReporter,
)
from keepfirst.utils.convert_utils import ConvertUtils
from keepfirst.services.file_service import FileService

__all__ = [
    "DeduplicationCommand",
    "DeduplicationParams",
    "DeduplicationEngine",
    "DeletionMode",
    "KeyScheme",
    "ScanCounters",
    "ProgressReporter",
    "ConvertUtils",
    "FileService",
    "__version__",
]
