"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/reader.py
Full-content reads, used only once a key collision makes a comparison necessary.
"""

from keepfirst.core.models import ReadFailed
from keepfirst.core.retry import retry_on_interrupt


class FileContentReader:
    """
    Reads whole files into memory.
    Keeps a count of reads so callers can check how often a file was touched.
    """

    def __init__(self):
        self.reads = 0

    def read(self, path: str) -> bytes:
        """
        Returns the entire content of the file.

        Raises:
            ReadFailed: On any non-transient I/O error.
        """
        try:
            with retry_on_interrupt(open, path, "rb") as f:
                data = retry_on_interrupt(f.read)
        except OSError as e:
            raise ReadFailed(path, f"Failed to read {path}: {e}") from e
        self.reads += 1
        return data
