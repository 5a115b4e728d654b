"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/progress.py
Console progress for a deduplication pass: an updating `scanned: N` line on
stdout, a final `deleted: N` total, and one stderr line per failed deletion.
"""

import sys
from typing import Optional, TextIO

from keepfirst.core.models import ScanCounters, DeletionFailed


class ProgressReporter:
    """
    Writes counters to the console as the engine advances.

    Attributes:
        stream: Destination of the status line and final total (stdout by default)
        err_stream: Destination of deletion failures (stderr by default)
        quiet: Suppresses the status line and total, never the error lines
        final_suffix: Appended to the final total, e.g. " (dry run)"
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        err_stream: Optional[TextIO] = None,
        quiet: bool = False,
        final_suffix: str = ""
    ):
        self.stream = stream if stream is not None else sys.stdout
        self.err_stream = err_stream if err_stream is not None else sys.stderr
        self.quiet = quiet
        self.final_suffix = final_suffix

    def start(self, counters: ScanCounters) -> None:
        """Shown before the first file so an empty directory still prints a status."""
        self._status(counters)

    def file_done(self, counters: ScanCounters) -> None:
        self._status(counters)

    def finish(self, counters: ScanCounters) -> None:
        if self.quiet:
            return
        self.stream.write(f"\ndeleted: {counters.deleted}{self.final_suffix}\n")
        self.stream.flush()

    def deletion_failed(self, error: DeletionFailed) -> None:
        self.err_stream.write(f"{error}\n")
        self.err_stream.flush()

    def _status(self, counters: ScanCounters) -> None:
        if self.quiet:
            return
        self.stream.write(f"\rscanned: {counters.scanned}")
        self.stream.flush()
