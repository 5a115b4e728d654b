"""
Unified command orchestrator for deduplication.
Wires the scanner, key extractor, remover and engine together — used by the CLI
and usable as a library entry point.
"""
import operator
import logging
from typing import Optional

from keepfirst.core.models import DeduplicationParams, ScanCounters
from keepfirst.core.scanner import DirectoryScanner
from keepfirst.core.key_extractor import create_key_extractor
from keepfirst.core.engine import DeduplicationEngine
from keepfirst.core.interfaces import ProgressSink, DirectoryListing
from keepfirst.services.file_service import FileRemoverImpl

logger = logging.getLogger(__name__)


class DeduplicationCommand:
    """
    Orchestrates the entire deduplication workflow:
    1. Obtain the directory listing (fails fast if the directory is unlistable)
    2. Build the engine with an index sized from the listing
    3. Run the single pass and return the counters

    Usage:
        params = DeduplicationParams(root_dir="~/Downloads")
        counters = DeduplicationCommand().execute(params, progress=ProgressReporter())
    """

    def __init__(self):
        self._engine: Optional[DeduplicationEngine] = None

    def execute(
            self,
            params: DeduplicationParams,
            progress: Optional[ProgressSink] = None
    ) -> ScanCounters:
        """
        Execute deduplication with given parameters.

        Args:
            params: Validated deduplication parameters
            progress: Receives counter updates and deletion failures

        Returns:
            Counters of the finished pass

        Raises:
            ListingFailed: If the directory cannot be listed. Nothing is touched in that case.
        """
        scanner: DirectoryListing = DirectoryScanner(params.root_dir, sort_entries=params.sort_entries).open()
        paths = scanner.iter_paths()
        capacity_hint = scanner.size_hint() or operator.length_hint(paths)

        logger.debug(
            f"Key scheme: {params.key_scheme.display_name} ({params.key_width} bytes), "
            f"mode: {params.deletion_mode.display_name}"
        )

        self._engine = DeduplicationEngine(
            remover=FileRemoverImpl(params.deletion_mode),
            key_extractor=create_key_extractor(params.key_scheme, params.key_width),
            progress=progress,
            capacity_hint=capacity_hint
        )
        return self._engine.run(paths)

    @property
    def engine(self) -> Optional[DeduplicationEngine]:
        """The engine of the last execution, if any."""
        return self._engine
