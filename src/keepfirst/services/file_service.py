"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
Removal primitives for confirmed duplicates.
Provides permanent deletion, move-to-trash (via send2trash) and a dry-run no-op.
"""
import os
import logging
from pathlib import Path

from send2trash import send2trash

from keepfirst.core.models import DeletionFailed, DeletionMode
from keepfirst.core.retry import retry_on_interrupt

logger = logging.getLogger(__name__)


class FileService:
    """
    Cross-platform file removal.
    Every method raises DeletionFailed and leaves the file in place on error.
    """

    @staticmethod
    def delete_permanently(file_path: str):
        """Removes a file from disk, retrying interrupted calls."""
        try:
            retry_on_interrupt(os.remove, file_path)
        except OSError as e:
            raise DeletionFailed(file_path, f"Failed to delete {file_path}: {e}") from e

    @staticmethod
    def move_to_trash(file_path: str):
        """Moves a file to the system trash."""
        path = Path(file_path).resolve()

        if not path.exists():
            raise DeletionFailed(file_path, f"File not found: {path}")

        try:
            retry_on_interrupt(send2trash, str(path))
        except Exception as e:
            raise DeletionFailed(file_path, f"Failed to move to trash: {e}") from e


class FileRemoverImpl:
    """Adapts a DeletionMode to the engine's FileRemover interface."""

    def __init__(self, mode: DeletionMode = DeletionMode.DELETE):
        self.mode = mode

    def remove(self, path: str) -> None:
        if self.mode == DeletionMode.DRY_RUN:
            logger.info(f"Would delete: {path}")
        elif self.mode == DeletionMode.TRASH:
            FileService.move_to_trash(path)
        else:
            FileService.delete_permanently(path)
