"""
Services layer — side-effecting file operations used by the engine.
"""
from .file_service import FileService, FileRemoverImpl

__all__ = ["FileService", "FileRemoverImpl"]
