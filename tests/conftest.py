"""
Shared fixtures for deduplication tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import sys
from pathlib import Path
from typing import Dict

# Add src/ to sys.path so 'keepfirst' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from keepfirst.core.reader import FileContentReader
from keepfirst.core.models import ReadFailed

KEY_PREFIX = bytes.fromhex("0102030405060708")


@pytest.fixture
def temp_dir(tmp_path):
    """Empty directory to deduplicate, separate from pytest's own files."""
    target = tmp_path / "target"
    target.mkdir()
    return target


@pytest.fixture
def abc_files(temp_dir) -> Dict[str, Path]:
    """
    Three files sharing the same 8-byte prefix:
    - a.bin and b.bin are identical (b must be removed)
    - c.bin differs after the prefix (must survive despite the key collision)
    """
    files = {
        "a": temp_dir / "a.bin",
        "b": temp_dir / "b.bin",
        "c": temp_dir / "c.bin",
    }
    files["a"].write_bytes(KEY_PREFIX + b"x")
    files["b"].write_bytes(KEY_PREFIX + b"x")
    files["c"].write_bytes(KEY_PREFIX + b"y")
    return files


class CountingReader(FileContentReader):
    """Content reader that records every path it reads and can fail on demand."""

    def __init__(self, failing=()):
        super().__init__()
        self.failing = {str(p) for p in failing}
        self.read_paths = []

    def read(self, path: str) -> bytes:
        self.read_paths.append(str(path))
        if str(path) in self.failing:
            raise ReadFailed(str(path), f"Failed to read {path}: simulated I/O error")
        return super().read(path)


class RecordingRemover:
    """Remover that deletes for real and remembers what it removed."""

    def __init__(self):
        self.removed = []

    def remove(self, path: str) -> None:
        Path(path).unlink()
        self.removed.append(str(path))
