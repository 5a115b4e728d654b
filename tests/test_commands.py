"""
Integration tests for DeduplicationCommand — the orchestration layer between the CLI and core.
Verifies correct wiring of scanner → engine → remover on real directories.
"""
import io
from unittest import mock

import pytest

from keepfirst import DeduplicationCommand, DeduplicationParams, DeletionMode, KeyScheme
from keepfirst.core.models import ListingFailed
from keepfirst.core.progress import ProgressReporter
from keepfirst.services.file_service import FileService


class TestDeduplicationCommand:

    def test_execute_removes_duplicates(self, abc_files):
        params = DeduplicationParams(root_dir=str(abc_files["a"].parent), key_width=8)

        counters = DeduplicationCommand().execute(params)

        assert counters.scanned == 3
        assert counters.deleted == 1
        assert abc_files["a"].exists()
        assert not abc_files["b"].exists()
        assert abc_files["c"].exists()

    def test_subdirectories_are_ignored(self, abc_files, temp_dir):
        """A copy inside a subdirectory is neither scanned nor deleted."""
        sub = temp_dir / "sub"
        sub.mkdir()
        nested = sub / "a.bin"
        nested.write_bytes(abc_files["a"].read_bytes())

        counters = DeduplicationCommand().execute(DeduplicationParams(root_dir=str(temp_dir), key_width=8))

        assert nested.exists()
        assert counters.scanned == 3

    def test_index_sized_from_listing(self, abc_files):
        command = DeduplicationCommand()
        command.execute(DeduplicationParams(root_dir=str(abc_files["a"].parent), key_width=8))

        assert command.engine.index.capacity_hint == 3

    def test_listing_failure_touches_nothing(self, temp_dir):
        progress = mock.Mock()

        with pytest.raises(ListingFailed):
            DeduplicationCommand().execute(
                DeduplicationParams(root_dir=str(temp_dir / "missing")), progress=progress
            )
        progress.start.assert_not_called()

    def test_second_run_is_noop(self, abc_files):
        params = DeduplicationParams(root_dir=str(abc_files["a"].parent), key_width=8)

        first = DeduplicationCommand().execute(params)
        second = DeduplicationCommand().execute(params)

        assert first.deleted == 1
        assert second.deleted == 0
        assert second.scanned == 2

    def test_dry_run_keeps_files_but_counts(self, abc_files):
        params = DeduplicationParams(
            root_dir=str(abc_files["a"].parent), key_width=8, deletion_mode=DeletionMode.DRY_RUN
        )

        counters = DeduplicationCommand().execute(params)

        assert counters.deleted == 1
        assert all(p.exists() for p in abc_files.values())

    def test_trash_mode(self, abc_files):
        params = DeduplicationParams(
            root_dir=str(abc_files["a"].parent), key_width=8, deletion_mode=DeletionMode.TRASH
        )

        with mock.patch.object(FileService, "move_to_trash") as trash:
            counters = DeduplicationCommand().execute(params)

        trash.assert_called_once_with(str(abc_files["b"]))
        assert counters.deleted == 1

    def test_xxhash_scheme_finds_same_duplicates(self, abc_files):
        params = DeduplicationParams(
            root_dir=str(abc_files["a"].parent), key_width=8, key_scheme=KeyScheme.XXHASH
        )

        counters = DeduplicationCommand().execute(params)

        assert counters.deleted == 1
        assert not abc_files["b"].exists()

    def test_progress_output(self, abc_files):
        out = io.StringIO()
        DeduplicationCommand().execute(
            DeduplicationParams(root_dir=str(abc_files["a"].parent), key_width=8),
            progress=ProgressReporter(stream=out)
        )

        assert out.getvalue().endswith("\rscanned: 3\ndeleted: 1\n")


class TestDeduplicationParams:

    @pytest.mark.parametrize("width", [0, -8, True, "8"])
    def test_invalid_key_width(self, width):
        with pytest.raises(ValueError, match="Key width"):
            DeduplicationParams(root_dir="/tmp", key_width=width)

    def test_string_enums_are_coerced(self):
        params = DeduplicationParams(root_dir="/tmp", key_scheme="xxhash", deletion_mode="dry-run")

        assert params.key_scheme == KeyScheme.XXHASH
        assert params.dry_run

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValueError):
            DeduplicationParams(root_dir="/tmp", deletion_mode="shred")
