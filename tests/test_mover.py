"""
Critical DedupMover tests — a source file must end up either moved into a free
slot or deleted as an exact duplicate, never both and never overwriting data.
"""
from pathlib import Path
from unittest import mock
import pytest
from gphotosort.core import (
    DedupMover, Disposition, HasherImpl, variant_path,
    VariantLimitExceeded, DirectoryCreationError)


@pytest.fixture
def dirs(temp_dir):
    src = temp_dir / "src"
    dst = temp_dir / "dst" / "2001" / "04"
    src.mkdir()
    dst.mkdir(parents=True)
    return src, dst


class TestVariantPath:

    def test_index_zero_is_base(self):
        base = Path("/archive/Google Photos/2001/04/IMG_2001_04_03_12345.jpg")
        assert variant_path(base, 0) == base

    def test_suffix_inserted_before_extension(self):
        base = Path("/archive/Google Photos/2001/04/IMG_2001_04_03_12345.jpg")
        assert variant_path(base, 1) == Path("/archive/Google Photos/2001/04/IMG_2001_04_03_12345-1.jpg")
        assert variant_path(base, 2) == Path("/archive/Google Photos/2001/04/IMG_2001_04_03_12345-2.jpg")

    def test_only_final_extension_is_kept_apart(self):
        assert variant_path(Path("a/b.c.jpg"), 3) == Path("a/b.c-3.jpg")


class TestResolve:

    def test_moves_into_empty_slot(self, dirs):
        src, dst = dirs
        source = src / "IMG_2001_04_03_12345.jpg"
        source.write_bytes(b"new photo")

        outcome = DedupMover().resolve(source, dst / source.name)

        assert outcome is Disposition.MOVED
        assert not source.exists()
        assert (dst / source.name).read_bytes() == b"new photo"

    def test_creates_missing_bucket_directory(self, temp_dir):
        source = temp_dir / "IMG_2001_04_03_12345.jpg"
        source.write_bytes(b"new photo")
        target = temp_dir / "lib" / "2001" / "04" / source.name

        assert DedupMover().resolve(source, target) is Disposition.MOVED
        assert target.read_bytes() == b"new photo"

    def test_different_content_gets_variant_name(self, dirs):
        """Same name, different bytes: source lands at -1, existing file untouched."""
        src, dst = dirs
        existing = dst / "IMG_2001_04_03_12345.jpg"
        existing.write_bytes(b"first photo")
        source = src / "IMG_2001_04_03_12345.jpg"
        source.write_bytes(b"second photo")

        outcome = DedupMover().resolve(source, existing)

        assert outcome is Disposition.MOVED
        assert existing.read_bytes() == b"first photo"
        assert (dst / "IMG_2001_04_03_12345-1.jpg").read_bytes() == b"second photo"
        assert not source.exists()

    def test_identical_content_deletes_source(self, dirs):
        src, dst = dirs
        existing = dst / "IMG_2001_04_03_12345.jpg"
        existing.write_bytes(b"same bytes")
        source = src / "IMG_2001_04_03_12345.jpg"
        source.write_bytes(b"same bytes")
        hasher = HasherImpl()
        source_hash = hasher.compute_full_hash(source)

        outcome = DedupMover(hasher=hasher).resolve(source, existing)

        assert outcome is Disposition.DELETED
        assert not source.exists()
        assert hasher.compute_full_hash(existing) == source_hash
        assert sorted(p.name for p in dst.iterdir()) == ["IMG_2001_04_03_12345.jpg"]

    def test_identical_content_at_variant_slot_deletes_source(self, dirs):
        src, dst = dirs
        (dst / "IMG_1.jpg").write_bytes(b"other")
        (dst / "IMG_1-1.jpg").write_bytes(b"mine")
        source = src / "IMG_1.jpg"
        source.write_bytes(b"mine")

        assert DedupMover().resolve(source, dst / "IMG_1.jpg") is Disposition.DELETED
        assert not source.exists()
        assert not (dst / "IMG_1-2.jpg").exists()

    def test_skips_several_occupied_variants(self, dirs):
        src, dst = dirs
        (dst / "IMG_1.jpg").write_bytes(b"a")
        (dst / "IMG_1-1.jpg").write_bytes(b"b")
        (dst / "IMG_1-2.jpg").write_bytes(b"c")
        source = src / "IMG_1.jpg"
        source.write_bytes(b"d")
        events = []

        outcome = DedupMover(progress_callback=lambda *e: events.append(e)).resolve(source, dst / "IMG_1.jpg")

        assert outcome is Disposition.MOVED
        assert (dst / "IMG_1-3.jpg").read_bytes() == b"d"
        assert [e[0] for e in events] == ["uniquify", "uniquify", "uniquify", "move"]


class TestDryRun:

    def test_dry_run_move_touches_nothing(self, temp_dir):
        source = temp_dir / "IMG_1.jpg"
        source.write_bytes(b"x")
        target = temp_dir / "lib" / "2001" / "04" / "IMG_1.jpg"

        outcome = DedupMover(dry_run=True).resolve(source, target)

        assert outcome is Disposition.MOVED
        assert source.exists()
        assert not target.parent.exists()

    def test_dry_run_delete_keeps_source(self, dirs):
        src, dst = dirs
        (dst / "IMG_1.jpg").write_bytes(b"same")
        source = src / "IMG_1.jpg"
        source.write_bytes(b"same")
        events = []

        outcome = DedupMover(dry_run=True, progress_callback=lambda *e: events.append(e)).resolve(
            source, dst / "IMG_1.jpg")

        assert outcome is Disposition.DELETED
        assert source.exists()
        assert events == [("delete", source, dst / "IMG_1.jpg")]


class TestFailures:

    def test_variant_limit_leaves_source_untouched(self, dirs):
        src, dst = dirs
        for i in range(3):
            name = "IMG_1.jpg" if i == 0 else f"IMG_1-{i}.jpg"
            (dst / name).write_bytes(f"other {i}".encode())
        source = src / "IMG_1.jpg"
        source.write_bytes(b"mine")

        with pytest.raises(VariantLimitExceeded) as exc_info:
            DedupMover(max_variants=3).resolve(source, dst / "IMG_1.jpg")

        assert exc_info.value.limit == 3
        assert source.read_bytes() == b"mine"

    def test_slot_past_the_ceiling_is_never_checked(self, dirs):
        src, dst = dirs
        for i in range(3):
            name = "IMG_1.jpg" if i == 0 else f"IMG_1-{i}.jpg"
            (dst / name).write_bytes(f"other {i}".encode())
        (dst / "IMG_1-3.jpg").write_bytes(b"mine")
        source = src / "IMG_1.jpg"
        source.write_bytes(b"mine")
        events = []

        with pytest.raises(VariantLimitExceeded):
            DedupMover(max_variants=3, progress_callback=lambda *e: events.append(e)).resolve(
                source, dst / "IMG_1.jpg")

        assert [e[2].name for e in events] == ["IMG_1.jpg", "IMG_1-1.jpg", "IMG_1-2.jpg"]
        assert source.exists()

    def test_default_limit_is_one_thousand(self):
        assert DedupMover().max_variants == 1000

    def test_hash_failure_propagates(self, dirs):
        src, dst = dirs
        (dst / "IMG_1.jpg").write_bytes(b"existing")
        source = src / "IMG_1.jpg"
        source.write_bytes(b"mine")
        hasher = mock.Mock()
        hasher.compute_full_hash.side_effect = PermissionError("denied")

        with pytest.raises(OSError):
            DedupMover(hasher=hasher).resolve(source, dst / "IMG_1.jpg")
        assert source.exists()

    def test_directory_creation_failure_is_fatal_error(self, temp_dir):
        blocker = temp_dir / "lib"
        blocker.write_bytes(b"a file where the year folder should be")
        source = temp_dir / "IMG_1.jpg"
        source.write_bytes(b"x")

        with pytest.raises(DirectoryCreationError):
            DedupMover().resolve(source, blocker / "2001" / "04" / "IMG_1.jpg")
        assert source.exists()


class TestTrash:

    def test_duplicate_sent_to_trash(self, dirs):
        src, dst = dirs
        (dst / "IMG_1.jpg").write_bytes(b"same")
        source = src / "IMG_1.jpg"
        source.write_bytes(b"same")

        with mock.patch("gphotosort.services.file_service.send2trash") as mock_trash:
            outcome = DedupMover(use_trash=True).resolve(source, dst / "IMG_1.jpg")

        assert outcome is Disposition.DELETED
        mock_trash.assert_called_once_with(str(source.resolve()))
