"""Tests for utils progress module."""

from pathlib import Path
import logging
import sys

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from cpgdiscord.utils.progress import ReadProgress, iter_progress


class TestIterProgress:
    """Test cases for iter_progress function."""

    def test_iter_progress_basic_functionality(self):
        test_data = [1, 2, 3, 4, 5]
        assert list(iter_progress(test_data)) == test_data

    def test_iter_progress_with_enabled_false(self):
        test_data = ['a', 'b', 'c']
        assert list(iter_progress(test_data, enabled=False)) == test_data

    def test_iter_progress_returns_iterator(self):
        progress_iter = iter_progress([1, 2, 3])
        assert hasattr(progress_iter, '__iter__')
        assert hasattr(progress_iter, '__next__')
        assert list(progress_iter) == [1, 2, 3]

    def test_iter_progress_preserves_order(self):
        test_data = [3, 1, 4, 1, 5, 9, 2, 6]
        assert list(iter_progress(test_data, total=8, desc="Sites")) == test_data

    def test_iter_progress_lazy_evaluation(self):
        def generate_numbers():
            for i in range(5):
                yield i * 2

        assert list(iter_progress(generate_numbers())) == [0, 2, 4, 6, 8]

    def test_iter_progress_empty_iterable(self):
        assert list(iter_progress([])) == []


class TestReadProgress:
    """Test cases for the read counter fed by the driver."""

    def test_tracks_latest_counts(self):
        with ReadProgress(enabled=True) as progress:
            progress(10000, 9000)
            progress(20000, 17500)
            assert progress.total == 20000
            assert progress.accepted == 17500

    def test_disabled_logs_at_debug(self, caplog):
        logger = logging.getLogger("cpgdiscord.test_progress")
        progress = ReadProgress(enabled=False, logger=logger)

        with caplog.at_level(logging.DEBUG, logger="cpgdiscord"):
            progress(10000, 123)

        assert "Processed 10,000 reads (123 accepted)" in caplog.text
        progress.close()

    def test_close_is_idempotent(self):
        progress = ReadProgress(enabled=True)
        progress.close()
        progress.close()
