"""
Unit tests for shared/utils.py

Tests chunking, run date stamping and summary printing.
"""

import re
import unittest
from unittest.mock import patch

from models import RunSummary
from shared.utils import chunked, print_summary, run_date


class TestChunked(unittest.TestCase):
    """Tests for chunked() function."""

    def test_even_split(self):
        self.assertEqual(list(chunked([1, 2, 3, 4], 2)), [[1, 2], [3, 4]])

    def test_last_chunk_shorter(self):
        chunks = list(chunked(list(range(150)), 100))

        self.assertEqual([len(c) for c in chunks], [100, 50])

    def test_empty_sequence(self):
        self.assertEqual(list(chunked([], 100)), [])

    def test_non_positive_size_rejected(self):
        with self.assertRaises(ValueError):
            list(chunked([1], 0))


class TestRunDate(unittest.TestCase):
    """Tests for run_date() function."""

    def test_iso_date(self):
        self.assertRegex(run_date("Africa/Cairo"), re.compile(r"^\d{4}-\d{2}-\d{2}$"))


class TestPrintSummary(unittest.TestCase):
    """Tests for print_summary() function."""

    @patch("builtins.print")
    def test_prints_counts(self, mock_print):
        """Output includes processed, sent, failed counts."""
        summary = RunSummary(
            tips_loaded=4,
            pages_processed=3,
            users_processed=2500,
            notifications_sent=1234,
            notifications_failed=56,
        )

        print_summary(summary)

        printed_output = " ".join(str(call[0][0]) for call in mock_print.call_args_list)
        self.assertIn("2500", printed_output)
        self.assertIn("1234", printed_output)
        self.assertIn("56", printed_output)
        self.assertIn("Daily Health Tips Complete", printed_output)

    @patch("builtins.print")
    def test_custom_title(self, mock_print):
        print_summary(RunSummary(), title="Daily Health Tips Aborted")

        printed_output = " ".join(str(call[0][0]) for call in mock_print.call_args_list)
        self.assertIn("Aborted", printed_output)


if __name__ == "__main__":
    unittest.main()
