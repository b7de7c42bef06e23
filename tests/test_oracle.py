#!/usr/bin/env python3
"""Tests for seqsearch.oracle — full-scan counting and file validation.

Run:  python3 -m unittest tests.test_oracle [-v]
"""

import os
import struct
import tempfile
import unittest

from seqsearch import (
    FixedSteps, InvalidSequenceError, scan_count_in_range, validate_sequence,
    write_sequence,
)


def write_values(path, values):
    with open(path, "wb") as f:
        f.write(struct.pack(f"<{len(values)}Q", *values))


class TempDirCase(unittest.TestCase):

    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.dir = tmp.name

    def path(self, name="seq.bin"):
        return os.path.join(self.dir, name)


class TestScanCount(TempDirCase):

    VALUES = [0, 1, 2, 4, 5, 7, 8, 9, 10, 12]

    def setUp(self):
        super().setUp()
        write_values(self.path(), self.VALUES)

    def test_counts(self):
        self.assertEqual(scan_count_in_range(self.path(), 0, 3), 2)
        self.assertEqual(scan_count_in_range(self.path(), 9, 12), 1)
        self.assertEqual(scan_count_in_range(self.path(), 20, 3), 7)
        self.assertEqual(scan_count_in_range(self.path(), 5, 5), 0)

    def test_small_chunks(self):
        for chunk in (1, 3, 4, 10, 11):
            with self.subTest(chunk=chunk):
                self.assertEqual(scan_count_in_range(self.path(), 1, 11, chunk=chunk), 7)

    def test_huge_bounds(self):
        self.assertEqual(scan_count_in_range(self.path(), 0, 2**80), 9)
        self.assertEqual(scan_count_in_range(self.path(), 2**64, 2**80), 0)

    def test_negative_bound(self):
        with self.assertRaises(ValueError):
            scan_count_in_range(self.path(), -3, 4)

    def test_float_bound(self):
        with self.assertRaises(TypeError):
            scan_count_in_range(self.path(), 0, 3.5)
        with self.assertRaises(TypeError):
            scan_count_in_range(self.path(), 0.0, 3)

    def test_bool_bound(self):
        with self.assertRaises(TypeError):
            scan_count_in_range(self.path(), False, 4)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            scan_count_in_range(self.path("absent.bin"), 0, 4)

    def test_empty_file(self):
        write_values(self.path("empty.bin"), [])
        self.assertEqual(scan_count_in_range(self.path("empty.bin"), 0, 4), 0)


class TestValidateSequence(TempDirCase):

    def test_valid(self):
        write_sequence(self.path(), 1000, FixedSteps([1, 2, 2, 1]))
        self.assertEqual(validate_sequence(self.path(), chunk=64), 1000)

    def test_single_record(self):
        write_values(self.path(), [0])
        self.assertEqual(validate_sequence(self.path()), 1)

    def test_bad_first_value(self):
        write_values(self.path(), [1, 2, 3])
        with self.assertRaises(InvalidSequenceError) as cm:
            validate_sequence(self.path())
        self.assertEqual(cm.exception.index, 0)

    def test_bad_step_inside_chunk(self):
        write_values(self.path(), [0, 1, 2, 5, 6])
        with self.assertRaises(InvalidSequenceError) as cm:
            validate_sequence(self.path())
        self.assertEqual(cm.exception.index, 3)

    def test_bad_step_across_chunks(self):
        write_values(self.path(), [0, 1, 2, 3, 3, 4])
        for chunk in (2, 3, 4, 100):
            with self.subTest(chunk=chunk):
                with self.assertRaises(InvalidSequenceError) as cm:
                    validate_sequence(self.path(), chunk=chunk)
                self.assertEqual(cm.exception.index, 4)

    def test_decrease(self):
        write_values(self.path(), [0, 2, 1])
        with self.assertRaises(InvalidSequenceError) as cm:
            validate_sequence(self.path())
        self.assertEqual(cm.exception.index, 2)

    def test_empty(self):
        write_values(self.path(), [])
        with self.assertRaises(InvalidSequenceError):
            validate_sequence(self.path())

    def test_partial_record(self):
        with open(self.path(), "wb") as f:
            f.write(b"\0" * 9)
        with self.assertRaises(ValueError):
            validate_sequence(self.path())


if __name__ == "__main__":
    unittest.main()
