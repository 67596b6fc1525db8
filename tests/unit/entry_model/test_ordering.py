"""Tests for listing sort order and regexp filtering."""

from __future__ import annotations

import random
import unittest

from gut.entry_model import DirectoryEntry, EntryKind, compile_pattern, filter_entries, sort_entries
from gut.errors import PatternError


def _entry(name: str, kind: EntryKind = EntryKind.REGULAR) -> DirectoryEntry:
    return DirectoryEntry(name=name, kind=kind)


class SortEntriesTests(unittest.TestCase):
    def test_directories_first_then_codepoint_name_order(self) -> None:
        entries = [
            _entry("b.txt"),
            _entry("A", EntryKind.DIRECTORY),
            _entry("a.log"),
            _entry("Zeta", EntryKind.DIRECTORY),
            _entry("B.md"),
            _entry("link", EntryKind.SYMLINK),
            _entry("alpha", EntryKind.DIRECTORY),
        ]

        ordered = [entry.name for entry in sort_entries(entries)]

        self.assertEqual(ordered, ["A", "Zeta", "alpha", "B.md", "a.log", "b.txt", "link"])

    def test_partition_invariant_holds_for_shuffled_input(self) -> None:
        rng = random.Random(7)
        names = [f"n{idx:03d}" for idx in range(60)]
        entries = [
            _entry(name, EntryKind.DIRECTORY if rng.random() < 0.4 else EntryKind.REGULAR) for name in names
        ]
        rng.shuffle(entries)

        ordered = sort_entries(entries)

        dir_flags = [entry.is_dir for entry in ordered]
        self.assertEqual(dir_flags, sorted(dir_flags, reverse=True))
        dirs = [entry.name for entry in ordered if entry.is_dir]
        files = [entry.name for entry in ordered if not entry.is_dir]
        self.assertTrue(all(a < b for a, b in zip(dirs, dirs[1:])))
        self.assertTrue(all(a < b for a, b in zip(files, files[1:])))

    def test_input_sequence_is_not_mutated(self) -> None:
        entries = [_entry("b"), _entry("a")]
        sort_entries(entries)
        self.assertEqual([entry.name for entry in entries], ["b", "a"])


class FilterEntriesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.entries = sort_entries(
            [
                _entry("src", EntryKind.DIRECTORY),
                _entry("tests", EntryKind.DIRECTORY),
                _entry("setup.py"),
                _entry("README.md"),
                _entry("notes.txt"),
            ]
        )

    def test_empty_pattern_is_identity(self) -> None:
        self.assertEqual(filter_entries(self.entries, ""), self.entries)

    def test_pattern_matches_anywhere_in_name_and_keeps_order(self) -> None:
        kept = filter_entries(self.entries, "t")
        self.assertEqual([entry.name for entry in kept], ["tests", "notes.txt", "setup.py"])

    def test_extended_syntax_is_supported(self) -> None:
        kept = filter_entries(self.entries, r"\.(py|md)$")
        self.assertEqual([entry.name for entry in kept], ["README.md", "setup.py"])

    def test_filter_is_idempotent(self) -> None:
        once = filter_entries(self.entries, "^s")
        twice = filter_entries(once, "^s")
        self.assertEqual(once, twice)
        self.assertEqual([entry.name for entry in once], ["src", "setup.py"])

    def test_accepts_precompiled_pattern(self) -> None:
        kept = filter_entries(self.entries, compile_pattern("md"))
        self.assertEqual([entry.name for entry in kept], ["README.md"])

    def test_invalid_pattern_raises_pattern_error(self) -> None:
        with self.assertRaises(PatternError) as exc_info:
            filter_entries(self.entries, "([a-")
        self.assertIn("([a-", str(exc_info.exception))


if __name__ == "__main__":
    unittest.main()
