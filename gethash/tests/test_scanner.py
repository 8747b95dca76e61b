#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for batch scanning in flat-list and recursive modes.
"""

from pathlib import Path

from gethash.models.fingerprint import (
    STATUS_HASHED, STATUS_NOT_FOUND, STATUS_SKIPPED, STATUS_UNREADABLE,
)
from gethash.scanning.aggregator import BatchAggregator
from gethash.scanning.filters import ExtensionFilter
from gethash.scanning.scanner import BatchScanner
from gethash.tests.fixtures.sample_files import make_tree, media_library_layout


class TestRecursiveMode:
    def test_scenario_c(self, scenario_tree, aggregator):
        outcomes = list(BatchScanner().scan([scenario_tree], aggregator, recursive=True))
        totals = aggregator.snapshot()

        assert totals.attempted == 2
        assert totals.succeeded == 2
        hashed = [Path(o.path).name for o in outcomes if o.ok]
        assert hashed == ["a.mp4", "c.mkv"]
        assert "b.txt" not in hashed
        assert totals.bytes_succeeded == 1_000 + 60_000

    def test_rejected_files_counted_as_skipped(self, scenario_tree, aggregator):
        list(BatchScanner().scan([scenario_tree], aggregator, recursive=True))
        assert aggregator.snapshot().skipped == 1

    def test_accept_all(self, scenario_tree, aggregator):
        list(BatchScanner().scan([scenario_tree], aggregator, recursive=True, accept_all=True))
        totals = aggregator.snapshot()
        assert totals.attempted == 3
        assert totals.skipped == 0

    def test_library_totals(self, library, aggregator):
        root, files = library
        outcomes = list(BatchScanner().scan([root], aggregator, recursive=True))
        media = {rel: size for rel, size in media_library_layout().items()
                 if rel.rsplit(".", 1)[-1].lower() in
                 {"mkv", "mp4", "avi", "ts", "m2ts", "webm"}}

        totals = aggregator.snapshot()
        assert totals.succeeded == len(media)
        assert totals.bytes_succeeded == sum(media.values())
        assert totals.skipped == len(files) - len(media)
        assert len(outcomes) == len(files)

    def test_paths_are_absolute(self, scenario_tree, aggregator, monkeypatch):
        monkeypatch.chdir(scenario_tree.parent)
        outcomes = list(BatchScanner().scan(["root"], aggregator, recursive=True))
        assert all(Path(o.path).is_absolute() for o in outcomes if o.ok)

    def test_file_root_is_handled_flat(self, scenario_tree, aggregator):
        outcomes = list(BatchScanner().scan([scenario_tree / "a.mp4"], aggregator, recursive=True))
        assert [o.status for o in outcomes] == [STATUS_HASHED]

    def test_missing_root_in_recursive_mode(self, tmp_path, aggregator):
        outcomes = list(BatchScanner().scan([tmp_path / "gone.mp4"], aggregator, recursive=True))
        assert [o.status for o in outcomes] == [STATUS_NOT_FOUND]


class TestFlatMode:
    def test_hashes_given_files(self, make_file, aggregator):
        a = make_file("a.mp4", 20_000)
        b = make_file("b.mkv", 100_000, seed=3)
        outcomes = list(BatchScanner().scan([a, b], aggregator))
        assert [o.status for o in outcomes] == [STATUS_HASHED, STATUS_HASHED]
        assert outcomes[0].result.hash != outcomes[1].result.hash
        assert aggregator.snapshot().bytes_succeeded == 120_000

    def test_filter_runs_before_resolution(self, tmp_path, aggregator):
        outcomes = list(BatchScanner().scan([tmp_path / "missing.txt"], aggregator))
        assert outcomes[0].status == STATUS_SKIPPED
        assert aggregator.snapshot().attempted == 0

    def test_missing_media_path_is_not_found(self, tmp_path, aggregator):
        outcomes = list(BatchScanner().scan([str(tmp_path / "missing.mp4")], aggregator))
        assert outcomes[0].status == STATUS_NOT_FOUND
        assert outcomes[0].error.kind == "not_found"
        totals = aggregator.snapshot()
        assert (totals.attempted, totals.succeeded, totals.not_found) == (1, 0, 1)

    def test_directory_in_flat_mode_is_unreadable(self, tmp_path, aggregator):
        folder = tmp_path / "season.mkv"
        folder.mkdir()
        outcomes = list(BatchScanner().scan([folder], aggregator))
        assert outcomes[0].status == STATUS_UNREADABLE
        assert aggregator.snapshot().unreadable == 1

    def test_directory_is_not_walked_without_recursive(self, scenario_tree, aggregator):
        outcomes = list(BatchScanner().scan([scenario_tree], aggregator))
        assert [o.status for o in outcomes] == [STATUS_SKIPPED]

    def test_result_path_is_resolved(self, make_file, aggregator, monkeypatch):
        path = make_file("clip.mov", 10)
        monkeypatch.chdir(path.parent)
        outcome = next(BatchScanner().scan(["clip.mov"], aggregator))
        assert outcome.result.path == str(path.resolve())

    def test_custom_extensions(self, make_file, aggregator):
        srt = make_file("subs.srt", 10)
        mp4 = make_file("movie.mp4", 10)
        scanner = BatchScanner(extension_filter=ExtensionFilter(["srt"]))
        statuses = [o.status for o in scanner.scan([srt, mp4], aggregator)]
        assert statuses == [STATUS_HASHED, STATUS_SKIPPED]

    def test_outcomes_recorded_before_yield(self, make_file, aggregator):
        path = make_file("a.mp4", 10)
        generator = BatchScanner().scan([path], aggregator)
        next(generator)
        assert aggregator.snapshot().attempted == 1


class TestPrescan:
    def test_flat_counts_every_argument(self, tmp_path):
        prescan = BatchScanner().prescan([tmp_path / "a.mp4", tmp_path / "b.txt"])
        assert prescan.count == 2

    def test_recursive_counts_regular_files(self, scenario_tree):
        assert BatchScanner().prescan([scenario_tree], recursive=True).count == 3

    def test_longest_display_uses_directory(self, tmp_path):
        make_tree(tmp_path, {"x.mp4": 1})
        prescan = BatchScanner().prescan([tmp_path / "x.mp4"])
        assert prescan.longest_display == len(str(tmp_path.resolve()))

    def test_longest_display_uses_name_for_missing(self, tmp_path):
        name = "a" * 300 + ".mp4"
        prescan = BatchScanner().prescan([name])
        assert prescan.longest_display == len(name)

    def test_does_not_touch_aggregation(self, scenario_tree):
        aggregator = BatchAggregator()
        BatchScanner().prescan([scenario_tree], recursive=True)
        assert aggregator.snapshot().attempted == 0
