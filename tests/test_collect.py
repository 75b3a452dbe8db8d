"""Tests for host loading and best-observation reduction"""

import pytest

from supercop_table.collect import (AggregateMatrix, collect_results, load_host,
                                    load_observations, reduce_observations, select_best)
from supercop_table.parse_log import Observation

from conftest import DONNA, SANDY2X, make_line, write_host


class TestLoadObservations:
    """Test reading per-host data files"""

    def test_allow_list_only(self, results_dir):
        """Test directories outside the allow-list are never read"""
        observations = load_observations(results_dir, ["kivsa", "nakhash"])
        hosts = {o.host for o in observations}

        assert hosts == {"kivsa", "nakhash"}
        assert len(observations) == 3

    def test_missing_host_skipped(self, results_dir):
        """Test an allow-listed host with no directory is skipped"""
        observations = load_observations(results_dir, ["kivsa", "aljamus"])

        assert {o.host for o in observations} == {"kivsa"}

    def test_missing_data_file(self, tmp_path):
        """Test a host directory without a data file yields nothing"""
        (tmp_path / "kivsa").mkdir()
        assert load_host(tmp_path, "kivsa") == []

    def test_tagged_with_directory_host(self, tmp_path):
        """Test observations take the host from their directory"""
        write_host(tmp_path, "kivsa", [make_line("oldname", SANDY2X, 100)])
        observations = load_host(tmp_path, "kivsa")

        assert observations[0].host == "kivsa"

    def test_objsize_lines_dropped(self, results_dir):
        """Test objsize lines never become observations"""
        observations = load_host(results_dir, "kivsa")
        assert [o.cycles for o in observations] == [5200, 5000]

    def test_missing_root(self, tmp_path):
        """Test a missing results directory fails the run"""
        with pytest.raises(FileNotFoundError):
            load_observations(tmp_path / "nope", ["kivsa"])


class TestReduce:
    """Test best-observation selection"""

    def test_minimum_per_pair(self):
        """Test the matrix holds the minimum per (impl, host)"""
        observations = [
            Observation(SANDY2X, "kivsa", 5200),
            Observation(SANDY2X, "kivsa", 5000),
            Observation(SANDY2X, "kivsa", 5100),
            Observation(SANDY2X, "nakhash", 2000),
            Observation(DONNA, "kivsa", 9000),
        ]
        matrix = reduce_observations(observations)

        assert matrix.to_dict() == {
            SANDY2X: {"kivsa": 5000, "nakhash": 2000},
            DONNA: {"kivsa": 9000},
        }

    def test_no_fabricated_pairs(self):
        """Test absent pairs stay absent"""
        matrix = reduce_observations([Observation(DONNA, "kivsa", 9000)])

        assert DONNA in matrix
        assert SANDY2X not in matrix
        assert matrix.get(DONNA, "nakhash") is None
        assert matrix.hosts_for(DONNA) == ["kivsa"]

    def test_tie_break_on_compiler(self):
        """Test equal cycle counts pick the lowest compiler/flags, regardless of order"""
        a = Observation(SANDY2X, "kivsa", 5000, cc="gcc", cflags="-O3")
        b = Observation(SANDY2X, "kivsa", 5000, cc="clang", cflags="-O2")

        assert select_best([a, b])[(SANDY2X, "kivsa")] == b
        assert select_best([b, a])[(SANDY2X, "kivsa")] == b

    def test_empty(self):
        """Test no observations give an empty matrix"""
        assert len(reduce_observations([])) == 0


class TestAggregateMatrix:
    """Test the read-only matrix"""

    def test_read_only(self):
        """Test the matrix cannot be mutated after construction"""
        matrix = AggregateMatrix({SANDY2X: {"kivsa": 5000}})

        with pytest.raises(TypeError):
            matrix[SANDY2X]["kivsa"] = 1
        with pytest.raises(TypeError):
            matrix._cycles[DONNA] = {}

    def test_source_dict_not_shared(self):
        """Test later changes to the input dict do not leak in"""
        source = {SANDY2X: {"kivsa": 5000}}
        matrix = AggregateMatrix(source)
        source[SANDY2X]["kivsa"] = 1

        assert matrix[SANDY2X]["kivsa"] == 5000


class TestCollectResults:
    """Test the loader + reducer together"""

    def test_end_to_end_matrix(self, results_dir, two_host_config):
        """Test the best run per host wins and the intruder host is ignored"""
        matrix = collect_results(results_dir, two_host_config)

        assert matrix.to_dict() == {SANDY2X: {"kivsa": 5000, "nakhash": 2000}}
