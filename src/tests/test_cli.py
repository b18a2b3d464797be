import io
import os
import json
import tempfile

import pytest
import yaml

import pyknapsack
from pyknapsack.cli import (create_parser,
                            read_interactive,
                            main)
from pyknapsack.common import SchemaError
from pyknapsack.problem import ProblemInstance

_textbook_stdin = "50\n3\n10 60\n20 100\n30 120\n"

_textbook_stdout = """\
Knapsack capacity (W): Number of items (n): \
Please enter weight and value for each item on a separate line \
(weight first, then value):

Received input:
Capacity = 50, Number of items = 3
Item 1: weight = 10, value = 60
Item 2: weight = 20, value = 100
Item 3: weight = 30, value = 120

Fractional Knapsack (Greedy): Total value = 240.00
Selected: Item 1 fully and Item 2 fully and 0.67 of Item 3

0/1 Knapsack (Dynamic Programming): Maximum value = 220
Total weight used = 50
Selected items: Item 2 and Item 3
"""

def _run(args, stdin=""):
    out = io.StringIO()
    err = io.StringIO()
    rc = main(args, stdin=io.StringIO(stdin), stdout=out, stderr=err)
    return rc, out.getvalue(), err.getvalue()

class TestInteractive(object):

    def test_read(self):
        out = io.StringIO()
        instance = read_interactive(io.StringIO(_textbook_stdin), out)
        assert instance == ProblemInstance.from_pairs(
            50, [(10, 60), (20, 100), (30, 120)])

    def test_read_errors(self):
        for text in ("",
                     "abc\n",
                     "10\n",
                     "10\n-1\n",
                     "10\n1.5\n",
                     "10\n2\n1 1\n",
                     "10\n1\n1\n",
                     "10\n1\n1 2 3\n",
                     "10\n1\nx 2\n"):
            with pytest.raises(SchemaError):
                read_interactive(io.StringIO(text), io.StringIO())

    def test_textbook(self):
        rc, out, err = _run([], _textbook_stdin)
        assert rc == 0
        assert err == ""
        assert out == _textbook_stdout

    def test_single_item(self):
        rc, out, err = _run([], "3\n1\n5 10\n")
        assert rc == 0
        assert "Total value = 6.00\nSelected: 0.60 of Item 1\n" in out
        assert "Maximum value = 0\n" in out
        assert "Selected items: none\n" in out

    def test_zero_weight(self):
        rc, out, err = _run([], "10\n1\n0 5\n")
        assert rc == 1
        assert err.startswith("error: Item[1] weight")

    def test_malformed(self):
        rc, out, err = _run([], "10\n1\nfive 5\n")
        assert rc == 1
        assert err.startswith("error: invalid item 1 weight")

    def test_resource_limits(self):
        rc, out, err = _run(["--max-capacity", "10"], "11\n0\n")
        assert rc == 1
        assert err.startswith("error: Capacity 11 exceeds")
        rc, out, err = _run(["--max-table-cells", "5"],
                            "10\n1\n1 1\n")
        assert rc == 1
        assert "exceeds the limit of 5" in err

class TestFiles(object):

    def _write_instance(self, data):
        fid, fname = tempfile.mkstemp(suffix=".json")
        os.close(fid)
        with open(fname, "w") as f:
            json.dump(data, f)
        return fname

    def test_input_json_output(self):
        fname = self._write_instance(
            {"capacity": 50,
             "items": [{"index": 1, "value": 60, "weight": 10},
                       {"index": 2, "value": 100, "weight": 20},
                       {"index": 3, "value": 120, "weight": 30}]})
        try:
            for table in ("full", "compact"):
                rc, out, err = _run(["--input", fname,
                                     "--format", "json",
                                     "--table-strategy", table])
                assert rc == 0
                assert json.loads(out) == \
                    {"fractional":
                     {"total_value": 240.0,
                      "selected": ("Item 1 fully and Item 2 fully "
                                   "and 0.67 of Item 3")},
                     "zero_one":
                     {"max_value": 220,
                      "total_weight": 50,
                      "selected": "Item 2 and Item 3"}}
            rc, out, err = _run(["--input", fname, "--format", "yaml"])
            assert rc == 0
            assert yaml.safe_load(out)["zero_one"]["max_value"] == 220
            rc, out, err = _run(["--input", fname])
            assert rc == 0
            assert out.startswith(
                "Fractional Knapsack (Greedy): Total value = 240.00\n")
        finally:
            os.remove(fname)

    def test_results_and_log_files(self):
        fname = self._write_instance(
            {"capacity": 3,
             "items": [{"index": 1, "value": 10, "weight": 5}]})
        fid, results_filename = tempfile.mkstemp()
        os.close(fid)
        fid, log_filename = tempfile.mkstemp()
        os.close(fid)
        try:
            rc, out, err = _run(["--input", fname,
                                 "--results-filename", results_filename,
                                 "--log-filename", log_filename])
            assert rc == 0
            with open(results_filename) as f:
                data = yaml.safe_load(f)
            assert data["zero_one"] == {"max_value": 0,
                                        "total_weight": 0,
                                        "selected_indices": []}
            assert data["fractional"]["contributions"][0][0] == 1
            with open(log_filename) as f:
                assert "Solving knapsack instance" in f.read()
        finally:
            os.remove(fname)
            os.remove(results_filename)
            os.remove(log_filename)

    def test_bad_input_file(self):
        rc, out, err = _run(["--input", "/nonexistent/instance.json"])
        assert rc == 1
        assert err.startswith("error: ")
        fname = self._write_instance({"capacity": 10})
        try:
            rc, out, err = _run(["--input", fname])
            assert rc == 1
            assert "missing required key 'items'" in err
        finally:
            os.remove(fname)

def test_parser():
    parser = create_parser()
    args = parser.parse_args([])
    assert args.input is None
    assert args.format == "text"
    assert args.table_strategy is None
    assert args.max_table_cells is None
    assert args.max_capacity is None
    with pytest.raises(SystemExit):
        parser.parse_args(["--table-strategy", "sparse"])

def test_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    out, err = capsys.readouterr()
    assert out.strip() == "pyknapsack "+pyknapsack.__version__

def test_fixed_instance():
    instance = ProblemInstance.from_pairs(3, [(5, 10)])
    out = io.StringIO()
    rc = main(["--format", "json"],
              stdin=io.StringIO(),
              stdout=out,
              stderr=io.StringIO(),
              instance=instance)
    assert rc == 0
    assert json.loads(out.getvalue())["fractional"] == \
        {"total_value": 6.0, "selected": "0.60 of Item 1"}
