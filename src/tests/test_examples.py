import os
import sys
import glob
import subprocess
import tempfile

import pytest
import yaml

thisfile = os.path.abspath(__file__)
thisdir = os.path.dirname(thisfile)
topdir = os.path.dirname(
            os.path.dirname(thisdir))
exdir = os.path.join(topdir, "examples")
baselinedir = os.path.join(thisdir, "example_baselines")

assert os.path.exists(exdir)

tdict = {}
for fname in sorted(glob.glob(
        os.path.join(exdir,"command_line_problems","*.py"))):
    basename = os.path.basename(fname)[:-3]
    tdict["test_"+basename] = \
        ([sys.executable, fname],
         os.path.join(baselinedir, basename+".yaml"))
for fname in sorted(glob.glob(
        os.path.join(exdir,"instances","*"))):
    basename = os.path.splitext(os.path.basename(fname))[0]
    tdict["test_"+basename+"_input"] = \
        ([sys.executable, "-m", "pyknapsack.cli", "--input", fname],
         os.path.join(baselinedir, basename+".yaml"))
# the textbook instance is provided both as a script and a file
assert "test_textbook_knapsack" in tdict
assert "test_textbook_input" in tdict
tdict["test_textbook_knapsack"] = \
    (tdict["test_textbook_knapsack"][0],
     tdict["test_textbook_input"][1])

def _round_floats(val):
    if type(val) is float:
        return round(val, 4)
    if type(val) is list:
        return [_round_floats(v_) for v_ in val]
    if type(val) is dict:
        return {k_: _round_floats(v_) for k_, v_ in val.items()}
    return val

@pytest.mark.parametrize("example_name",
                         sorted(tdict))
@pytest.mark.parametrize("table",
                         ["full", "compact"])
@pytest.mark.example
def test_example(example_name, table):
    cmd, baseline_filename = tdict[example_name]
    assert os.path.exists(baseline_filename)
    fid, results_filename = tempfile.mkstemp()
    os.close(fid)
    try:
        rc = subprocess.call(cmd + \
                             ["--table-strategy", table,
                              "--results-filename",
                              results_filename],
                             stdout=subprocess.DEVNULL)
        assert rc == 0
        with open(results_filename) as f:
            results = yaml.safe_load(f)
        with open(baseline_filename) as f:
            baseline_results = yaml.safe_load(f)
        assert _round_floats(results) == \
            _round_floats(baseline_results)
    finally:
        os.remove(results_filename)
