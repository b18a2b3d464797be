# Configure default usage of pytest in this package
import pytest

def pytest_addoption(parser):
    parser.addoption("--run-examples",
                     action="store_true",
                     default=False,
                     help=("run tests on examples "
                           "(requires the package to be installed)"))

def pytest_configure(config):
    config.addinivalue_line("markers",
                            "example: runs an example script")

def pytest_collection_modifyitems(config, items):
    if not config.getoption("--run-examples"):
        skip_example = pytest.mark.skip(reason="need --run-examples option to run")
        for item in items:
            if "example" in item.keywords:
                item.add_marker(skip_example)
