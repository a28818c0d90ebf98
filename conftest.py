"""Test fixtures for pytest."""

import pytest

import pulltimer

def pytest_addoption(parser):
    """Add command-line options to pytest."""
    parser.addoption(
        "--run-benchmarks", action="store_true", default=False,
        help="run benchmark tests (large event volumes)"
    )

def pytest_configure(config):
    """Define benchmark pytest mark."""
    config.addinivalue_line("markers", "benchmark: mark test as a benchmark")

def pytest_collection_modifyitems(config, items):
    """Only run benchmark tests when --run-benchmarks is used."""
    if not config.getoption("--run-benchmarks"):
        skip_bench = pytest.mark.skip(reason="need --run-benchmarks option to run")
        for item in items:
            if "benchmark" in item.keywords:
                item.add_marker(skip_bench)


@pytest.fixture
def timer():
    """Provide a fresh TimerQueue with the clock at zero."""
    return pulltimer.TimerQueue()


@pytest.fixture(params=[pulltimer.Regression.CLAMP,
                        pulltimer.Regression.REJECT,
                        pulltimer.Regression.ACCEPT])
def any_policy_timer(request):
    """Allow a test to iterate across all clock regression policies."""
    return pulltimer.TimerQueue(regression=request.param)
