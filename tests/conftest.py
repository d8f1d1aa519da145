import datetime
import logging

import pytest


# Get the result of each test
@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


# Real-time print of start, end and duration of each test
@pytest.fixture(autouse=True)
def log_test_lifecycle(request):
    node_id = request.node.nodeid
    started = datetime.datetime.now()

    print(f"\n[START] {started.strftime('%H:%M:%S')} - Running: {node_id}")

    yield

    elapsed = (datetime.datetime.now() - started).total_seconds()
    report = getattr(request.node, "rep_call", None)

    if report:
        if report.passed:
            status = "PASSED"
        elif report.failed:
            status = "FAILED"
        else:
            status = report.outcome.upper()
    else:
        status = "UNKNOWN"

    print(f"\n[END] {elapsed:.2f}s - Result: {status} - {node_id}")


# Restore the package log level after tests that change it (e.g. the CLI)
@pytest.fixture(autouse=True)
def package_log_level():
    logger = logging.getLogger("sudoku")
    level = logger.level
    yield
    logger.setLevel(level)
