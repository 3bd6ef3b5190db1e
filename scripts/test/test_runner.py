#!/usr/bin/env python3
"""
Tests for the script test runner (scripts/test/runner.py)
Run from project root: python scripts/test/test_runner.py
"""

import io
import sys
from contextlib import redirect_stdout

from runner import TestRunner


def run_quietly(tests):
    """Run tests through a fresh TestRunner with its report swallowed"""
    runner = TestRunner()
    with redirect_stdout(io.StringIO()):
        exit_code = runner.run_all(tests)
    return runner, exit_code


def test_passing_tests_exit_zero():
    def passes():
        assert True

    runner, exit_code = run_quietly([("Passes", passes)])
    assert exit_code == 0
    assert runner.passed == 1
    assert runner.failed == 0


def test_missing_file_counts_as_failure():
    def raises_missing_file():
        raise FileNotFoundError("listing vanished")

    runner, exit_code = run_quietly([("Missing File", raises_missing_file)])
    assert exit_code == 1
    assert runner.failed == 1
    assert runner.passed == 0
    assert runner.errors[0]['test'] == "Missing File"
    assert runner.errors[0]['error'] == "listing vanished"


def test_failures_do_not_stop_remaining_tests():
    def fails():
        raise AssertionError("wrong glyph")

    def passes():
        pass

    runner, exit_code = run_quietly([("Fails", fails), ("Passes", passes)])
    assert exit_code == 1
    assert runner.failed == 1
    assert runner.passed == 1


def main():
    runner = TestRunner()
    tests = [
        ("Passing Tests", test_passing_tests_exit_zero),
        ("Missing File Fails", test_missing_file_counts_as_failure),
        ("Failures Continue", test_failures_do_not_stop_remaining_tests),
    ]
    return runner.run_all(tests)


if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)
