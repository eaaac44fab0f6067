"""Minimal runner shared by the in-package test modules.

Test functions use plain ``assert`` so pytest collects them directly; this
runner lets ``pid-step test`` execute the same functions without pytest.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple


class TestResult:
    __test__ = False

    def __init__(self, name: str):
        self.name = name
        self.passed = False
        self.error: Optional[str] = None

    def __repr__(self) -> str:
        status = "PASS" if self.passed else f"FAIL: {self.error}"
        return f"{self.name}: {status}"


def run_tests(tests: Sequence[Callable[[], None]]) -> Tuple[int, int, List[TestResult]]:
    """Run all tests and return (passed, total, results)."""
    results = []
    passed = 0
    for test_func in tests:
        logging.info("Running %s...", test_func.__name__)
        result = TestResult(test_func.__name__)
        try:
            test_func()
            result.passed = True
        except AssertionError as e:
            result.error = str(e) or "assertion failed"
        except Exception as e:
            result.error = f"{type(e).__name__}: {e}"
        results.append(result)
        if result.passed:
            passed += 1
            logging.info("  PASS")
        else:
            logging.error("  FAIL: %s", result.error)

    return passed, len(tests), results


def print_summary(title: str, passed: int, total: int, results: Sequence[TestResult]) -> None:
    print("=" * 60)
    print(title)
    print("=" * 60)
    print(f"Results: {passed}/{total} tests passed")
    for r in results:
        status = "✓ PASS" if r.passed else "✗ FAIL"
        print(f"  {status}: {r.name}")
        if not r.passed and r.error:
            print(f"         Error: {r.error}")
