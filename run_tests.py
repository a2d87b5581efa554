#!/usr/bin/env python3
"""Test runner for the WorkOS Python SDK.

This script provides different test execution modes:
- Unit tests only (mocked, fast)
- Integration tests only (requires WORKOS_API_KEY)
- All tests (unit + integration)
"""

import argparse
import os
import sys

import pytest


def main():
    """Main test runner entry point."""
    parser = argparse.ArgumentParser(description="Run WorkOS SDK tests")
    parser.add_argument(
        "--mode",
        choices=["unit", "integration", "all"],
        default="unit",
        help="Test mode to run (default: unit)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--coverage",
        action="store_true",
        help="Run with coverage reporting"
    )

    args = parser.parse_args()

    pytest_args = []

    if args.verbose:
        pytest_args.append("-v")

    if args.coverage:
        pytest_args.extend([
            "--cov=workos_sdk",
            "--cov-report=html",
            "--cov-report=term-missing"
        ])

    if args.mode == "unit":
        pytest_args.extend([
            "tests/",
            "--ignore=tests/integration",
            "-m", "not integration"
        ])
        print("🧪 Running unit tests (mocked)...")

    elif args.mode == "integration":
        if not os.environ.get("WORKOS_API_KEY"):
            print("⚠️  WORKOS_API_KEY is not set, integration tests will be skipped")
        pytest_args.extend([
            "tests/integration/",
            "-m", "integration"
        ])
        print("🚀 Running integration tests against the live API...")

    elif args.mode == "all":
        pytest_args.append("tests/")
        print("🔄 Running all tests (unit + integration)...")

    exit_code = pytest.main(pytest_args)

    if exit_code == 0:
        print(f"✅ {args.mode.title()} tests passed!")
    else:
        print(f"❌ {args.mode.title()} tests failed!")
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
