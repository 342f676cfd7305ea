"""Run all tests for BlueprintExportBridge."""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))


def main() -> int:
    """Run the test suite and return pytest's exit code."""
    print("Running BlueprintExportBridge Test Suite")
    print("=" * 60)
    return pytest.main([str(Path(__file__).parent / "tests"), "-v", "--tb=short", *sys.argv[1:]])


if __name__ == "__main__":
    sys.exit(main())
