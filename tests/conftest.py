"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def features_csv() -> str:
    """Three-row feature matrix: one header row followed by two marked rows."""
    return "Features,,\nFeature 1,x,\nFeature 2,,x\n"
