"""
Shared fixtures for the LGGC test-suite
"""

import os
import sys

import pytest

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from largegap import Code, CodeBuilder


@pytest.fixture(scope="session")
def builder():
    """One builder per session so canonical codes are only built once"""
    return CodeBuilder()


@pytest.fixture
def brgc3():
    """3-bit reflected binary Gray code"""
    return Code([0, 1, 3, 2, 6, 7, 5, 4], 3)
