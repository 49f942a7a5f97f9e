# tests/conftest.py
import os
import sys

# Ensure project root is importable (so emwa.* / runners.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

@pytest.fixture
def static_factory():
    from emwa import EMWA, Smoothing
    def make(alpha=0.5):
        return EMWA(alpha, Smoothing.STATIC)
    return make

@pytest.fixture
def dynamic_factory():
    from emwa import EMWA, Smoothing
    def make(alpha=0.5):
        return EMWA(alpha, Smoothing.DYNAMIC)
    return make
