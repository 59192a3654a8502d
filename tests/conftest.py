import pytest

from pcapcodec.strictness import Strictness, get_strictness, set_strictness


@pytest.fixture
def strictness_level():
    """Change the strictness level for a single test"""
    previous = get_strictness()
    yield set_strictness
    set_strictness(previous)


@pytest.fixture
def fix_strictness(strictness_level):
    strictness_level(Strictness.FIX)
