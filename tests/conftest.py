import pytest

from asciisketch import Canvas


@pytest.fixture
def canvas():
    return Canvas(10, 10)
