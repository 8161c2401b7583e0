import pytest

from lineforth import Forth


@pytest.fixture
def forth():
    """A fresh interpreter with only the primitive words defined"""
    return Forth()


@pytest.fixture
def run(forth):
    """Feed lines to `forth` in order and return the last response"""
    def feed(*lines):
        response = None
        for line in lines:
            response = forth.read_line(line)
        return response
    return feed
