"""Tests for :mod:`config` and :mod:`formats`."""

import pytest

import config
from formats import FLOAT64


@pytest.fixture
def restore_debug():
    previous = config.is_debug()
    yield
    config.set_debug(previous)


def test_limb_widths():
    assert config.LIMB_BITS == 32
    assert config.CHUNK_BITS == 16


def test_set_debug(restore_debug, capsys):
    config.set_debug(True)
    assert config.is_debug()
    config.debug("hello")
    assert capsys.readouterr().err == "[DBG] hello\n"

    config.set_debug(False)
    assert not config.is_debug()
    config.debug("hello")
    assert capsys.readouterr().err == ""


def test_float64_format():
    assert FLOAT64.p == 53
    assert FLOAT64.eps == 2.0 ** -52
    assert FLOAT64.Fmax == 1.7976931348623157e308
    assert FLOAT64.fits(10**308)
    assert not FLOAT64.fits(10**309)
    assert FLOAT64.fits(-FLOAT64.max_int)
    assert float(FLOAT64.max_int) == FLOAT64.Fmax
