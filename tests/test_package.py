"""
Tests for the package surface: explicit imports, no ambient globals.
"""

import builtins

import pytest

import pynumerics


@pytest.mark.parametrize("name", ["matrix", "numerical", "statistics", "finance", "mathutils"])
def test_submodules_importable(name):
    module = getattr(pynumerics, name)
    for symbol in module.__all__:
        assert hasattr(module, symbol)


def test_no_builtins_registration():
    for name in ("Matrix", "Numerical", "Statistics", "Finance", "MathUtils"):
        assert not hasattr(builtins, name)


def test_version():
    assert pynumerics.__version__ == "0.1.0"
