"""Tests for the blast_points package surface."""

import pytest

import blast_points


def test_all_names_resolve():
    for name in blast_points.__all__:
        assert getattr(blast_points, name) is not None


@pytest.mark.parametrize("name", ["AuthenticationHelper", "TokenManager", "ResponseParser"])
def test_internal_helpers_not_exposed(name):
    assert name not in blast_points.__all__
    assert not hasattr(blast_points, name)
