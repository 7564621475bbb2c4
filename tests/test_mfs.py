import pytest

from trifuzz.fuzzy.core.mfs import MembershipFunction, membership
from trifuzz.fuzzy.core.types import ConfigurationError, DegenerateMembershipFunction


@pytest.fixture
def tri():
    return MembershipFunction(-1.0, 0.0, 1.0, "zero")


@pytest.mark.parametrize("x", [-5.0, -1.0, 1.0, 1.5, 100.0])
def test_zero_outside_open_support(tri, x):
    assert membership(tri, x) == 0.0


def test_one_at_apex(tri):
    assert membership(tri, 0.0) == 1.0


def test_half_way_on_both_ramps(tri):
    assert membership(tri, -0.5) == pytest.approx(0.5)
    assert membership(tri, 0.5) == pytest.approx(0.5)


def test_asymmetric_ramps():
    f = MembershipFunction(0.0, 1.0, 5.0, "skew")
    assert f.mu(0.25) == pytest.approx(0.25)
    assert f.mu(3.0) == pytest.approx(0.5)


def test_shoulders_are_allowed():
    left_shoulder = MembershipFunction(0.0, 0.0, 1.0, "falling")
    right_shoulder = MembershipFunction(0.0, 1.0, 1.0, "rising")
    assert left_shoulder.mu(0.25) == pytest.approx(0.75)
    assert right_shoulder.mu(0.25) == pytest.approx(0.25)
    # the vertical side is an open end point
    assert left_shoulder.mu(0.0) == 0.0
    assert right_shoulder.mu(1.0) == 0.0


@pytest.mark.parametrize("points", [(1.0, 0.0, 2.0), (0.0, 3.0, 2.0), (1.0, 1.0, 1.0)])
def test_degenerate_functions_rejected(points):
    with pytest.raises(DegenerateMembershipFunction) as ei:
        MembershipFunction(*points, name="bad")
    assert isinstance(ei.value, ConfigurationError)
    assert isinstance(ei.value, ValueError)
    assert ei.value.points == points


def test_support_and_contains(tri):
    assert tri.support() == (-1.0, 1.0)
    assert tri.contains(0.99)
    assert not tri.contains(1.0)
    assert not tri.contains(-1.0)
