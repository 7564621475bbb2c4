import pytest

from trifuzz.fuzzy.model.presets import cruise, dual, grid, inverter
from trifuzz.fuzzy.model.system import FuzzySystem


@pytest.fixture
def inverter_system():
    # x: negative(-2,-1,0) zero(-1,0,1) positive(0,1,2); y mirrored by the rules
    return inverter()


@pytest.fixture
def cruise_system():
    return cruise()


@pytest.fixture
def dual_system():
    return dual()


@pytest.fixture
def grid_system():
    return grid()


@pytest.fixture
def two_input_system():
    """a, b -> out, with terms chosen so degrees 0.3 and 0.7 are easy to hit."""
    fs = FuzzySystem(2, 1)
    fs.init_input_variable(0, 1, "a")
    fs.set_input_term(0, 0, 0.0, 1.0, 2.0, "high")
    fs.init_input_variable(1, 1, "b")
    fs.set_input_term(0, 1, 0.0, 1.0, 2.0, "high")
    fs.init_output_variable(0, 2, "out")
    fs.set_output_term(0, 0, -1.0, 0.0, 1.0, "low")
    fs.set_output_term(1, 0, 1.0, 2.0, 3.0, "high")
    fs.add_rule("if a is high and b is high then out is high")
    return fs


@pytest.fixture
def narrow_output_system():
    """Output term narrower than the integration step: the rule fires, the scan sees no area."""
    fs = FuzzySystem(1, 1)
    fs.init_input_variable(0, 1, "x")
    fs.set_input_term(0, 0, -1.0, 0.0, 1.0, "zero")
    fs.init_output_variable(0, 1, "y")
    fs.set_output_term(0, 0, 0.0, 0.005, 0.01, "tiny")
    fs.add_rule("if x is zero then y is tiny")
    return fs
