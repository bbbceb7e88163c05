"""
Tests for right-to-left function composition.
"""

from statekit.core.compose import compose


def double(x):
    return x * 2


def square(x):
    return x * x


def add_one(x):
    return x + 1


def test_compose_no_functions_is_identity():
    """compose() returns its argument unchanged."""
    obj = object()
    assert compose()(obj) is obj
    assert compose()(5) == 5


def test_compose_single_function_returned_unchanged():
    """compose(f) is f itself, not a wrapper."""
    assert compose(double) is double


def test_compose_applies_right_to_left():
    """compose(f, g, h)(x) == f(g(h(x)))."""
    assert compose(double, square, add_one)(2) == double(square(add_one(2)))
    assert compose(double, square, add_one)(2) == 18
    assert compose(add_one, square, double)(2) == 17


def test_compose_is_associative():
    """Grouping does not change the result."""
    for x in range(-3, 4):
        flat = compose(double, square, add_one)(x)
        assert compose(double, compose(square, add_one))(x) == flat
        assert compose(compose(double, square), add_one)(x) == flat


def test_compose_last_function_receives_all_arguments():
    """Rightmost function may take multiple positional and keyword arguments."""
    def add(a, b, c=0):
        return a + b + c

    composed = compose(square, add)
    assert composed(1, 2) == 9
    assert composed(1, 2, c=1) == 16


def test_compose_inner_functions_get_single_argument():
    """Every function but the last receives exactly the previous result."""
    seen = []

    def record(*args):
        seen.append(args)
        return args[0]

    compose(record, record, lambda a, b: a + b)(3, 4)
    assert seen == [(7,), (7,)]
