import logging
from decimal import Decimal

import pytest

from fluent_compare import IncomparableError, compare, is_


def test_compare_returns_sign():
    assert compare(1, 2) == -1
    assert compare(2, 2) == 0
    assert compare(3, 2) == 1
    assert compare(Decimal("1.0"), Decimal("1")) == 0


def test_compare_partial_order_subset():
    assert compare({1}, {1, 2}) == -1
    assert compare({1, 2}, {1}) == 1


def test_compare_raises_for_unrelated_values(caplog):
    caplog.set_level(logging.DEBUG, logger="fluent_compare.core.ordering")
    with pytest.raises(IncomparableError) as excinfo:
        compare({1}, {2})
    assert excinfo.value.left == {1}
    assert excinfo.value.right == {2}
    assert "No order relation" in caplog.text


def test_nan_is_never_equal_but_cannot_be_ordered():
    nan = float("nan")
    assert is_(nan).equal_to(1.0) is False
    assert is_(nan).equal_to(nan) is False
    assert is_(1.0).ne(nan) is True
    with pytest.raises(IncomparableError):
        is_(nan).less_than(1.0)
    with pytest.raises(IncomparableError):
        is_(1.0).ge(nan)


def test_compare_propagates_type_error_for_none():
    with pytest.raises(TypeError):
        compare(None, 1)


def test_core_package_exports_lazily():
    from fluent_compare import core

    assert core.compare is compare
    assert core.is_ is is_
    with pytest.raises(AttributeError):
        core.missing  # noqa: B018


def test_orderable_is_a_static_bound_only():
    from fluent_compare import Orderable

    with pytest.raises(TypeError):
        isinstance(None, Orderable)
