"""
Tests for pylibmat exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyLibmatError)
    - Diagnostic attributes on PreconditionError and its subclasses
    - IndexBoundsError doubles as a builtin IndexError
"""

import pytest

from pylibmat.core.exceptions import (
    DimensionError,
    IndexBoundsError,
    PreconditionError,
    PyLibmatError,
    ReadOnlyError,
    ValidationError,
    ViewBoundsError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyLibmatError."""

    def test_validation_error_is_pylibmat_error(self):
        with pytest.raises(PyLibmatError):
            raise ValidationError("bad input")

    def test_precondition_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise PreconditionError("contract broken")

    @pytest.mark.parametrize("exc", [
        DimensionError("shape"),
        IndexBoundsError("index"),
        ViewBoundsError("view"),
        ReadOnlyError("read-only"),
    ])
    def test_subclasses_are_precondition_errors(self, exc):
        with pytest.raises(PreconditionError):
            raise exc

    def test_index_bounds_error_is_index_error(self):
        with pytest.raises(IndexError):
            raise IndexBoundsError("out of range", index=5, bound=3, axis="row")


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestPreconditionError:

    def test_defaults(self):
        err = PreconditionError("broken")
        assert str(err) == "broken"
        assert err.invariant is None
        assert err.details == {}

    def test_details_are_copied(self):
        details = {'rows': 3}
        err = PreconditionError("broken", invariant="x", details=details)
        details['rows'] = 4
        assert err.details == {'rows': 3}
        assert err.invariant == "x"


class TestDimensionError:

    def test_all_attributes(self):
        err = DimensionError(
            "B: shape (2, 3) does not match A shape (3, 3)",
            expected=(3, 3),
            actual=(2, 3),
            invariant="same_shape",
        )
        assert err.expected == (3, 3)
        assert err.actual == (2, 3)
        assert err.invariant == "same_shape"
        assert err.details == {'expected': (3, 3), 'actual': (2, 3)}

    def test_defaults_are_none(self):
        err = DimensionError("wrong shape")
        assert err.expected is None
        assert err.actual is None


class TestIndexBoundsError:

    def test_all_attributes(self):
        err = IndexBoundsError("col 7", index=7, bound=4, axis="col")
        assert err.index == 7
        assert err.bound == 4
        assert err.axis == "col"
        assert err.details['index'] == 7


class TestViewBoundsError:

    def test_all_attributes(self):
        err = ViewBoundsError(
            "does not fit",
            offset=(1, 0),
            extent=(3, 2),
            parent_shape=(3, 2),
        )
        assert err.invariant == "view_within_parent"
        assert err.offset == (1, 0)
        assert err.extent == (3, 2)
        assert err.parent_shape == (3, 2)


class TestReadOnlyError:

    def test_invariant(self):
        err = ReadOnlyError("m: read-only")
        assert err.invariant == "mutable_storage"
        assert "read-only" in str(err)
