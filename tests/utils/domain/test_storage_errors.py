"""Tests for translating storage failures into PersistenceError."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.exceptions import PersistenceError
from storefront.utils.storage import storage_errors


class TestStorageErrors:
    def test_driver_failure_becomes_persistence_error(self):
        with pytest.raises(PersistenceError) as exc:
            with storage_errors("read order", order_id="o-1"):
                raise ConnectionError("connection reset")
        assert exc.value.message == "could not read order: connection reset"
        assert isinstance(exc.value.__cause__, ConnectionError)

    @pytest.mark.parametrize(
        "error",
        [
            ObjectNotFoundError("missing"),
            ValidationError({"name": ["required"]}),
            PersistenceError("already translated"),
        ],
    )
    def test_domain_errors_pass_through(self, error):
        with pytest.raises(type(error)) as exc:
            with storage_errors("read order"):
                raise error
        assert exc.value is error

    def test_success_is_untouched(self):
        with storage_errors("read order"):
            value = 42
        assert value == 42
