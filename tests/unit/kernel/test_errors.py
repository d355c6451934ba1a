"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from infinilist.kernel.errors import (
    BaseError,
    EmptyValueError,
    EvaluationError,
    ExhaustedError,
    NullPayloadError,
    ReentrantForceError,
    SequenceError,
    ValueAccessError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_to_dict_includes_cause_repr(self) -> None:
        cause = ValueError("original")
        err = BaseError("wrapper", cause=cause, detail={"k": 1})
        d = err.to_dict()
        assert d["detail"] == {"k": 1}
        assert "original" in d["cause"]
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops")))
        assert parsed == {"code": "oops", "message": "oops", "detail": {}}

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r and "hello" in r


class TestHierarchy:
    @pytest.mark.parametrize(
        ("error", "parent", "code"),
        [
            (ExhaustedError("head"), SequenceError, "exhausted"),
            (EmptyValueError(), ValueAccessError, "empty_value"),
            (NullPayloadError(), ValueAccessError, "null_payload"),
            (ReentrantForceError("again"), EvaluationError, "reentrant_force"),
        ],
    )
    def test_parent_and_code(self, error: BaseError, parent: type[BaseError], code: str) -> None:
        assert isinstance(error, parent)
        assert isinstance(error, BaseError)
        assert error.code == code

    def test_exhausted_records_operation(self) -> None:
        err = ExhaustedError("tail")
        assert err.operation == "tail"
        assert "tail()" in err.message
        assert err.to_dict()["detail"] == {"operation": "tail"}

    def test_exhausted_merges_extra_detail(self) -> None:
        err = ExhaustedError("head", detail={"index": 3}, code="ran_out")
        assert err.code == "ran_out"
        assert err.detail == {"operation": "head", "index": 3}
