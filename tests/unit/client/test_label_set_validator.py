"""Unit tests for LabelSetValidator."""

from __future__ import annotations

import pytest

from mp_metrics.client import LabelSetValidator
from mp_metrics.errors import InvalidLabelError, InvalidLabelSetError, ReservedLabelError


class TestValidateSymbols:
    def test_accepts_list_of_names(self) -> None:
        v = LabelSetValidator(["method", "path"])
        assert v.validate_symbols(["method", "path"]) is True

    def test_accepts_mapping_keys(self) -> None:
        v = LabelSetValidator(["method"])
        assert v.validate_symbols({"method": "get"}) is True

    def test_empty_is_valid(self) -> None:
        assert LabelSetValidator().validate_symbols([]) is True

    def test_rejects_non_string_name(self) -> None:
        with pytest.raises(InvalidLabelError):
            LabelSetValidator().validate_symbols([1])

    @pytest.mark.parametrize("name", ["1abc", "with-dash", "", "a b", "x:y"])
    def test_rejects_malformed_name(self, name: str) -> None:
        with pytest.raises(InvalidLabelError):
            LabelSetValidator().validate_symbols([name])

    def test_rejects_reserved_name(self) -> None:
        v = LabelSetValidator(reserved_labels=["le"])
        with pytest.raises(ReservedLabelError):
            v.validate_symbols({"le": "0.5"})

    def test_rejects_double_underscore_prefix(self) -> None:
        with pytest.raises(ReservedLabelError):
            LabelSetValidator().validate_symbols(["__name__"])

    def test_does_not_mutate_input(self) -> None:
        labels = {"method": "get"}
        LabelSetValidator(["method"]).validate_symbols(labels)
        assert labels == {"method": "get"}


class TestValidateLabelset:
    def test_exact_match_returns_same_object(self) -> None:
        v = LabelSetValidator(["code", "method"])
        labelset = {"method": "get", "code": "200"}
        assert v.validate_labelset(labelset) is labelset

    def test_missing_label(self) -> None:
        v = LabelSetValidator(["code", "method"])
        with pytest.raises(InvalidLabelSetError):
            v.validate_labelset({"code": "200"})

    def test_extra_label(self) -> None:
        v = LabelSetValidator(["code"])
        with pytest.raises(InvalidLabelSetError):
            v.validate_labelset({"code": "200", "method": "get"})

    def test_empty_schema_accepts_empty_labelset(self) -> None:
        assert LabelSetValidator().validate_labelset({}) == {}

    def test_error_lists_expected_and_got(self) -> None:
        v = LabelSetValidator(["b", "a"])
        with pytest.raises(InvalidLabelSetError) as exc_info:
            v.validate_labelset({"c": "1"})
        assert exc_info.value.expected == ["a", "b"]
        assert exc_info.value.got == ["c"]
