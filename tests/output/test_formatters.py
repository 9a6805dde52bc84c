"""Tests for ServiceResult formatting."""

import json

from clubctl.output.formatters import format_result
from clubctl.services.result import ErrorCode, ServiceResult


class TestFormatResult:
    def test_generic_success(self) -> None:
        result = ServiceResult(ok=True, op="quote", data={"name": "Ivan", "price": 500.0})
        output = format_result(result)
        assert output.splitlines() == ["OK: quote", "  name: Ivan", "  price: 500.0"]

    def test_nested_values_rendered_as_json(self) -> None:
        result = ServiceResult(ok=True, op="custom", data={"tags": ["a", "b"]})
        assert '  tags: ["a","b"]' in format_result(result)

    def test_error(self) -> None:
        result = ServiceResult.failure("quote", ErrorCode.MEMBERSHIP_EXPIRED, "Membership expired")
        assert format_result(result) == "ERROR: quote - Membership expired"

    def test_types_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="types",
            data={"items": [{"type": "month", "price": 500.0}], "count": 1},
        )
        output = format_result(result)
        assert "Membership types" in output
        assert "month" in output
        assert "500.0" in output

    def test_json(self) -> None:
        result = ServiceResult(ok=True, op="quote", data={"price": 500.0})
        parsed = json.loads(format_result(result, json_output=True))
        assert parsed["data"]["price"] == 500.0
