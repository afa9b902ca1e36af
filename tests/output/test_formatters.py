"""Tests for output mode selection."""

import json

from budgetgraph.output.formatters import OutputSettings, format_result
from budgetgraph.services.result import ServiceError, ServiceResult

_TRAVERSAL = ServiceResult(
    ok=True,
    op="traverse",
    data={"start": 1, "mode": "bfs", "directed": True, "count": 3, "items": [1, 2, 3]},
)


class TestFormatResult:
    def test_default_is_rich_text(self) -> None:
        output = format_result(_TRAVERSAL)
        assert "BFS from 1" in output
        assert not output.lstrip().startswith("{")

    def test_json_mode(self) -> None:
        output = format_result(_TRAVERSAL, settings=OutputSettings(json_output=True))
        parsed = json.loads(output)
        assert parsed["ok"] is True
        assert parsed["data"]["items"] == [1, 2, 3]

    def test_quiet_mode(self) -> None:
        output = format_result(_TRAVERSAL, settings=OutputSettings(quiet=True))
        assert output == "1\n2\n3"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(
            _TRAVERSAL, settings=OutputSettings(json_output=True, quiet=True)
        )
        assert json.loads(output)["op"] == "traverse"

    def test_json_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="traverse_categories",
            error=ServiceError(code="INVALID_INPUT", message="bad"),
        )
        parsed = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert parsed["ok"] is False
        assert parsed["error"]["code"] == "INVALID_INPUT"
