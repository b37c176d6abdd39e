"""Tests for the line-delimited JSON transport."""

import json
from io import StringIO

from kanban_core.server import handle_line, serve
from kanban_core.store import BoardStore


def _run(lines):
    out = StringIO()
    handled = serve(BoardStore(), StringIO("".join(line + "\n" for line in lines)), out)
    return handled, [json.loads(line) for line in out.getvalue().splitlines()]


def test_serve_round_trip():
    requests = [
        {"id": 1, "method": "handle_add_card", "params": {"card": {"title": "Write tests"}, "pos": {"columnId": 1, "position": 0}}},
        {"id": 2, "method": "get_board", "params": {}},
    ]
    handled, responses = _run([json.dumps(r) for r in requests])
    assert handled == 2
    assert responses[0] == {"id": 1, "result": None}
    assert responses[1]["id"] == 2
    assert responses[1]["result"]["columns"][1]["cards"][0]["title"] == "Write tests"


def test_serve_skips_blank_lines():
    handled, responses = _run(["", json.dumps({"id": "a", "method": "get_board"}), "   "])
    assert handled == 1
    assert responses[0]["id"] == "a"


def test_serve_keeps_going_after_errors():
    lines = [
        "{not json",
        json.dumps({"id": 2, "method": "handle_remove_card", "params": {"card": {"id": 9}, "columnId": 0}}),
        json.dumps({"id": 3, "method": "get_board"}),
    ]
    handled, responses = _run(lines)
    assert handled == 3
    assert responses[0]["id"] is None
    assert responses[0]["error"]["kind"] == "InvalidArgument"
    assert responses[1] == {"id": 2, "error": {"kind": "NotFound", "message": "Card 9 not found"}}
    assert "result" in responses[2]


def test_handle_line_non_object():
    response = handle_line(BoardStore(), "[1, 2]")
    assert response["error"]["kind"] == "InvalidArgument"


def test_handle_line_missing_method():
    response = handle_line(BoardStore(), json.dumps({"id": 4}))
    assert response["id"] == 4
    assert response["error"]["message"] == "Request method must be a string"


def test_serve_oversized_integer_literal():
    huge = "1" * 5000
    lines = [
        '{"id": 1, "method": "handle_add_card", "params": {"card": {"id": %s, "title": "x"}, '
        '"pos": {"columnId": 0, "position": 0}}}' % huge,
        json.dumps({"id": 2, "method": "get_board"}),
    ]
    handled, responses = _run(lines)
    assert handled == 2
    assert responses[0]["error"]["kind"] == "InvalidArgument"
    assert [c["title"] for c in responses[1]["result"]["columns"][0]["cards"]] == ["Add kanban board"]


def test_serve_deeply_nested_request():
    handled, responses = _run(["[" * 100000, json.dumps({"id": 2, "method": "get_board"})])
    assert handled == 2
    assert responses[0] == {
        "id": None,
        "error": {"kind": "InvalidArgument", "message": "Request could not be decoded"},
    }
    assert responses[1]["id"] == 2
    assert "result" in responses[1]
