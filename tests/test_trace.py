"""Tests for the trace event log."""

from secretsolver.trace import Trace, jsonable


def test_append_and_entries():
    trace = Trace()
    trace.append("parameters", {"n": 4, "k": 3, "degree": 2})
    trace.append("result", {"secret": 3, "exact": True, "numerator": 3, "denominator": 1})
    assert len(trace) == 2
    entries = trace.entries()
    assert [e["event"] for e in entries] == ["parameters", "result"]
    assert entries[0]["data"]["k"] == 3


def test_filter_by_event():
    trace = Trace()
    trace.append("a", {})
    trace.append("b", {})
    trace.append("a", {})
    assert len(trace.events("a")) == 2
    assert len(trace.events()) == 3


def test_subscribers_see_events_in_order():
    trace = Trace()
    seen = []
    trace.subscribe(lambda e: seen.append(e.event))
    trace.append("first", {})
    trace.append("second", {})
    assert seen == ["first", "second"]


def test_render():
    trace = Trace()
    trace.append("parameters", {"n": 4, "k": 3, "degree": 2})
    trace.append("base_conversion", {"x": 2, "base": 2, "value": "111", "y": 7})
    trace.append(
        "selection",
        {"available": 4, "used": 3, "points": [[1, 4], [2, 7], [3, 12]]},
    )
    trace.append(
        "term",
        {
            "index": 0,
            "x": 1,
            "y": 4,
            "factors": [[-2, -1], [-3, -2]],
            "numerator": 24,
            "denominator": 2,
        },
    )
    trace.append("result", {"secret": 3, "exact": True, "numerator": 3, "denominator": 1})
    lines = trace.render()
    assert "Polynomial degree: 2" in lines
    assert 'x=2: base2("111") = 7' in lines
    assert "Using first 3 points out of 4 available" in lines
    assert "Points: (1, 4), (2, 7), (3, 12)" in lines
    assert "L1(0) = (-2)/(-1) x (-3)/(-2)" in lines
    assert lines[-1] == "Secret: 3"


def test_render_suspect_result():
    trace = Trace()
    trace.append("result", {"secret": 0, "exact": False, "numerator": 1, "denominator": 2})
    lines = trace.render()
    assert lines[0].startswith("Warning: result is not an integer (1/2)")
    assert lines[1] == "Secret (truncated): 0"


def test_render_unknown_event():
    trace = Trace()
    trace.append("accumulate", {"numerator": 3, "denominator": 2})
    assert trace.render() == ["numerator=3, denominator=2"]


def test_render_wide_int_as_hex():
    wide = 2 ** 20000 + 1
    trace = Trace()
    trace.append("result", {"secret": wide, "exact": True, "numerator": wide, "denominator": 1})
    assert trace.render() == [f"Secret: {hex(wide)}"]


def test_jsonable():
    data = {"n": 4, "exact": True, "points": [[1, 2 ** 20000]], "value": "ff", "t": 1.5}
    assert jsonable(data) == {
        "n": "4",
        "exact": True,
        "points": [["1", hex(2 ** 20000)]],
        "value": "ff",
        "t": 1.5,
    }
