"""Tests for the TSX dialect."""

from lite_bundle.core.calls import build_call_graph
from lite_bundle.core.symbol_index import scan_symbols

from conftest import make_snapshot, make_units


TS_CODE = """
export function greet(name: string, greeting = "hi", title?: string, ...rest: string[]): string {
  return format(greeting, name);
}
const render = (props: { id: number }) => <div>{greet(props.id)}</div>;
abstract class Base {}
"""


def test_typescript_inventory():
    symbols = scan_symbols(make_units({"m": TS_CODE}), dialect="typescript")
    found = {s.name: s for s in symbols}
    assert list(found) == ["greet", "render", "Base"]
    assert list(found["greet"].parameters) == ["name", "greeting?", "title?", "...rest"]
    assert found["render"].signature == "const render = (props) => ..."
    assert found["Base"].kind == "class"


def test_typescript_call_graph():
    graph = build_call_graph(make_snapshot({"m": TS_CODE}), "greet", "m", dialect="typescript")
    assert {e.name for e in graph.outgoing} == {"format"}
    assert {e.caller_name for e in graph.incoming} == {"render"}


def test_typescript_syntax_fails_under_javascript_dialect():
    skipped = []
    assert scan_symbols(make_units({"m": TS_CODE}), skipped=skipped) == []
    assert [s.unit_id for s in skipped] == ["m"]
