"""Tests for the symbol inventory."""

from lite_bundle.core.models import UnitError
from lite_bundle.core.symbol_index import scan_symbols

from conftest import make_units


def by_name(symbols):
    return {s.name: s for s in symbols}


def test_three_declaration_shapes():
    units = make_units({"m": "function myFunc(a,b){return a+b;} const myArrow=()=>{}; class MyClass{}"})
    symbols = scan_symbols(units)
    assert [s.name for s in symbols] == ["myFunc", "myArrow", "MyClass"]

    found = by_name(symbols)
    assert found["myFunc"].kind == "function"
    assert list(found["myFunc"].parameters) == ["a", "b"]
    assert "function myFunc(a, b)" in found["myFunc"].signature

    assert found["myArrow"].kind == "variable_function"
    assert found["myArrow"].signature == "const myArrow = () => ..."
    assert found["myArrow"].parameters == ()

    assert found["MyClass"].kind == "class"
    assert found["MyClass"].signature == "class MyClass"
    assert found["MyClass"].parameters == ()


def test_descriptor_carries_unit_identity():
    units = make_units({"42": "function f() {}"}, paths={"42": "./src/f.js"})
    (sym,) = scan_symbols(units)
    assert sym.unit_id == "42"
    assert sym.unit_path == "./src/f.js"
    assert sym.to_dict()["parameters"] == []


def test_parameter_rendering():
    units = make_units({"m": "function f(a, b = 1, { c }, [d], ...rest) {}"})
    (sym,) = scan_symbols(units)
    assert list(sym.parameters) == ["a", "b?", "{destructured}", "{destructured}", "...rest"]
    assert sym.signature == "function f(a, b?, {destructured}, {destructured}, ...rest)"


def test_function_expression_and_arrow_shorthand():
    code = "var handler = function (event) { return event; };\nlet double = x => x * 2;\n"
    symbols = by_name(scan_symbols(make_units({"m": code})))
    assert symbols["handler"].signature == "var handler = function(event) ..."
    assert list(symbols["double"].parameters) == ["x"]
    assert symbols["double"].signature == "let double = (x) => ..."


def test_non_function_variables_are_ignored():
    symbols = scan_symbols(make_units({"m": "const a = 1; const b = { f() {} }; const { c } = () => {};"}))
    assert symbols == []


def test_line_numbers_and_count():
    code = "// header\nfunction multi(a) {\n  a();\n  return a;\n}\n"
    (sym,) = scan_symbols(make_units({"m": code}))
    assert sym.start_line == 2
    assert sym.line_count == 4


def test_preorder_within_unit_then_unit_order():
    units = make_units(
        {
            "1": "function outer() { function inner() {} }",
            "2": "class Later {}",
        }
    )
    assert [s.name for s in scan_symbols(units)] == ["outer", "inner", "Later"]


def test_limit_truncates_across_units():
    units = make_units({"1": "function a() {} function b() {}", "2": "function c() {}"})
    assert [s.name for s in scan_symbols(units, limit=2)] == ["a", "b"]
    assert [s.name for s in scan_symbols(units, limit=3)] == ["a", "b", "c"]
    assert scan_symbols(units, limit=0) == []


def test_unparseable_unit_is_skipped():
    units = make_units({"bad": "function (", "good": "function ok() {}"})
    skipped = []
    symbols = scan_symbols(units, skipped=skipped)
    assert [s.name for s in symbols] == ["ok"]
    assert len(skipped) == 1
    assert isinstance(skipped[0], UnitError)
    assert skipped[0].unit_id == "bad"
