"""Tests for the default unpack collaborator and the formatter."""

import pytest

from lite_bundle.bundle.formatting import pretty_print
from lite_bundle.bundle.unpack import split_webpack, unpack
from lite_bundle.errors import FormatError


WEBPACK4_BUNDLE = """
(function(modules) {
  function __webpack_require__(id) {
    var module = { exports: {} };
    modules[id](module, module.exports, __webpack_require__);
    return module.exports;
  }
  return __webpack_require__(0);
})([
  function(module, exports, __webpack_require__) {
    console.log("entry point");
    __webpack_require__(1);
  },
  function(module, exports, __webpack_require__) {
    console.log("module 1");
  }
]);
"""

WEBPACK5_BUNDLE = """
(() => {
  var __webpack_modules__ = ({
    "./src/index.js": ((module, exports, require) => {
      require("./node_modules/lib/index.js");
    }),
    "./node_modules/lib/index.js": ((module) => {
      module.exports = 1;
    })
  });
})();
"""


def test_plain_code_is_not_a_bundle():
    result = unpack("function a(){ console.log('test') }")
    assert result.is_bundle is False
    assert result.units is None
    assert "function a()" in result.code


def test_unbundle_disabled_skips_splitting():
    result = unpack(WEBPACK4_BUNDLE, unbundle=False)
    assert result.units is None


def test_webpack4_array_bundle():
    result = unpack(WEBPACK4_BUNDLE)
    assert result.is_bundle
    assert [u.id for u in result.units] == ["0", "1"]
    assert [u.path for u in result.units] == ["./0.js", "./1.js"]
    assert 'console.log("module 1");' in result.units[1].text
    assert "entry point" not in result.units[1].text


def test_sparse_array_keeps_indices():
    code = "(function(m){ return m; })([, function(){ one(); }, , function(){ three(); }]);"
    units = split_webpack(code)
    assert [u.id for u in units] == ["1", "3"]
    assert units[1].text == "three();"


def test_webpack5_object_bundle():
    units = split_webpack(WEBPACK5_BUNDLE)
    assert [u.id for u in units] == ["./src/index.js", "./node_modules/lib/index.js"]
    assert units[0].path == "./src/index.js"
    assert units[1].text == "module.exports = 1;"


def test_table_with_non_function_entries_is_not_split():
    assert split_webpack("(function(m){ return m; })([1, 2]);") is None


def test_unparseable_source_is_not_split():
    assert split_webpack("function (") is None


def test_pretty_print_javascript():
    formatted = pretty_print("function a(){return 1}")
    assert "function a() {" in formatted
    assert "  return 1" in formatted


def test_pretty_print_css():
    assert "color: red" in pretty_print("a{color:red}", parser="css")


def test_pretty_print_rejects_unknown_parser():
    with pytest.raises(FormatError, match="Unsupported parser: html"):
        pretty_print("<p></p>", parser="html")


def test_repeated_object_key_keeps_last_factory():
    code = '(function(m){ return m; })({"./a.js": function(){ a(); }, "./b.js": function(){ b(); }, "./a.js": function(){ c(); }});'
    units = split_webpack(code)
    assert [u.id for u in units] == ["./a.js", "./b.js"]
    assert units[0].text == "c();"
