"""Pretty-printing through jsbeautifier (JS) and cssbeautifier (CSS)."""

from __future__ import annotations

import cssbeautifier
import jsbeautifier

from ..errors import FormatError


SUPPORTED_PARSERS = ("babel", "css")


def pretty_print(text: str, *, parser: str = "babel", indent_size: int = 2) -> str:
    """Format ``text``; ``parser`` picks the beautifier."""
    if parser not in SUPPORTED_PARSERS:
        raise FormatError(
            f"Unsupported parser: {parser}. Supported parsers: {', '.join(SUPPORTED_PARSERS)}",
            details={"parser": parser},
        )
    try:
        if parser == "css":
            opts = cssbeautifier.default_options()
            opts.indent_size = indent_size
            return cssbeautifier.beautify(text, opts)
        opts = jsbeautifier.default_options()
        opts.indent_size = indent_size
        opts.end_with_newline = True
        return jsbeautifier.beautify(text, opts)
    except Exception as e:
        raise FormatError(f"Failed to format code: {e}", details={"parser": parser}) from e
