"""Tests for configuration, input resolution and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from lite_bundle.config import DEFAULT_LIMIT, MAX_CODE_SIZE, BundleConfig, get_config, set_config
from lite_bundle.errors import InputTooLarge, MissingInput, SourceNotFound, SourceUnreadable
from lite_bundle.util.file_utils import read_source, resolve_source
from lite_bundle.util.log_utils import configure_logging


def test_defaults():
    config = BundleConfig()
    assert config.max_code_size == MAX_CODE_SIZE == 50 * 1024 * 1024
    assert config.default_limit == DEFAULT_LIMIT == 50
    assert config.dialect == "javascript"


def test_from_env(monkeypatch):
    monkeypatch.setenv("LITE_BUNDLE_DEFAULT_LIMIT", "5")
    monkeypatch.setenv("LITE_BUNDLE_DIALECT", "typescript")
    config = BundleConfig.from_env()
    assert config.default_limit == 5
    assert config.dialect == "typescript"


def test_invalid_env_value(monkeypatch):
    monkeypatch.setenv("LITE_BUNDLE_DEFAULT_LIMIT", "0")
    with pytest.raises(ValidationError):
        BundleConfig.from_env()


def test_set_config_overrides_process_config():
    custom = BundleConfig(default_limit=3)
    set_config(custom)
    assert get_config() is custom


def test_read_source_relative_to_workspace(tmp_path):
    (tmp_path / "a.js").write_text("const a = 1;", encoding="utf-8")
    config = BundleConfig(workspace_root=str(tmp_path))
    assert read_source("a.js", config) == "const a = 1;"
    with pytest.raises(SourceNotFound):
        read_source("missing.js", config)


def test_resolve_source():
    assert resolve_source(code="x") == "x"
    assert resolve_source(code="") == ""
    with pytest.raises(MissingInput):
        resolve_source()
    with pytest.raises(InputTooLarge, match="too large"):
        resolve_source(code="x" * 11, config=BundleConfig(max_code_size=10))


def test_configure_logging(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    logger = configure_logging(verbose=True, log_file=str(log_file))
    try:
        assert logger.name == "lite_bundle"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        logging.getLogger("lite_bundle.bundle.cache").info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def test_dialect_aliases_are_normalized():
    assert BundleConfig(dialect="TSX").dialect == "typescript"
    assert BundleConfig(dialect="js").dialect == "javascript"


def test_unknown_dialect_is_rejected(monkeypatch):
    with pytest.raises(ValidationError, match="Unsupported dialect"):
        BundleConfig(dialect="jvascript")
    monkeypatch.setenv("LITE_BUNDLE_DIALECT", "jvascript")
    with pytest.raises(ValidationError):
        BundleConfig.from_env()


def test_read_source_rejects_non_utf8(tmp_path):
    (tmp_path / "blob.js").write_bytes(b"var a = '\xff\xfe';")
    with pytest.raises(SourceUnreadable) as excinfo:
        read_source(str(tmp_path / "blob.js"))
    assert excinfo.value.details["path"] == str(tmp_path / "blob.js")
