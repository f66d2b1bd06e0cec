"""Source input helpers: inline code or a file on disk."""

import logging
from pathlib import Path
from typing import Optional

from ..config import BundleConfig, get_config
from ..errors import InputTooLarge, MissingInput, SourceNotFound, SourceUnreadable

logger = logging.getLogger(__name__)


def read_source(file_path: str, config: Optional[BundleConfig] = None) -> str:
    """Read the full content of a file.

    Args:
        file_path: Path to the file (relative to workspace root or absolute).
        config: Config holding ``workspace_root``. If None, the process config is used.

    Returns:
        File content as string.

    Raises:
        SourceNotFound: If the file does not exist.
        SourceUnreadable: If the file is not valid UTF-8.
    """
    config = config or get_config()
    file_path_obj = Path(file_path)
    if not file_path_obj.is_absolute():
        workspace_root = Path(config.workspace_root) if config.workspace_root else Path.cwd()
        file_path_obj = workspace_root / file_path_obj

    if not file_path_obj.is_file():
        logger.warning("File not found: %s", file_path_obj)
        raise SourceNotFound(str(file_path_obj))

    try:
        with open(file_path_obj, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise SourceUnreadable(str(file_path_obj), str(e)) from e


def resolve_source(
    code: Optional[str] = None,
    file_path: Optional[str] = None,
    config: Optional[BundleConfig] = None,
) -> str:
    """Return inline ``code`` or the content of ``file_path``, enforcing the size limit."""
    config = config or get_config()
    if code is None and file_path:
        code = read_source(file_path, config)
    if code is None:
        raise MissingInput()
    if len(code) > config.max_code_size:
        raise InputTooLarge(len(code), config.max_code_size)
    return code
