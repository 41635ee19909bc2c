"""
Reads the build version from the source tree's package.json.
"""

import json
from pathlib import Path
from typing import Union

from release_uploader.utils.logging import get_logger, log_function_call

logger = get_logger(__name__)

MANIFEST_NAME = "package.json"


@log_function_call
def read_version(source_dir: Union[str, Path]) -> str:
    """
    Return the ``version`` field of ``<source_dir>/package.json``.

    The version is an opaque token; it is never parsed or compared.

    Args:
        source_dir: Root of the built source tree

    Returns:
        Version string exactly as written in the manifest

    Raises:
        FileNotFoundError: If the manifest does not exist
        ValueError: If the manifest is not valid JSON or has no version
    """
    manifest_path = Path(source_dir) / MANIFEST_NAME

    if not manifest_path.is_file():
        raise FileNotFoundError(f"{manifest_path} does not exist")

    try:
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {manifest_path}: {e}") from e

    version = manifest.get("version") if isinstance(manifest, dict) else None
    if version is None or str(version) == "":
        raise ValueError(f"No version field in {manifest_path}")

    logger.debug(f"Read version {version!r} from {manifest_path}")
    return str(version)
