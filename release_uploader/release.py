"""
End-to-end release run: validate inputs, expand recipes, dispatch, execute.

prepare_release() performs every startup check before anything is
uploaded; run_release() turns the plan into actions and runs them.

Example usage:
    >>> from release_uploader.release import prepare_release, run_release
    >>> from release_uploader.utils.config import UploaderConfig
    >>> plan = prepare_release("beta", "../browser-laptop")
    >>> run_release(plan, send=False, config=UploaderConfig.from_env())
"""

from pathlib import Path
from typing import Any, List, Optional, TextIO, Union
from dataclasses import dataclass

from release_uploader.recipes import (
    ResolvedRecipe,
    build_recipe_table,
    expand_recipes,
    resolve_recipes,
    validate_channel,
)
from release_uploader.uploader import ActionResult, build_actions, run_actions
from release_uploader.utils.config import UploaderConfig
from release_uploader.utils.logging import get_logger
from release_uploader.utils.manifest import read_version

logger = get_logger(__name__)


@dataclass(frozen=True)
class ReleasePlan:
    """Validated inputs and the resolved recipes for one run."""

    channel: str
    version: str
    source_dir: Path
    recipes: List[ResolvedRecipe]


def prepare_release(channel: str, source_dir: Union[str, Path]) -> ReleasePlan:
    """
    Validate the channel and source tree and resolve all recipes.

    Checks run in order: channel, source directory, manifest version. The
    channel is checked before the filesystem is touched.

    Raises:
        ValueError: Unknown channel or unusable manifest
        FileNotFoundError: Missing source directory or manifest
    """
    validate_channel(channel)

    source_path = Path(source_dir)
    if not source_path.exists():
        raise FileNotFoundError(f"{source_dir} does not exist")

    version = read_version(source_path)
    expanded = expand_recipes(build_recipe_table(channel), channel, version)
    return ReleasePlan(
        channel=channel,
        version=version,
        source_dir=source_path,
        recipes=resolve_recipes(expanded, source_path),
    )


def run_release(
    plan: ReleasePlan,
    send: bool,
    config: UploaderConfig,
    client: Any = None,
    stream: Optional[TextIO] = None,
) -> List[ActionResult]:
    """
    Report on or upload every artifact of the plan.

    Args:
        plan: Output of prepare_release()
        send: True to upload, False for a dry-run report
        config: Destination bucket and credentials
        client: Pre-built S3 client (created from config when None)
        stream: Where upload progress is written (default stdout)

    Returns:
        One ActionResult per recipe

    Raises:
        Exception: The first upload error, unchanged
    """
    logger.info(
        f"Working with version: '{plan.version}' on channel '{plan.channel}'. "
        f"Sending to bucket '{config.bucket}'."
    )
    if not send:
        logger.info("Report mode: no files will be uploaded (use --send)")

    actions = build_actions(
        plan.recipes, send, upload_config=config, client=client, stream=stream
    )
    return run_actions(actions)
