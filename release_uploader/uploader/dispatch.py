"""
Chooses the action for each resolved recipe.
"""

from typing import Any, Iterable, List, Optional, TextIO

from release_uploader.recipes import ResolvedRecipe
from release_uploader.uploader.actions import (
    Action,
    ReportAction,
    UploadAction,
    create_s3_client,
)
from release_uploader.utils.config import UploaderConfig
from release_uploader.utils.logging import get_logger

logger = get_logger(__name__)


def make_action(
    resolved: ResolvedRecipe,
    send: bool,
    upload_config: Optional[UploaderConfig] = None,
    client: Any = None,
    stream: Optional[TextIO] = None,
) -> Action:
    """
    Return the single action for one recipe.

    Args:
        resolved: Recipe with absolute local path and key prefix
        send: True to upload, False to only report
        upload_config: Destination settings (required when send is True)
        client: S3 client shared by all upload actions
        stream: Where upload progress is written (default stdout)

    Raises:
        ValueError: If send is True and upload_config is missing
    """
    if not send:
        return ReportAction(resolved)

    if upload_config is None:
        raise ValueError("upload_config is required in send mode")
    return UploadAction(resolved, upload_config, client=client, stream=stream)


def build_actions(
    recipes: Iterable[ResolvedRecipe],
    send: bool,
    upload_config: Optional[UploaderConfig] = None,
    client: Any = None,
    stream: Optional[TextIO] = None,
) -> List[Action]:
    """
    Build one action per recipe, in recipe order.

    In send mode a single S3 client is created up front (unless one is
    given) and shared by every upload action.
    """
    if send and client is None:
        if upload_config is None:
            raise ValueError("upload_config is required in send mode")
        client = create_s3_client(upload_config)

    actions = [
        make_action(resolved, send, upload_config, client=client, stream=stream)
        for resolved in recipes
    ]
    logger.debug(
        f"Built {len(actions)} {'upload' if send else 'report'} actions"
    )
    return actions
