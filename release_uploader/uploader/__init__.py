"""
S3 release uploader.

Provides the per-recipe actions (report or upload), the dispatcher that
picks one action per recipe, and the sequential runner that executes them
in order and stops at the first upload failure.
"""

from .actions import (
    Action,
    ActionResult,
    ProgressReporter,
    ReportAction,
    UploadAction,
    create_s3_client,
)
from .dispatch import build_actions, make_action
from .runner import run_actions

__all__ = [
    "Action",
    "ActionResult",
    "ProgressReporter",
    "ReportAction",
    "UploadAction",
    "create_s3_client",
    "build_actions",
    "make_action",
    "run_actions",
]
