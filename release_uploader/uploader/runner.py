"""
Sequential runner for per-recipe actions.
"""

from typing import List, Sequence

from release_uploader.uploader.actions import Action, ActionResult
from release_uploader.utils.logging import get_logger

logger = get_logger(__name__)

COMPLETE_MESSAGE = "* Process complete"


def run_actions(actions: Sequence[Action]) -> List[ActionResult]:
    """
    Run actions one at a time, in order, stopping at the first failure.

    Each action finishes (including its progress output) before the next
    one starts. The first failing action's error is re-raised unchanged and
    no later action is run.

    Args:
        actions: Actions in upload order

    Returns:
        One ActionResult per action when all succeed

    Raises:
        Exception: The error carried by the first failed ActionResult
    """
    results: List[ActionResult] = []
    total = len(actions)

    for index, action in enumerate(actions, 1):
        logger.debug(f"[{index}/{total}] {action!r}")
        result = action.run()
        results.append(result)

        if not result.success:
            logger.info(
                f"Aborting run at {index}/{total}: {total - index} remaining "
                f"recipes not processed"
            )
            if result.error is not None:
                raise result.error
            raise RuntimeError(f"Action failed without an error: {action!r}")

    skipped = sum(1 for r in results if r.skipped)
    logger.info(
        f"{total - skipped}/{total} artifacts present, {skipped} ignored"
    )
    logger.info(COMPLETE_MESSAGE)
    return results
