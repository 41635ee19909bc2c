"""
Utility modules for the release uploader.

This package provides shared utilities used by every stage of a run:
- logging: Console/JSON logging with entry/exit decorators
- config: S3 settings loaded from the environment
- manifest: Version lookup in the source tree's package.json
"""

from release_uploader.utils.logging import get_logger, log_function_call

__all__ = ["get_logger", "log_function_call"]
