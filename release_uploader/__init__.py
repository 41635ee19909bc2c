"""
Release Uploader

Publishes locally built release artifacts (installers, packages, archives)
to an S3 bucket under channel- and version-specific keys.

This package provides:
- recipes: Artifact-to-key table, channel registry and template expansion
- uploader: Report/upload actions, dispatcher and sequential runner
- release: Startup validation and the end-to-end run
- utils: Logging, environment configuration and manifest reading
"""

__version__ = "0.1.0"

# Package-level imports
from release_uploader.utils.logging import setup_logging

# Initialize default logging configuration
setup_logging()
