"""
Per-recipe actions: report artifact presence or upload it to S3.

Each action wraps one ResolvedRecipe and exposes a single run() that returns
an ActionResult. A missing artifact is never a failure; optional platform
builds (e.g. the 32-bit installer) are simply skipped. Upload errors from
the S3 client are returned unchanged in ActionResult.error.

Example usage:
    >>> from release_uploader.uploader import UploadAction, create_s3_client
    >>> client = create_s3_client(config)
    >>> result = UploadAction(resolved, config, client).run()
    >>> if not result.success:
    ...     raise result.error
"""

import sys
import threading
import time
from abc import ABC, abstractmethod
from typing import Any, Optional, TextIO
from dataclasses import dataclass

import boto3

from release_uploader.recipes import ResolvedRecipe
from release_uploader.utils.config import UploaderConfig
from release_uploader.utils.logging import get_logger

# Module logger
logger = get_logger(__name__)


@dataclass
class ActionResult:
    """
    Result of running one action.

    Attributes:
        success: Whether the action completed without error
        local_path: Artifact path the action looked at
        remote_key: Full object key (upload) or key prefix (report)
        skipped: True when the artifact did not exist
        error: Exception raised by the S3 client (None on success)
        duration_seconds: Wall time spent in run()
    """

    success: bool
    local_path: str
    remote_key: Optional[str]
    skipped: bool = False
    error: Optional[BaseException] = None
    duration_seconds: float = 0.0


class Action(ABC):
    """A side-effecting step for one resolved recipe."""

    def __init__(self, resolved: ResolvedRecipe):
        self.resolved = resolved

    @abstractmethod
    def run(self) -> ActionResult:
        """Perform the action once and report its outcome."""

    def _ignored(self) -> ActionResult:
        logger.info(f"IGNORING - {self.resolved.local_path} does not exist")
        return ActionResult(
            success=True,
            local_path=str(self.resolved.local_path),
            remote_key=None,
            skipped=True,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({str(self.resolved.local_path)!r} -> "
            f"{self.resolved.remote_key_prefix!r})"
        )


class ReportAction(Action):
    """Dry-run action: log whether the artifact exists and where it would go."""

    def run(self) -> ActionResult:
        path = self.resolved.local_path
        if not path.exists():
            return self._ignored()

        logger.info(f"OK       - {path} exists -> {self.resolved.remote_key_prefix}")
        return ActionResult(
            success=True,
            local_path=str(path),
            remote_key=self.resolved.remote_key_prefix,
        )


class ProgressReporter:
    """
    Upload progress callback that prints coarse percentages.

    boto3 calls the instance with the number of bytes sent since the last
    call, possibly from transfer worker threads. A "<n>% " token is written
    only when the rounded percentage changes.
    """

    def __init__(self, total_bytes: int, stream: Optional[TextIO] = None):
        self.total_bytes = total_bytes
        self.stream = stream if stream is not None else sys.stdout
        self._seen = 0
        self._last_percent = 0
        self._lock = threading.Lock()

    @property
    def last_percent(self) -> int:
        return self._last_percent

    def __call__(self, bytes_amount: int) -> None:
        with self._lock:
            self._seen += bytes_amount
            if self.total_bytes:
                percent = int(self._seen * 100 / self.total_bytes + 0.5)
            else:
                percent = 100
            if percent != self._last_percent:
                self.stream.write(f"{percent}% ")
                self.stream.flush()
                self._last_percent = percent

    def finish(self) -> None:
        """Terminate the progress line so the next action starts clean."""
        with self._lock:
            self.stream.write("\n")
            self.stream.flush()


def create_s3_client(config: UploaderConfig) -> Any:
    """
    Build a boto3 S3 client from explicit configuration.

    Args:
        config: UploaderConfig with credentials, region and optional endpoint

    Returns:
        botocore S3 client
    """
    logger.debug(f"Creating S3 client for {config!r}")
    return boto3.client(
        "s3",
        aws_access_key_id=config.access_key_id,
        aws_secret_access_key=config.secret_access_key,
        region_name=config.region,
        endpoint_url=config.endpoint_url,
        use_ssl=True,
    )


class UploadAction(Action):
    """
    Send action: stream the artifact to the configured bucket.

    The object key is the recipe's key prefix plus the artifact's file name.
    The upload is not retried; a failure is reported with the client's own
    exception.
    """

    def __init__(
        self,
        resolved: ResolvedRecipe,
        config: UploaderConfig,
        client: Any = None,
        stream: Optional[TextIO] = None,
    ):
        super().__init__(resolved)
        self.config = config
        self.client = client if client is not None else create_s3_client(config)
        self.stream = stream

    @property
    def remote_key(self) -> str:
        return f"{self.resolved.remote_key_prefix}/{self.resolved.local_path.name}"

    def run(self) -> ActionResult:
        path = self.resolved.local_path
        if not path.exists():
            return self._ignored()

        key = self.remote_key
        start_time = time.time()
        file_size = path.stat().st_size

        logger.info(
            f"Uploading {path} -> s3://{self.config.bucket}/{key} "
            f"({file_size:,} bytes)"
        )
        logger.debug(
            "Upload parameters",
            extra={
                "local_file": str(path),
                "bucket": self.config.bucket,
                "key": key,
                "acl": self.config.acl,
            },
        )

        progress = ProgressReporter(file_size, stream=self.stream)
        try:
            with path.open("rb") as body:
                self.client.upload_fileobj(
                    body,
                    self.config.bucket,
                    key,
                    ExtraArgs={"ACL": self.config.acl},
                    Callback=progress,
                )
        except Exception as e:
            progress.finish()
            logger.error(
                f"Upload failed: s3://{self.config.bucket}/{key}: {e}",
                exc_info=True,
            )
            return ActionResult(
                success=False,
                local_path=str(path),
                remote_key=key,
                error=e,
                duration_seconds=time.time() - start_time,
            )

        progress.finish()
        duration = time.time() - start_time
        logger.info(f"Done - s3://{self.config.bucket}/{key} in {duration:.2f}s")
        return ActionResult(
            success=True,
            local_path=str(path),
            remote_key=key,
            duration_seconds=duration,
        )
