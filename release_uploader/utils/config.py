"""
Environment configuration loader for the release uploader.

Loads S3 credentials and destination settings from a .env file or
environment variables. The resulting UploaderConfig is passed explicitly to
the S3 client factory and the upload actions.
"""

import os
from pathlib import Path
from typing import Optional
from dataclasses import dataclass

from dotenv import load_dotenv

# Defaults used when the corresponding variable is unset
DEFAULT_REGION = "us-east-1"
DEFAULT_BUCKET = "brave-download"
DEFAULT_ACL = "public-read"

# Project root .env, loaded before reading os.environ
DEFAULT_ENV_FILE = Path(__file__).parent.parent.parent / ".env"


@dataclass(frozen=True)
class UploaderConfig:
    """S3 destination and credentials for one upload run."""

    access_key_id: str
    secret_access_key: str
    region: str = DEFAULT_REGION
    bucket: str = DEFAULT_BUCKET

    # Custom endpoint for S3-compatible stores (None means AWS)
    endpoint_url: Optional[str] = None

    # Canned ACL applied to every uploaded object
    acl: str = DEFAULT_ACL

    def __repr__(self) -> str:
        return (
            f"UploaderConfig(bucket={self.bucket!r}, region={self.region!r}, "
            f"endpoint_url={self.endpoint_url!r}, acl={self.acl!r})"
        )

    @classmethod
    def from_env(cls, env_file: Optional[Path] = DEFAULT_ENV_FILE) -> "UploaderConfig":
        """
        Load configuration from environment variables.

        Loads env_file first if it exists (existing variables win), then
        reads os.environ.

        Args:
            env_file: Optional .env path to load before reading the environment

        Returns:
            UploaderConfig instance with loaded values

        Raises:
            ValueError: If S3_KEY or S3_SECRET is missing
        """
        if env_file is not None and Path(env_file).exists():
            load_dotenv(env_file)

        access_key_id = os.getenv("S3_KEY")
        secret_access_key = os.getenv("S3_SECRET")

        if not access_key_id or not secret_access_key:
            raise ValueError("S3_KEY or S3_SECRET environment variables not set")

        return cls(
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            region=os.getenv("S3_REGION") or DEFAULT_REGION,
            bucket=os.getenv("S3_BUCKET") or DEFAULT_BUCKET,
            endpoint_url=os.getenv("S3_ENDPOINT") or None,
            acl=os.getenv("S3_ACL") or DEFAULT_ACL,
        )
