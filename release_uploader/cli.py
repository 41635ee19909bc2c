"""
Command-line interface for the release uploader.

Usage:
    release-uploader --channel dev --source ../browser-laptop
    release-uploader --channel beta --source /full/path/to/browser-laptop --send
"""

import argparse
import sys
import uuid
from typing import List, Optional

from release_uploader.recipes import CHANNELS
from release_uploader.release import prepare_release, run_release
from release_uploader.utils.config import UploaderConfig
from release_uploader.utils.logging import set_correlation_id, setup_logging

DEFAULT_SOURCE = "../browser-laptop"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Upload release artifacts to S3",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Channels: {", ".join(CHANNELS)}

Environment:
  S3_KEY, S3_SECRET   Access key and secret (required)
  S3_REGION           Region (default: us-east-1)
  S3_BUCKET           Bucket (default: brave-download)
  S3_ENDPOINT         Endpoint URL for S3-compatible stores

Examples:
  # Check which artifacts exist for the dev channel
  %(prog)s --channel dev --source ../browser-laptop

  # Upload the beta artifacts
  %(prog)s --channel beta --source /full/path/to/browser-laptop --send
        """,
    )

    parser.add_argument(
        "-c",
        "--channel",
        required=True,
        help="Release channel the artifacts belong to",
    )

    parser.add_argument(
        "-s",
        "--source",
        default=DEFAULT_SOURCE,
        help=f"Directory holding package.json and dist/ (default: {DEFAULT_SOURCE})",
    )

    parser.add_argument(
        "--send",
        action="store_true",
        help="Upload the artifacts (default: only report what would be sent)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the uploader CLI."""
    args = parse_args(argv)

    if args.verbose:
        setup_logging(level="DEBUG")

    set_correlation_id(uuid.uuid4().hex[:12])

    try:
        plan = prepare_release(args.channel, args.source)
        config = UploaderConfig.from_env()
    except (ValueError, OSError) as e:
        print(f"❌ {e}")
        return 1

    try:
        run_release(plan, send=args.send, config=config)
    except KeyboardInterrupt:
        print("\n⚠️  Upload cancelled by user")
        return 130
    except Exception as e:
        print(f"❌ Upload failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
