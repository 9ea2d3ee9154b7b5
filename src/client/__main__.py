#!/usr/bin/env python3
"""
Command line front end for the image resize API.

Run:
    python -m client --endpoint <API-URL> --width 100 --height 50 photo.png \
      --output ./downloads
"""

import argparse
import os
from pathlib import Path
import sys

from client.resize_client import (
    ClientValidationError,
    DownloadError,
    ResizeClient,
)
from core.utils.constants import ENV_RESIZE_API_URL


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resize an image via the Image Resize API")

    parser.add_argument(
        "--endpoint",
        default=os.getenv(ENV_RESIZE_API_URL),
        help=f"Resize endpoint URL (defaults to ${ENV_RESIZE_API_URL})",
    )
    parser.add_argument("--width", type=int, required=True, help="Target width in pixels")
    parser.add_argument("--height", type=int, required=True, help="Target height in pixels")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Directory to download the resized image into",
    )
    parser.add_argument("file", type=Path, help="Image file to resize")

    args = parser.parse_args(argv)
    if not args.endpoint:
        parser.error(f"--endpoint or ${ENV_RESIZE_API_URL} is required")

    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    client = ResizeClient(args.endpoint)

    try:
        result = client.submit(width=args.width, height=args.height, image=args.file)
    except ClientValidationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not result.ok or not result.download_url:
        print(f"Error: {result.message}", file=sys.stderr)
        return 1

    print(result.download_url)

    if args.output is not None:
        try:
            saved = client.download(result.download_url, args.output)
        except DownloadError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        print(f"Saved {saved}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
