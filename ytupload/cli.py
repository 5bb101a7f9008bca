"""
Command-line entry point

Usage:
    ytupload upload <video-file-path>

Uploads the video to YouTube as private and deletes the local file once the
upload has succeeded. Credentials are read from credentials.json and the
OAuth token is cached in token.json (see ytupload.config for overrides).
"""
import argparse
import sys
from typing import List, Optional

from ytupload.auth import Authenticator, build_service
from ytupload.config import Settings, load_settings
from ytupload.errors import UploaderError, UsageError
from ytupload.token_store import TokenStore
from ytupload.uploader import YouTubeUploader


class _ArgumentParser(argparse.ArgumentParser):
    """argparse parser that raises instead of exiting with status 2"""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="ytupload",
        description="Upload a video to YouTube (private) and delete it afterwards",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="upload")
    subparsers.required = True
    upload = subparsers.add_parser("upload", help="Upload one video file")
    upload.add_argument("video", help="Path to the video file")
    return parser


def run_upload(video_path: str, settings: Settings) -> str:
    """Authenticate, upload video_path and return the new video ID"""
    authenticator = Authenticator(settings.credentials_file, TokenStore(settings.token_file))
    credentials = authenticator.authenticate()
    uploader = YouTubeUploader(build_service(credentials))
    return uploader.upload_video(video_path)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_usage(sys.stdout)
        print(f"{parser.prog}: error: {e}")
        return 1

    try:
        run_upload(args.video, load_settings())
    except UploaderError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n❌ Upload cancelled by user", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
