"""
Upload a single video to YouTube and delete it once the upload succeeded.

Usage:
    python youtube_upload.py upload <video-file-path>
"""
import sys

from ytupload.cli import main


if __name__ == "__main__":
    sys.exit(main())
