"""
YouTube Uploader Module - Uploads one video file with YouTube Data API v3
and removes it from disk once YouTube has accepted it
"""
import json
import mimetypes
import os
from pathlib import Path
from typing import Dict

from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseUpload
from httplib2 import HttpLib2Error

from ytupload.config import (
    PRIVACY_STATUS, RESPONSE_PARTS, VIDEO_CATEGORY_ID, VIDEO_DESCRIPTION, VIDEO_TAGS
)
from ytupload.errors import UploadError, VideoFileError
from ytupload.progress import ProgressReporter


def video_title_from_filename(filename: str) -> str:
    """Strip the extension: "my.video.mov" -> "my.video", "noext" -> "noext"."""
    stem, dot, _ = filename.rpartition('.')
    return stem if dot else filename


def build_video_body(title: str) -> Dict:
    """Video resource sent with the insert call"""
    return {
        'snippet': {
            'title': title,
            'description': VIDEO_DESCRIPTION,
            'tags': list(VIDEO_TAGS),
            'categoryId': VIDEO_CATEGORY_ID,
        },
        'status': {
            'privacyStatus': PRIVACY_STATUS,
        },
    }


def _http_error_message(error: HttpError) -> str:
    try:
        details = json.loads(error.content.decode('utf-8'))
        return details.get('error', {}).get('message') or str(error)
    except (ValueError, AttributeError):
        return str(error)


class YouTubeUploader:
    """Uploads a single local video through an authenticated YouTube service"""

    def __init__(self, youtube, **progress_options):
        self.youtube = youtube
        self.progress_options = progress_options

    def upload_video(self, video_path) -> str:
        """
        Upload a video as private and delete the local file on success

        Args:
            video_path: Path to video file

        Returns:
            The YouTube video ID

        Raises:
            VideoFileError: the file cannot be opened, stat'ed or removed
            UploadError: YouTube or the transport reported an error
        """
        path = Path(video_path)
        try:
            video_file = open(path, 'rb')
        except OSError as e:
            raise VideoFileError(f"Error opening video file: {e}") from e

        with video_file:
            try:
                size = os.fstat(video_file.fileno()).st_size
            except OSError as e:
                raise VideoFileError(f"Unable to get file info: {e}") from e

            title = video_title_from_filename(path.name)
            print(f"⬆️  Uploading {title}")

            with ProgressReporter(video_file, size, desc=title, **self.progress_options) as progress:
                media = MediaIoBaseUpload(
                    progress.reader,
                    mimetype=mimetypes.guess_type(path.name)[0] or 'video/*',
                    chunksize=-1,
                    resumable=True,
                )
                insert_request = self.youtube.videos().insert(
                    part=','.join(RESPONSE_PARTS),
                    body=build_video_body(title),
                    media_body=media,
                )
                response = self._execute(insert_request)

        video_id = response['id']
        print(f"✓ Upload successful! Video ID: {video_id}")
        print(f"  URL: https://www.youtube.com/watch?v={video_id}")

        try:
            path.unlink()
        except OSError as e:
            raise VideoFileError(f"Error removing video: {e}") from e
        print(f"🗑️  Removed {path}")

        return video_id

    def _execute(self, insert_request) -> Dict:
        """Drive the resumable upload to completion. No retries."""
        response = None
        try:
            while response is None:
                _, response = insert_request.next_chunk()
        except HttpError as e:
            raise UploadError(f"Error making YouTube API call: {_http_error_message(e)}") from e
        except (HttpLib2Error, GoogleAuthError, OSError) as e:
            raise UploadError(f"Error making YouTube API call: {e}") from e

        if 'id' not in response:
            raise UploadError(f"Upload failed: {response}")
        return response
