"""
Configuration for the YouTube uploader
"""
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

# YouTube API scopes
SCOPES = ['https://www.googleapis.com/auth/youtube.upload']

# Default file locations (relative to the working directory)
DEFAULT_CLIENT_SECRETS_FILE = "credentials.json"
DEFAULT_TOKEN_FILE = "token.json"

# OAuth
OAUTH_STATE = "state-token"
OOB_REDIRECT_URI = 'urn:ietf:wg:oauth:2.0:oob'  # Out-of-band flow

# Video metadata sent with every upload
VIDEO_CATEGORY_ID = "22"  # 22 = People & Blogs
PRIVACY_STATUS = "private"
VIDEO_DESCRIPTION = ""
VIDEO_TAGS = []
RESPONSE_PARTS = ("snippet", "status")


@dataclass(frozen=True)
class Settings:
    """File locations used by one uploader run"""
    credentials_file: Path
    token_file: Path


def load_settings() -> Settings:
    """
    Read settings from the environment (and an optional .env file in the working directory).

    Environment variables:
        YOUTUBE_CLIENT_SECRETS_FILE: OAuth client secrets JSON (default: credentials.json)
        YOUTUBE_TOKEN_FILE: cached OAuth token (default: token.json)
    """
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        credentials_file=Path(os.getenv("YOUTUBE_CLIENT_SECRETS_FILE", DEFAULT_CLIENT_SECRETS_FILE)),
        token_file=Path(os.getenv("YOUTUBE_TOKEN_FILE", DEFAULT_TOKEN_FILE)),
    )
