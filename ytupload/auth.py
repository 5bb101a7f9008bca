"""
YouTube OAuth 2.0 authentication (manual copy/paste flow).

The cached token is reused while it is valid, refreshed once it has expired,
and obtained interactively when no usable token is cached: a URL is printed,
the operator opens it in a browser and pastes the authorization code back.
"""
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from google.auth.exceptions import GoogleAuthError, RefreshError, TransportError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build
from googleapiclient.errors import Error as GoogleApiClientError
from httplib2 import HttpLib2Error

from ytupload.config import OAUTH_STATE, OOB_REDIRECT_URI, SCOPES
from ytupload.errors import AuthenticationError, ConfigurationError, UploadError
from ytupload.token_store import TokenRecord, TokenStore


def _utcnow() -> datetime:
    # google-auth keeps expiry as naive UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Authenticator:
    """Produces valid YouTube credentials for one run"""

    def __init__(
        self,
        credentials_file,
        token_store: TokenStore,
        prompt: Callable[[str], str] = input,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.credentials_file = Path(credentials_file)
        self.token_store = token_store
        self.prompt = prompt
        self.clock = clock
        self.flow = self._load_flow()

    def _load_flow(self) -> InstalledAppFlow:
        """Read client_secrets.json once; any problem with it is fatal."""
        if not self.credentials_file.exists():
            raise ConfigurationError(
                f"YouTube API credentials not found: {self.credentials_file}\n"
                f"   1. Go to https://console.cloud.google.com/\n"
                f"   2. Create/select a project\n"
                f"   3. Enable YouTube Data API v3\n"
                f"   4. Create OAuth 2.0 credentials (Desktop app)\n"
                f"   5. Download and save as: {self.credentials_file}"
            )
        try:
            flow = InstalledAppFlow.from_client_secrets_file(str(self.credentials_file), SCOPES)
        except (OSError, ValueError, KeyError) as e:
            raise ConfigurationError(f"Unable to parse client secret file to config: {e}") from e

        redirect_uris = flow.client_config.get('redirect_uris') or [OOB_REDIRECT_URI]
        flow.redirect_uri = redirect_uris[0]
        return flow

    def authenticate(self) -> Credentials:
        """Return credentials that are valid right now"""
        record = self.token_store.load()
        if record is None:
            record = self._authorize_interactively()
            self.token_store.save(record)
        elif record.expiry is not None and record.expiry < self.clock():
            record = self._refresh(record)
            self.token_store.save(record)

        return record.to_credentials(self.flow.client_config, SCOPES)

    def _refresh(self, record: TokenRecord) -> TokenRecord:
        creds = record.to_credentials(self.flow.client_config, SCOPES)
        try:
            creds.refresh(Request())
        except (RefreshError, TransportError) as e:
            raise AuthenticationError(f"Unable to refresh token: {e}") from e
        print("✓ Access token refreshed")
        return TokenRecord.from_credentials(creds)

    def _authorize_interactively(self) -> TokenRecord:
        auth_url, _ = self.flow.authorization_url(
            access_type='offline',
            prompt='consent',
            state=OAUTH_STATE,
        )

        print("🔐 No cached YouTube token, authorization required.")
        print("Go to the following link in your browser then type the authorization code:")
        print()
        print(f"   {auth_url}")
        print()

        try:
            auth_code = self.prompt("Enter the authorization code: ").strip()
        except (EOFError, KeyboardInterrupt) as e:
            raise AuthenticationError("Unable to read authorization code") from e

        if not auth_code:
            raise AuthenticationError("No authorization code provided")

        try:
            self.flow.fetch_token(code=auth_code)
        except Exception as e:
            raise AuthenticationError(f"Unable to retrieve token from web: {e}") from e

        print("✓ YouTube API authenticated")
        return TokenRecord.from_credentials(self.flow.credentials)


def build_service(credentials: Credentials):
    """Return a YouTube Data API v3 service that signs every request with credentials."""
    try:
        return build('youtube', 'v3', credentials=credentials, cache_discovery=False)
    except (GoogleApiClientError, HttpLib2Error, GoogleAuthError, OSError) as e:
        raise UploadError(f"Error creating YouTube client: {e}") from e
