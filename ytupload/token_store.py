"""
Token Store - caches the OAuth token for the next run
"""
import json
import os
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from google.oauth2.credentials import Credentials

from ytupload.errors import TokenStoreError


def _parse_expiry(value: str) -> datetime:
    """Parse an RFC 3339 expiry into naive UTC, the form google-auth compares against"""
    # fromisoformat wants exactly six fractional digits; Go writes up to nine
    value = re.sub(r"\.(\d+)", lambda m: "." + m.group(1)[:6].ljust(6, "0"), value)
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    expiry = datetime.fromisoformat(value)
    if expiry.tzinfo is not None:
        expiry = expiry.astimezone(timezone.utc).replace(tzinfo=None)
    return expiry


@dataclass(frozen=True)
class TokenRecord:
    """Access token, optional refresh token and naive-UTC expiry"""
    token: str
    refresh_token: Optional[str] = None
    expiry: Optional[datetime] = None

    @classmethod
    def from_credentials(cls, creds: Credentials) -> "TokenRecord":
        return cls(token=creds.token, refresh_token=creds.refresh_token, expiry=creds.expiry)

    def to_credentials(self, client_config: Dict, scopes: List[str]) -> Credentials:
        """Build google-auth credentials using the client id/secret from client_secrets.json"""
        return Credentials(
            token=self.token,
            refresh_token=self.refresh_token,
            token_uri=client_config.get("token_uri"),
            client_id=client_config.get("client_id"),
            client_secret=client_config.get("client_secret"),
            scopes=scopes,
            expiry=self.expiry,
        )

    def to_json(self) -> str:
        data = {
            'token': self.token,
            'refresh_token': self.refresh_token,
            'expiry': self.expiry.isoformat() + 'Z' if self.expiry else None,
        }
        return json.dumps(data)

    @classmethod
    def from_json(cls, raw: str) -> "TokenRecord":
        data = json.loads(raw)
        token = data['token']
        if not isinstance(token, str) or not token:
            raise ValueError("token must be a non-empty string")
        expiry = data.get('expiry')
        return cls(
            token=token,
            refresh_token=data.get('refresh_token'),
            expiry=_parse_expiry(expiry) if expiry else None,
        )


class TokenStore:
    """Reads and writes a single token record at a fixed path"""

    def __init__(self, path):
        self.path = Path(path)

    def load(self) -> Optional[TokenRecord]:
        """Return the cached token, or None if it is missing or unreadable."""
        if not self.path.exists():
            return None
        try:
            return TokenRecord.from_json(self.path.read_text(encoding='utf-8'))
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            print(f"⚠️  Ignoring unreadable token file {self.path}: {e}")
            return None

    def save(self, record: TokenRecord) -> None:
        """Overwrite the token file. Raises TokenStoreError if it cannot be written."""
        print(f"Saving credential file to: {self.path}")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, 'w', encoding='utf-8') as token:
                token.write(record.to_json())
            # O_CREAT mode does not apply to an existing file
            os.chmod(self.path, 0o600)
        except OSError as e:
            raise TokenStoreError(f"Unable to cache oauth token: {e}") from e
