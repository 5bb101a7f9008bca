"""
Errors raised by the uploader. Only the CLI turns them into exit codes.
"""


class UploaderError(Exception):
    """Base class for every fatal uploader error"""


class ConfigurationError(UploaderError):
    """Client secrets file missing or malformed"""


class AuthenticationError(UploaderError):
    """Authorization code exchange or token refresh failed"""


class TokenStoreError(UploaderError):
    """Token cache could not be written"""


class VideoFileError(UploaderError):
    """Video file could not be opened, inspected or removed"""


class UploadError(UploaderError):
    """YouTube rejected the upload or the transport failed"""


class UsageError(UploaderError):
    """Bad command-line arguments"""
