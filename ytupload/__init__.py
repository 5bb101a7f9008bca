"""Upload a local video to YouTube and remove it once the upload succeeded."""
