from __future__ import annotations

import pytest

from ytupload.uploader import build_video_body, video_title_from_filename


@pytest.mark.parametrize(
    ("filename", "title"),
    [
        ("clip.mp4", "clip"),
        ("my.video.mov", "my.video"),
        ("noext", "noext"),
    ],
)
def test_title_strips_last_extension(filename: str, title: str) -> None:
    assert video_title_from_filename(filename) == title


def test_video_body_uses_fixed_metadata() -> None:
    body = build_video_body("clip")

    assert body == {
        "snippet": {
            "title": "clip",
            "description": "",
            "tags": [],
            "categoryId": "22",
        },
        "status": {"privacyStatus": "private"},
    }
