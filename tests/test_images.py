"""Tests for image payload helpers."""

import base64
import logging

import pytest

from carb_analysis.services.images import encode_images, sniff_mime_type, to_data_url


@pytest.mark.parametrize(
    ("data", "mime_type"),
    [
        (b"\xff\xd8\xff\xe0rest", "image/jpeg"),
        (b"\x89PNG\r\n\x1a\nrest", "image/png"),
        (b"RIFF\x00\x00\x00\x00WEBPVP8 ", "image/webp"),
        (b"\x00\x00\x00\x18ftypheic", "image/heic"),
        (b"\x00\x00\x00\x1cftypmif1", "image/heic"),
        (b"XXXX\x00\x00\x00\x00WEBP", "image/jpeg"),
        (b"unknown", "image/jpeg"),
        (b"", "image/jpeg"),
    ],
)
def test_sniff_mime_type(data: bytes, mime_type: str) -> None:
    assert sniff_mime_type(data) == mime_type


def test_to_data_url_embeds_bytes() -> None:
    data = b"\x89PNG\r\n\x1a\nrest"

    url = to_data_url(data)

    prefix = "data:image/png;base64,"
    assert url.startswith(prefix)
    assert base64.b64decode(url[len(prefix) :]) == data


def test_encode_images_keeps_order_and_limit(caplog: pytest.LogCaptureFixture) -> None:
    images = [b"\x89PNG\r\n\x1a\n1", b"\xff\xd8\xff2", b"3", b"4"]

    with caplog.at_level(logging.WARNING, logger="carb_analysis"):
        urls = encode_images(images, limit=3)

    assert [url.split(";")[0] for url in urls] == [
        "data:image/png",
        "data:image/jpeg",
        "data:image/jpeg",
    ]
    assert any("only the first 3" in r.message for r in caplog.records)


def test_encode_images_requires_a_photo() -> None:
    with pytest.raises(ValueError, match="At least one"):
        encode_images([], limit=3)
