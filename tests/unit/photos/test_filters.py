"""Unit tests for photos/filters.py — supported image selection."""

import pytest

from photo_feed.graph.models import DriveItem
from photo_feed.photos.filters import filter_images, is_supported_image


def _file(name: str, mime_type: str | None) -> DriveItem:
    return DriveItem(id=name, name=name, mime_type=mime_type)


class TestIsSupportedImage:
    @pytest.mark.parametrize(
        ("name", "mime_type"),
        [("a.jpg", "image/jpeg"), ("b.png", "image/png"), ("c.gif", "image/gif")],
    )
    def test_accepts_common_images(self, name: str, mime_type: str) -> None:
        assert is_supported_image(_file(name, mime_type))

    @pytest.mark.parametrize(
        ("name", "mime_type"),
        [
            ("a.heic", "image/heic"),
            ("a.heif", "image/heif"),
            ("a.jpg", "image/HEIC"),
            ("IMG_1.HEIC", "image/jpeg"),
            ("IMG_2.Heif", "image/jpeg"),
            ("IMG_3.heic", "application/octet-stream"),
        ],
    )
    def test_rejects_heic_and_heif(self, name: str, mime_type: str) -> None:
        assert not is_supported_image(_file(name, mime_type))

    def test_rejects_non_images(self) -> None:
        assert not is_supported_image(_file("clip.mp4", "video/mp4"))
        assert not is_supported_image(_file("notes.txt", "text/plain"))

    def test_rejects_files_without_mime_type(self) -> None:
        assert not is_supported_image(_file("a.jpg", None))

    def test_rejects_folders(self) -> None:
        folder = DriveItem(id="f", name="album", is_folder=True, mime_type="image/jpeg")
        assert not is_supported_image(folder)


class TestFilterImages:
    def test_keeps_order_and_drops_unsupported(self) -> None:
        items = [
            _file("c.jpg", "image/jpeg"),
            _file("x.heic", "image/heic"),
            _file("b.png", "image/png"),
            _file("v.mp4", "video/mp4"),
            _file("a.jpg", "image/jpeg"),
        ]

        result = filter_images(items)

        assert [i.name for i in result] == ["c.jpg", "b.png", "a.jpg"]
        for item in result:
            assert item.mime_type not in ("image/heic", "image/heif")
            assert not item.name.lower().endswith((".heic", ".heif"))

    def test_is_idempotent(self) -> None:
        items = [_file("a.jpg", "image/jpeg"), _file("x.heif", "image/heif")]
        once = filter_images(items)
        assert filter_images(once) == once
