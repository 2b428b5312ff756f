"""Unit tests for PillowImageProcessor."""

from io import BytesIO

import pytest
from PIL import Image

from photoshare.adapter.error import ImageProcessingError
from photoshare.adapter.image.pillow import MockImageProcessor, PillowImageProcessor
from photoshare.config import StorageSettings


@pytest.fixture
def processor(tmp_path):
    return PillowImageProcessor(
        StorageSettings(
            upload_dir=str(tmp_path / "uploads"),
            thumbnail_dir=str(tmp_path / "thumbs"),
            thumbnail_size=100,
        )
    )


class TestPillowImageProcessor:
    """Tests for storing originals and thumbnails."""

    @pytest.mark.asyncio
    async def test_stores_png_original_and_thumbnail(self, processor, png_bytes):
        filename = await processor.process(BytesIO(png_bytes), "image/png")

        assert filename.endswith(".png")
        assert (processor.upload_dir / filename).read_bytes() == png_bytes
        with Image.open(processor.thumbnail_dir / filename) as thumb:
            assert max(thumb.size) == 100
            assert thumb.format == "PNG"

    @pytest.mark.asyncio
    async def test_stores_jpeg_with_jpg_extension(self, processor, jpeg_bytes):
        filename = await processor.process(BytesIO(jpeg_bytes), "image/jpeg")

        assert filename.endswith(".jpg")
        with Image.open(processor.thumbnail_dir / filename) as thumb:
            assert thumb.size == (100, 75)

    @pytest.mark.asyncio
    async def test_each_upload_gets_a_fresh_name(self, processor, png_bytes):
        first = await processor.process(BytesIO(png_bytes), "image/png")
        second = await processor.process(BytesIO(png_bytes), "image/png")

        assert first != second

    @pytest.mark.asyncio
    async def test_rejects_undecodable_bytes(self, processor):
        with pytest.raises(ImageProcessingError):
            await processor.process(BytesIO(b"definitely not an image"), "image/png")

        assert not processor.upload_dir.exists() or not any(
            processor.upload_dir.iterdir()
        )

    @pytest.mark.asyncio
    async def test_rejects_empty_upload(self, processor):
        with pytest.raises(ImageProcessingError):
            await processor.process(BytesIO(b""), "image/jpeg")

    @pytest.mark.asyncio
    async def test_rejects_unsupported_content_type(self, processor, png_bytes):
        with pytest.raises(ImageProcessingError):
            await processor.process(BytesIO(png_bytes), "image/gif")

    @pytest.mark.asyncio
    async def test_remove_deletes_original_and_thumbnail(self, processor, png_bytes):
        filename = await processor.process(BytesIO(png_bytes), "image/png")

        await processor.remove(filename)

        assert not (processor.upload_dir / filename).exists()
        assert not (processor.thumbnail_dir / filename).exists()

    @pytest.mark.asyncio
    async def test_remove_missing_file_is_a_no_op(self, processor):
        await processor.remove("gone.png")

    @pytest.mark.asyncio
    async def test_remove_rejects_paths(self, processor, tmp_path):
        outside = tmp_path / "keep.png"
        outside.write_bytes(b"x")

        with pytest.raises(ImageProcessingError):
            await processor.remove("../keep.png")

        assert outside.exists()


class TestMockImageProcessor:
    """Tests for the recording test double."""

    @pytest.mark.asyncio
    async def test_records_calls(self):
        processor = MockImageProcessor()

        filename = await processor.process(BytesIO(b"abc"), "image/jpeg")

        assert filename.endswith(".jpg")
        assert processor.calls == [(b"abc", "image/jpeg")]

    @pytest.mark.asyncio
    async def test_fail_flag(self):
        processor = MockImageProcessor()
        processor.fail = True

        with pytest.raises(ImageProcessingError):
            await processor.process(BytesIO(b"abc"), "image/png")

    @pytest.mark.asyncio
    async def test_records_removals(self):
        processor = MockImageProcessor()

        await processor.remove("abc.png")

        assert processor.removed == ["abc.png"]
