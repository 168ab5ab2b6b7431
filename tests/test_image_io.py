import io

import numpy as np
import pytest
from PIL import Image

from cancer_app.core.errors import DecodeError, UnsupportedFormatError
from cancer_app.utils.image_io import normalize_image


def test_normalize_returns_batch_of_224_rgb(png_bytes):
    batch = normalize_image(png_bytes)
    assert batch.shape == (1, 224, 224, 3)
    assert batch.dtype == np.float32


def test_normalize_keeps_pixel_range(png_bytes):
    batch = normalize_image(png_bytes)
    # solid (200, 30, 30) image stays that color after resize, no rescaling to [0, 1]
    assert np.allclose(batch[0, 100, 100], [200.0, 30.0, 30.0], atol=1.0)


@pytest.mark.parametrize("mode", ["L", "RGBA", "P"])
def test_normalize_forces_three_channels(make_image, mode):
    batch = normalize_image(make_image(mode=mode))
    assert batch.shape == (1, 224, 224, 3)


def test_normalize_handles_jpeg_and_large_images(make_image):
    batch = normalize_image(make_image(size=(640, 480), fmt="JPEG"))
    assert batch.shape == (1, 224, 224, 3)


def test_garbage_bytes_raise_decode_error():
    with pytest.raises(DecodeError):
        normalize_image(b"this is not an image")


def test_truncated_image_raises_decode_error(make_image):
    data = make_image(size=(640, 480), fmt="JPEG")
    with pytest.raises(DecodeError):
        normalize_image(data[: len(data) // 2])


def test_float_single_channel_is_unsupported(make_image):
    with pytest.raises(UnsupportedFormatError):
        normalize_image(make_image(mode="F", fmt="TIFF"))


@pytest.mark.parametrize("level, expected", [(65535, 255.0), (0, 0.0), (32896, 128.0)])
def test_sixteen_bit_grayscale_is_scaled_to_eight_bit(level, expected):
    src = Image.fromarray(np.full((48, 64), level, dtype=np.uint16))
    buf = io.BytesIO()
    src.save(buf, format="PNG")

    batch = normalize_image(buf.getvalue())

    assert batch.shape == (1, 224, 224, 3)
    assert np.allclose(batch[0, 100, 100], [expected] * 3, atol=1.0)
