# cancer_app/utils/image_io.py
import io
import numpy as np
from PIL import Image, UnidentifiedImageError
from cancer_app.core.config import Config
from cancer_app.core.errors import DecodeError, UnsupportedFormatError

# mode PIL yang bisa dikonversi aman ke RGB (3 channel)
RGB_CONVERTIBLE_MODES = {
    "1", "L", "LA", "La", "P", "PA",
    "RGB", "RGBA", "RGBa", "RGBX", "CMYK", "YCbCr", "LAB", "HSV",
}


def decode_image(image_bytes: bytes) -> Image.Image:
    """
    bytes -> PIL Image yang sudah ter-decode penuh.
    Image.open() itu lazy, jadi load() dipanggil di sini supaya file rusak/terpotong
    langsung ketahuan sebagai DecodeError.
    """
    try:
        img = Image.open(io.BytesIO(image_bytes))
        img.load()
    except (
        UnidentifiedImageError, Image.DecompressionBombError,
        OSError, EOFError, ValueError, SyntaxError,
    ) as e:
        raise DecodeError() from e
    return img


def _is_int_gray(mode: str) -> bool:
    # "I" (32-bit), "I;16", "I;16B", "I;16L", "I;16N"
    return mode == "I" or mode.startswith("I;16")


def _int_gray_to_8bit(img: Image.Image) -> Image.Image:
    """
    Grayscale 16-bit (PNG 16-bit, umum di scan medis) -> 8-bit "L".
    Range 0..65535 diskalakan ke 0..255.
    """
    arr = np.asarray(img, dtype=np.float64)
    arr = np.clip(arr, 0, 65535) / 257.0
    return Image.fromarray(np.rint(arr).astype(np.uint8))


def to_rgb(img: Image.Image) -> Image.Image:
    if img.mode == "RGB":
        return img
    if _is_int_gray(img.mode):
        img = _int_gray_to_8bit(img)
    elif img.mode not in RGB_CONVERTIBLE_MODES:
        # contoh: "F" (float 32-bit)
        raise UnsupportedFormatError()
    return img.convert("RGB")


def normalize_image(image_bytes: bytes) -> np.ndarray:
    """
    Konversi bytes upload -> batch numpy (1, 224, 224, 3) float32.
    - paksa 3 channel (RGB)
    - resize bilinear ke ukuran input model
    - nilai pixel tetap 0..255 (model sudah handle scaling sendiri)
    """
    img = to_rgb(decode_image(image_bytes))

    # PIL pakai (W, H)
    img = img.resize((Config.IMG_WIDTH, Config.IMG_HEIGHT), resample=Image.BILINEAR)

    arr = np.asarray(img, dtype=np.float32)

    # Tambah dimensi batch
    return np.expand_dims(arr, axis=0)
