import base64

import cv2
import numpy as np

from ..errors import PhotoError


def decode_image(file_bytes: bytes) -> np.ndarray:
    if not file_bytes:
        raise PhotoError("File gambar kosong")
    img = cv2.imdecode(np.frombuffer(file_bytes, np.uint8), cv2.IMREAD_COLOR)
    if img is None:
        raise PhotoError("Gambar tidak valid")
    return img


def shrink(img: np.ndarray, max_width: int) -> np.ndarray:
    height, width = img.shape[:2]
    if width <= max_width:
        return img
    scale = max_width / float(width)
    return cv2.resize(img, (max_width, max(1, int(height * scale))), interpolation=cv2.INTER_AREA)


def photo_to_data_url(file_bytes: bytes, max_width: int = 800, quality: int = 85) -> str:
    """Decode an uploaded vehicle photo and re-encode it as a JPEG data URL."""
    img = shrink(decode_image(file_bytes), max_width)
    ok, buf = cv2.imencode(".jpg", img, [int(cv2.IMWRITE_JPEG_QUALITY), quality])
    if not ok:
        raise PhotoError("Gagal mengonversi gambar")
    encoded = base64.b64encode(buf.tobytes()).decode("ascii")
    return f"data:image/jpeg;base64,{encoded}"
