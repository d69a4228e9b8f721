"""QR image renderer for BR Code payloads."""
from __future__ import annotations

import base64
import io
import logging
from typing import Any

import qrcode
from PIL import Image, ImageDraw, ImageFont

from .config import settings

logger = logging.getLogger("pixbrcode.render")


def generate_qr_image(data: str, title: str | None = None) -> Image.Image:
    """Generate QR image with a white frame and a label under the code."""

    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=settings.qr_box_size,
        border=settings.qr_border,
    )
    qr.add_data(data)
    qr.make(fit=True)

    qr_img = qr.make_image(fill_color="black", back_color="white").convert("RGB")
    width, height = qr_img.size

    label_height = 40
    canvas = Image.new("RGB", (width, height + label_height), color="#FFFFFF")
    canvas.paste(qr_img, (0, 0))

    draw = ImageDraw.Draw(canvas)
    font = ImageFont.load_default()
    text = (title or settings.app_name).upper()
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    text_x = (width - (right - left)) // 2
    text_y = height + (label_height - (bottom - top)) // 2
    draw.text((text_x, text_y), text, fill="#1F2937", font=font)

    logger.debug("qr rendered", extra={"qr_version": qr.version, "image_size": canvas.size})
    return canvas


def qr_image_to_png_bytes(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def render_qr_payload(payload: str, title: str | None = None) -> dict[str, Any]:
    """Render payload into PNG bytes and base64 string."""

    image = generate_qr_image(payload, title=title)
    png_bytes = qr_image_to_png_bytes(image)
    return {
        "png_bytes": png_bytes,
        "png_base64": base64.b64encode(png_bytes).decode("ascii"),
    }
