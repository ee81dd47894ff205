from io import BytesIO
from loguru import logger
from PIL import Image, ImageOps, UnidentifiedImageError
import pytesseract


class OCRError(Exception):
    """Tesseract could not produce text for an image."""


class InvalidImageError(ValueError):
    """The uploaded bytes are not an image Pillow can decode."""


def load_image(image_bytes: bytes) -> Image.Image:
    if not image_bytes:
        raise InvalidImageError("Empty image")
    try:
        image = Image.open(BytesIO(image_bytes))
        image.load()
        # Respect camera rotation, then grayscale for tesseract
        image = ImageOps.exif_transpose(image)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError, SyntaxError) as e:
        raise InvalidImageError(f"Could not read image: {e}") from e
    return image.convert("L")


def extract_text(image_bytes: bytes, lang: str = "spa", tesseract_cmd: str | None = None) -> str:
    """Run Tesseract over an uploaded image and return the raw recognized text."""
    image = load_image(image_bytes)

    if tesseract_cmd:
        pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    logger.info("Running Tesseract OCR", lang=lang, width=image.width, height=image.height)
    try:
        text = pytesseract.image_to_string(image, lang=lang)
    except pytesseract.TesseractNotFoundError as e:
        logger.error("Tesseract binary not found - install tesseract-ocr or set TESSERACT_CMD")
        raise OCRError("Tesseract is not installed") from e
    except (pytesseract.TesseractError, RuntimeError) as e:
        logger.error(f"Tesseract OCR failed: {e}")
        raise OCRError(str(e)) from e

    logger.info("OCR completed", chars=len(text))
    return text
