from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from loguru import logger
from ..deps import OCRResponse, get_llm_client
from ...core.config import settings
from ...models.invoice import ExtractionStrategy, TextExtractionRequest
from ...services.invoice_types import ExtractedRecord
from ...services.llm import GeminiClient
from ...services.ocr import InvalidImageError, OCRError, extract_text
from ...services.pipeline import process_text, run_regex_strategy

router = APIRouter(prefix="/api", tags=["ocr"])

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".tif", ".tiff", ".bmp", ".webp", ".gif")


def is_image_upload(image: UploadFile) -> bool:
    content_type = (image.content_type or "").lower()
    if content_type.startswith("image/"):
        return True
    filename = (image.filename or "").lower()
    return filename.endswith(IMAGE_EXTENSIONS)


async def _process_upload(
    image: UploadFile | None,
    strategy: ExtractionStrategy,
    llm: GeminiClient | None,
) -> OCRResponse:
    if image is None:
        raise HTTPException(status_code=400, detail="No se ha proporcionado ninguna imagen")
    if not is_image_upload(image):
        raise HTTPException(status_code=400, detail="El archivo enviado no es una imagen válida")

    content = await image.read()
    if not content:
        raise HTTPException(status_code=400, detail="No se ha proporcionado ninguna imagen")
    if len(content) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"Archivo demasiado grande. Máx {settings.max_upload_mb}MB",
        )

    logger.info(
        "OCR request received",
        filename=image.filename,
        size_bytes=len(content),
        strategy=strategy.value,
    )

    try:
        raw = await run_in_threadpool(
            extract_text, content, settings.ocr_language, settings.tesseract_cmd
        )
    except InvalidImageError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except OCRError as e:
        logger.error(f"OCR failed: {e}")
        raise HTTPException(status_code=500, detail="Error al procesar la imagen")

    result = await process_text(raw, strategy, llm=llm, instruction=settings.llm_instruction)
    return OCRResponse(
        raw=result.raw,
        extraido=result.record,
        ia=result.ai,
        strategy=result.strategy.value,
    )


@router.post("/ocr", response_model=OCRResponse)
async def ocr(
    image: UploadFile = File(None),
    strategy: ExtractionStrategy | None = Form(None),
    llm: GeminiClient = Depends(get_llm_client),
):
    """
    OCR an uploaded invoice/receipt image and extract its fields.

    Multipart fields:
    - image: the picture (image/*)
    - strategy: regex | ai | both (defaults to DEFAULT_STRATEGY)

    Response: {"raw": <OCR text>, "extraido": <regex record or null>,
    "ia": <LLM result or null>, "strategy": ...}
    """
    chosen = strategy or settings.default_strategy
    return await _process_upload(image, chosen, llm)


@router.post("/ocr/regex", response_model=OCRResponse)
async def ocr_regex(image: UploadFile = File(None)):
    """Heuristic record only; the LLM is never called."""
    return await _process_upload(image, ExtractionStrategy.REGEX, None)


@router.post("/ocr/ai", response_model=OCRResponse)
async def ocr_ai(
    image: UploadFile = File(None),
    llm: GeminiClient = Depends(get_llm_client),
):
    """LLM answer passed through as free text; no heuristic record."""
    return await _process_upload(image, ExtractionStrategy.AI, llm)


@router.post("/extract", response_model=ExtractedRecord)
async def extract_from_text(req: TextExtractionRequest):
    """Run the field extractors over already-recognized text (no OCR)."""
    return run_regex_strategy(req.text, cleanup=req.cleanup)
