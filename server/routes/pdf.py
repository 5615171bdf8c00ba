"""
PDF 텍스트 추출 API
"""
from __future__ import annotations

import asyncio
import logging
import tempfile
from pathlib import Path
from typing import Optional, Tuple

import pdfplumber
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from ..config import AppSettings
from ..dependencies import get_settings, require_api_key

router = APIRouter(prefix="/api", tags=["PDF"])
logger = logging.getLogger(__name__)


def extract_pdf_text(pdf_path: str) -> Tuple[str, int]:
    """PDF 전체 페이지 텍스트 추출 (페이지 사이 빈 줄)"""
    with pdfplumber.open(pdf_path) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    text = "\n\n".join(p.strip() for p in pages if p.strip())
    return text, len(pages)


def _is_pdf(file: UploadFile) -> bool:
    if file.content_type == "application/pdf":
        return True
    return (file.filename or "").lower().endswith(".pdf")


@router.post("/extract-pdf", status_code=status.HTTP_200_OK)
async def extract_pdf(
    file: Optional[UploadFile] = File(default=None, description="텍스트를 추출할 PDF 파일"),
    api_key: str = Depends(require_api_key),
    settings: AppSettings = Depends(get_settings),
):
    """업로드된 PDF에서 텍스트 추출 (임시 파일은 응답 전에 삭제)"""
    if file is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded",
        )
    if not _is_pdf(file):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PDF files are supported",
        )

    max_bytes = settings.pdf.max_upload_bytes
    content = await file.read(max_bytes + 1)
    if not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Uploaded file is empty",
        )
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File is too large (max {max_bytes} bytes)",
        )

    with tempfile.NamedTemporaryFile(suffix=".pdf", delete=False) as tmp:
        tmp.write(content)
        tmp_path = Path(tmp.name)

    try:
        text, page_count = await asyncio.to_thread(extract_pdf_text, str(tmp_path))
    except Exception as exc:  # pdfminer 예외 전반
        logger.warning("PDF 파싱 실패 (%s): %s", file.filename, exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Could not read the PDF file",
        ) from exc
    finally:
        tmp_path.unlink(missing_ok=True)

    logger.info("PDF 텍스트 추출: file=%s pages=%d chars=%d", file.filename, page_count, len(text))
    return {"text": text, "pages": page_count, "filename": file.filename}
