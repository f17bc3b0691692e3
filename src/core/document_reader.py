import io
import logging
import re
from pathlib import Path
from typing import Callable, List, Optional

import mammoth
import pdfplumber
import PyPDF2
from docx import Document

from .data_models import ExtractedDocument
from .errors import ExtractionError
from config.settings import settings

logger = logging.getLogger(__name__)

PDF_MIME = 'application/pdf'
DOCX_MIME = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'
TEXT_MIME = 'text/plain'
GENERIC_MIME = 'application/octet-stream'

MIME_TYPES = {
    '.pdf': PDF_MIME,
    '.docx': DOCX_MIME,
    '.doc': 'application/msword',
    '.txt': TEXT_MIME,
}

_PDF_STRING = re.compile(r'\((.*?)\)', re.DOTALL)
_PDF_STREAM = re.compile(r'stream\s*(.*?)\s*endstream', re.DOTALL)
_DOCX_TEXT_RUN = re.compile(r'<w:t[^>]*>(.*?)</w:t>', re.DOTALL)
_TAG = re.compile(r'<[^>]*>')
_PDF_NOISE = re.compile(r'[^\w\s\-.,;:!?()\[\]]')
_GENERIC_NOISE = re.compile(r'[^\w\s\-.,;:!?]')
_WHITESPACE = re.compile(r'\s+')


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(' ', text).strip()


class DocumentReader:
    """Turns uploaded document bytes into bounded plain text.

    PDF and DOCX go through the parsing libraries first and fall back to
    byte-pattern heuristics; anything else is stripped down to printable
    characters. Reading never raises on malformed input.
    """

    def __init__(self, max_chars: int = None, use_parser_libraries: bool = None):
        self.max_chars = max_chars or settings.MAX_TEXT_LENGTH
        self.use_parser_libraries = (
            use_parser_libraries if use_parser_libraries is not None else settings.USE_PARSER_LIBRARIES
        )
        self.structured_min_length = settings.STRUCTURED_TEXT_MIN_LENGTH

    def _get_file_type(self, content: bytes, filename: str = "", mime_type: str = "") -> str:
        """Resolve the document type from declared type, extension and signature"""
        mime_type = (mime_type or "").lower()
        if mime_type and mime_type != GENERIC_MIME:
            if 'pdf' in mime_type:
                return PDF_MIME
            if 'word' in mime_type:
                return DOCX_MIME
            if mime_type.startswith('text/'):
                return TEXT_MIME
            return mime_type

        ext = Path(filename or "").suffix.lower()
        if ext in MIME_TYPES:
            return MIME_TYPES[ext]

        header = content[:8]
        if header.startswith(b'%PDF-'):
            return PDF_MIME
        elif header.startswith(b'PK\x03\x04'):
            return DOCX_MIME
        return GENERIC_MIME

    def read_bytes(self, content: bytes, filename: str = "", mime_type: str = "") -> str:
        """Extract text from a document buffer, truncated to ``max_chars``"""
        content = content or b""
        file_type = self._get_file_type(content, filename, mime_type)
        logger.info(f"Processing file: {filename}, type: {file_type}, size: {len(content)} bytes")

        if file_type == TEXT_MIME or (filename or "").lower().endswith('.txt'):
            text = content.decode('utf-8', errors='replace')
        elif file_type == PDF_MIME:
            text = self.read_pdf(content)
        elif file_type == DOCX_MIME or (filename or "").lower().endswith('.docx'):
            text = self.read_docx(content)
        else:
            text = self._extract_printable(content)

        if len(text) > self.max_chars:
            text = text[:self.max_chars]
        logger.info(f"Extracted {len(text)} characters from {filename or 'upload'}")
        return text

    def read_document(self, content: bytes, filename: str = "", mime_type: str = "") -> ExtractedDocument:
        return ExtractedDocument(
            text=self.read_bytes(content, filename, mime_type),
            source_file_name=filename or "",
            source_size=len(content or b""),
            source_mime_type=mime_type or "",
        )

    def _try_method(self, method: Callable[[bytes], str], content: bytes) -> str:
        try:
            return method(content)
        except Exception as e:
            raise ExtractionError(f"Method {method.__name__} failed: {e}") from e

    def _run_methods(self, content: bytes, methods: List[Callable[[bytes], str]], min_length: int) -> Optional[str]:
        for method in methods:
            try:
                text = self._try_method(method, content)
            except ExtractionError as e:
                logger.warning(e.message)
                continue
            if text and len(text.strip()) >= min_length:
                logger.info(f"Successfully extracted text using {method.__name__}")
                return text
        return None

    def read_pdf(self, content: bytes) -> str:
        methods = []
        if self.use_parser_libraries:
            methods += [self._extract_with_pdfplumber, self._extract_with_pypdf2]
        methods.append(self._extract_pdf_patterns)

        text = self._run_methods(content, methods, self.structured_min_length)
        if text is None:
            logger.info("No structured PDF text found, using printable character fallback")
            text = self._extract_printable(content)
        return text

    def read_docx(self, content: bytes) -> str:
        methods = []
        if self.use_parser_libraries:
            methods += [self._extract_with_mammoth, self._extract_with_python_docx]
        methods.append(self._extract_docx_patterns)

        text = self._run_methods(content, methods, 1)
        if text is None:
            text = self._extract_printable(content)
        return text

    def _extract_with_pdfplumber(self, content: bytes) -> str:
        """Extract text using pdfplumber"""
        text = ""
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text += page_text + "\n"
        return text

    def _extract_with_pypdf2(self, content: bytes) -> str:
        """Extract text using PyPDF2"""
        text = ""
        reader = PyPDF2.PdfReader(io.BytesIO(content))
        for page in reader.pages:
            text += (page.extract_text() or "") + "\n"
        return text

    def _extract_pdf_patterns(self, content: bytes) -> str:
        """Collect string literals and stream contents from the raw PDF bytes"""
        raw = content.decode('utf-8', errors='replace')
        parts = _PDF_STRING.findall(raw) + _PDF_STREAM.findall(raw)
        return _collapse(_PDF_NOISE.sub(' ', ' '.join(parts)))

    def _extract_with_mammoth(self, content: bytes) -> str:
        result = mammoth.extract_raw_text(io.BytesIO(content))
        return result.value

    def _extract_with_python_docx(self, content: bytes) -> str:
        doc = Document(io.BytesIO(content))

        text_parts = [p.text for p in doc.paragraphs if p.text.strip()]
        for table in doc.tables:
            for row in table.rows:
                row_text = ' | '.join(cell.text for cell in row.cells)
                if row_text.strip():
                    text_parts.append(row_text)
        return '\n'.join(text_parts)

    def _extract_docx_patterns(self, content: bytes) -> str:
        """Concatenate inline <w:t> text runs found in the raw bytes"""
        raw = content.decode('utf-8', errors='replace')
        runs = [_TAG.sub('', run) for run in _DOCX_TEXT_RUN.findall(raw)]
        return _collapse(' '.join(runs))

    def _extract_printable(self, content: bytes) -> str:
        raw = content.decode('utf-8', errors='replace')
        return _collapse(_GENERIC_NOISE.sub(' ', raw))
