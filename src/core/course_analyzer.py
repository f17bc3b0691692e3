import logging
import mimetypes
from pathlib import Path
from typing import Optional

from .data_models import AnalysisResult, ExtractedDocument, FileInfo, Taxonomy
from .document_reader import DocumentReader
from .domain_classifier import DomainClassifier
from .errors import FileTooLargeError, InsufficientTextError, MissingInputError
from .result_assembler import assemble_result
from .skill_matcher import SkillMatcher
from .taxonomy import TaxonomyProvider
from config.settings import settings

logger = logging.getLogger(__name__)


class CourseAnalyzer:
    """Runs one document through extraction, matching, classification and assembly.

    Each call is independent; the only state kept between calls is the
    provider's read-only taxonomy snapshot.
    """

    def __init__(self,
                 document_reader: DocumentReader = None,
                 taxonomy_provider: TaxonomyProvider = None,
                 matcher: SkillMatcher = None,
                 classifier: DomainClassifier = None,
                 max_document_size: int = None,
                 min_text_length: int = None):
        self.document_reader = document_reader or DocumentReader()
        self.taxonomy_provider = taxonomy_provider or TaxonomyProvider()
        self.matcher = matcher or SkillMatcher()
        self.classifier = classifier or DomainClassifier()
        self.max_document_size = max_document_size or settings.MAX_DOCUMENT_SIZE
        self.min_text_length = min_text_length or settings.MIN_TEXT_LENGTH

    def check_size(self, size: Optional[int]):
        if size is not None and size > self.max_document_size:
            raise FileTooLargeError(size, self.max_document_size)

    def analyze_document(self,
                         content: Optional[bytes],
                         filename: str = "",
                         mime_type: str = "",
                         size: Optional[int] = None) -> AnalysisResult:
        if content is None or (not content and not filename):
            raise MissingInputError()

        size = size if size is not None else len(content)
        self.check_size(max(size, len(content)))
        logger.info(f"Processing file: {filename}, size: {size / 1024 / 1024:.2f}MB")

        document = self.document_reader.read_document(content, filename, mime_type)
        text_length = len(document.text.strip())
        if text_length < self.min_text_length:
            logger.warning(f"Insufficient text in {filename}: {text_length} characters")
            raise InsufficientTextError(text_length, self.min_text_length)

        file_info = FileInfo(name=filename or "", size=size, mime_type=mime_type or "")
        return self.analyze_extracted(document, file_info)

    def analyze_file(self, file_path) -> AnalysisResult:
        """Read and analyze a document from disk"""
        path = Path(file_path)
        if not path.is_file():
            raise MissingInputError(f"File not found: {path}")
        self.check_size(path.stat().st_size)

        mime_type = mimetypes.guess_type(path.name)[0] or ""
        return self.analyze_document(path.read_bytes(), path.name, mime_type)

    def analyze_extracted(self,
                          document: ExtractedDocument,
                          file_info: Optional[FileInfo] = None,
                          taxonomy: Optional[Taxonomy] = None) -> AnalysisResult:
        return self.analyze_text(document.text, file_info, taxonomy)

    def analyze_text(self,
                     text: str,
                     file_info: Optional[FileInfo] = None,
                     taxonomy: Optional[Taxonomy] = None) -> AnalysisResult:
        taxonomy = taxonomy or self.taxonomy_provider.get_taxonomy()
        logger.info(f"Loaded taxonomy with {taxonomy.size} total skills")

        skills = self.matcher.match(text, taxonomy)
        domains = self.classifier.classify(text, skills)
        return assemble_result(
            text,
            skills,
            domains,
            file_info=file_info,
            min_confidence=self.matcher.min_confidence,
        )
