from fastapi import FastAPI, UploadFile, File
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn
from contextlib import asynccontextmanager
from typing import Optional
import logging

from src.api.taxonomy_client import SkillLibraryClient
from src.core.course_analyzer import CourseAnalyzer
from src.core.data_models import ErrorResponse
from src.core.errors import AnalysisError, MissingInputError, DEFAULT_SUGGESTIONS
from src.core.taxonomy import TaxonomyProvider
from config.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    yield


app = FastAPI(title="Course Skill Analyzer API", lifespan=lifespan)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize analyzer
analyzer = CourseAnalyzer(
    taxonomy_provider=TaxonomyProvider(client=SkillLibraryClient.from_settings())
)


def error_response(error: Exception) -> JSONResponse:
    if isinstance(error, AnalysisError):
        body = ErrorResponse(
            error=error.message,
            error_type=type(error).__name__,
            suggestions=error.suggestions,
        )
        status_code = error.status_code
    else:
        body = ErrorResponse(
            error=str(error) or "Unexpected error while analyzing the document",
            error_type="AnalysisError",
            suggestions=DEFAULT_SUGGESTIONS,
        )
        status_code = 500
    return JSONResponse(status_code=status_code, content=body.to_dict())


@app.get("/")
async def root():
    return {"status": "online", "service": "course-skill-analyzer"}


@app.post("/analyze")
async def analyze_document(file: Optional[UploadFile] = File(None)):
    try:
        if file is None or not file.filename:
            raise MissingInputError()

        # Reject oversized uploads before reading the body
        if file.size is not None:
            analyzer.check_size(file.size)
        content = await file.read(analyzer.max_document_size + 1)
        analyzer.check_size(len(content))

        result = await run_in_threadpool(
            analyzer.analyze_document,
            content,
            file.filename,
            file.content_type or "",
            file.size if file.size is not None else len(content),
        )
        logger.info(f"Analysis completed successfully for {file.filename}")
        return result.to_dict()

    except AnalysisError as e:
        logger.warning(f"Analysis rejected: {e}")
        return error_response(e)
    except Exception as e:
        logger.exception(f"Analysis error: {e}")
        return error_response(e)


if __name__ == "__main__":
    uvicorn.run("src.api.server:app", host="0.0.0.0", port=8000, reload=True)
