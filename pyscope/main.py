"""FastAPI application exposing pyscope analysis."""

from typing import List

import structlog
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from pyscope import __version__
from pyscope.analysis.language_gate import NotSupportedLanguage
from pyscope.config import configure_logging, settings
from pyscope.models import AnalysisReport, AnalysisRequest, CodeSample, ExportEnvelope
from pyscope.parsing import build_envelope
from pyscope.pipeline import CodeAnalyzer
from pyscope.samples import filter_samples, get_sample

configure_logging(settings)

logger = structlog.get_logger()

app = FastAPI(
    title="pyscope",
    description="Heuristic static analysis of Python source",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

analyzer = CodeAnalyzer(config=settings)


def code_size_bytes(code: str) -> int:
    """UTF-8 size of a request body, counting lone surrogates as 3 bytes."""
    return len(code.encode("utf-8", errors="surrogatepass"))


def _run(request: AnalysisRequest) -> AnalysisReport:
    if code_size_bytes(request.code) > settings.max_code_size_bytes:
        logger.warning("code_too_large", size=len(request.code))
        raise HTTPException(status_code=413, detail="Source code is too large")
    try:
        return analyzer.analyze(request.code)
    except NotSupportedLanguage as e:
        raise HTTPException(status_code=422, detail=e.message) from e


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "service": "pyscope",
        "version": __version__,
        "status": "operational",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/api/v1/analyze", response_model=AnalysisReport)
def analyze_endpoint(request: AnalysisRequest) -> AnalysisReport:
    """Analyze a source string."""
    return _run(request)


@app.post("/api/v1/export", response_model=ExportEnvelope)
def export_endpoint(request: AnalysisRequest) -> ExportEnvelope:
    """Analyze a source string and wrap it with its report for download."""
    return build_envelope(request.code, _run(request))


@app.get("/api/v1/samples", response_model=List[CodeSample])
def list_samples(
    difficulty: str = Query(default="all"),
    search: str = Query(default=""),
) -> List[CodeSample]:
    """List catalog samples."""
    return filter_samples(difficulty=difficulty, search=search)


@app.get("/api/v1/samples/{sample_id}", response_model=CodeSample)
def read_sample(sample_id: str) -> CodeSample:
    """Fetch one catalog sample."""
    sample = get_sample(sample_id)
    if sample is None:
        raise HTTPException(status_code=404, detail=f"Unknown sample: {sample_id}")
    return sample
