"""
FastAPI web application for SEO Analyzer
"""
from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, HttpUrl
from typing import Dict, Any, Optional
import logging
from datetime import datetime
import uvicorn

from config import config
from exceptions import AnalysisError, ANALYSIS_FAILED_MESSAGE
from monitoring import setup_logging
from seo_analyzer import SEOAnalyzer

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


# Pydantic models for API requests
class URLAnalysisRequest(BaseModel):
    url: HttpUrl


# Response models
class APIResponse(BaseModel):
    success: bool
    message: str
    data: Optional[Dict[str, Any]] = None
    timestamp: datetime


# Initialize FastAPI app
app = FastAPI(
    title="SEO Analyzer API",
    description="Single-page SEO analysis API",
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Global analyzer instance
analyzer = None


@app.on_event("startup")
async def startup_event():
    """Initialize the analyzer on startup"""
    global analyzer
    setup_logging(config.log_level, config.log_dir)
    analyzer = SEOAnalyzer()
    logger.info("SEO Analyzer API started successfully")


@app.on_event("shutdown")
async def shutdown_event():
    """Release the analyzer's HTTP session"""
    if analyzer is not None:
        analyzer.close()


def get_analyzer() -> SEOAnalyzer:
    """Dependency to get the analyzer instance"""
    if analyzer is None:
        raise HTTPException(status_code=500, detail="Analyzer not initialized")
    return analyzer


@app.get("/", response_model=Dict[str, str])
async def root():
    """Root endpoint"""
    return {
        "message": "SEO Analyzer API",
        "version": VERSION,
        "docs": "/docs",
        "health": "/health"
    }


@app.get("/health", response_model=Dict[str, str])
async def health_check():
    """Liveness check"""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


@app.post("/analyze", response_model=APIResponse)
def analyze_url(request: URLAnalysisRequest, seo_analyzer: SEOAnalyzer = Depends(get_analyzer)):
    """Analyze a single URL"""
    url = str(request.url)
    logger.info(f"Analyzing URL: {url}")

    try:
        result = seo_analyzer.analyze(url)
    except AnalysisError as e:
        logger.error(f"Analysis failed for {url}: {e!r}")
        response = APIResponse(
            success=False,
            message=ANALYSIS_FAILED_MESSAGE,
            data={"kind": e.kind.value, "status_code": e.status_code},
            timestamp=datetime.now()
        )
        return JSONResponse(status_code=502, content=response.model_dump(mode="json"))

    return APIResponse(
        success=True,
        message="URL analysis completed",
        data=result.to_dict(),
        timestamp=datetime.now()
    )


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "message": "Internal server error",
            "timestamp": datetime.now().isoformat()
        }
    )


if __name__ == "__main__":
    uvicorn.run(
        "api:app",
        host="0.0.0.0",
        port=8000,
        log_level="info"
    )
