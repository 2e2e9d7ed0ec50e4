from typing import List, Optional

from fastapi import FastAPI, File, Form, HTTPException, Query, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from services.ats_scorer import analyze_resume_text, analyze_structured_resume
from services.text_processor import TextProcessor
from models.resume_models import ATSAnalysis, AnalyzeRequest, BatchAnalyzeRequest, StructuredResume
from utils import get_settings, setup_logging
import logging


settings = get_settings()

app = FastAPI(title="Placement ATS Scorer API", version="1.0.0")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Configure logging
setup_logging(settings.log_level, settings.log_format)
logger = logging.getLogger(__name__)

# Initialize services
text_processor = TextProcessor()


@app.get("/")
async def root():
    return {"message": "Placement ATS Scorer API is working"}


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "services": {
            "text_processor": "running",
            "ats_scorer": "running"
        }
    }


@app.post("/analyze", response_model=ATSAnalysis)
async def analyze(request: AnalyzeRequest):
    """
    Score plain resume text
    """
    try:
        return await run_in_threadpool(analyze_resume_text, request.resume_text, request.target_role)
    except Exception as e:
        logger.error(f"Error analyzing resume text: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error analyzing resume")


@app.post("/analyze/batch", response_model=List[ATSAnalysis])
async def analyze_batch(request: BatchAnalyzeRequest):
    """
    Score several resumes; each one is independent of the others
    """
    if not request.resumes:
        raise HTTPException(status_code=400, detail="At least one resume is required")
    if len(request.resumes) > settings.max_batch_size:
        raise HTTPException(
            status_code=400,
            detail=f"At most {settings.max_batch_size} resumes per batch"
        )

    logger.info(f"Scoring batch of {len(request.resumes)} resumes")
    try:
        return [
            await run_in_threadpool(analyze_resume_text, item.resume_text, item.target_role)
            for item in request.resumes
        ]
    except Exception as e:
        logger.error(f"Error analyzing resume batch: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error analyzing resume batch")


@app.post("/analyze/structured", response_model=ATSAnalysis)
async def analyze_structured(resume: StructuredResume, target_role: Optional[str] = Query(None)):
    """
    Score resume fields already extracted by a resume parser
    """
    try:
        return await run_in_threadpool(analyze_structured_resume, resume, target_role)
    except Exception as e:
        logger.error(f"Error analyzing structured resume: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error analyzing resume")


@app.post("/upload-resume", response_model=ATSAnalysis)
async def upload_resume(file: UploadFile = File(...), target_role: Optional[str] = Form(None)):
    """
    Upload a plain-text resume and analyze it
    """
    # Validate file type
    if not text_processor.is_supported(file.filename, file.content_type):
        raise HTTPException(
            status_code=415,
            detail="Only plain-text (.txt) resumes are supported; convert PDF/DOCX to text first"
        )

    # Validate file size
    too_large = HTTPException(
        status_code=413,
        detail=f"File size must be less than {settings.max_upload_size_mb}MB"
    )
    if file.size is not None and file.size > settings.max_upload_bytes:
        raise too_large

    content = await file.read()
    if len(content) > settings.max_upload_bytes:
        raise too_large

    logger.info(f"Processing file: {file.filename}")
    extracted_text = text_processor.extract_text(content)
    if not extracted_text:
        raise HTTPException(status_code=400, detail="Uploaded file contains no text")

    try:
        analysis = await run_in_threadpool(analyze_resume_text, extracted_text, target_role)
    except Exception as e:
        logger.error(f"Error processing resume: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error processing resume: {str(e)}")

    logger.info(f"Analysis completed for: {file.filename}")
    return analysis


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
