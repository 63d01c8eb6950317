import logging

from fastapi import FastAPI, File, HTTPException, UploadFile
import uvicorn

import config
from analysis import run_analysis
from errors import DocumentReadError, MissingInputError, UnsupportedDocumentError
from resume_parser import read_resume_upload
from schemas import AnalysisResult, ExtractResult, MatchInput

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Resume Matcher")


@app.get("/health")
def health():
    return {"status": "ok", "model_configured": config.get_api_key() is not None}


# plain def: the Groq call is blocking, FastAPI runs this in its threadpool
@app.post("/analyze", response_model=AnalysisResult)
def analyze(req: MatchInput):
    try:
        return run_analysis(req.resume_text, req.job_description)
    except MissingInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/extract", response_model=ExtractResult)
async def extract(file: UploadFile = File(...)):
    data = await file.read()
    try:
        text, pages = read_resume_upload(file.filename, file.content_type, data)
    except UnsupportedDocumentError as e:
        raise HTTPException(status_code=415, detail=str(e))
    except DocumentReadError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ExtractResult(filename=file.filename or "", text=text, pages=pages)


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=config.PORT, reload=True)
