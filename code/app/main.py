import uvicorn
from fastapi import FastAPI, HTTPException
from loguru import logger

from app.config import API_HOST, API_PORT, APP_TITLE, configure_logging
from app.core.models import CalculateRequest, CalculateResponse, ParseErrorDetail
from app.core.pipeline import run_calculation
from savings.scenarios import SAVINGS_PERCENTAGES
from savings.state import INVALID_INPUT_MESSAGE
from savings.utils import ParseError

app = FastAPI(title=f"{APP_TITLE} API")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/percentages")
def percentages():
    return {"percentages": list(SAVINGS_PERCENTAGES)}


@app.post("/calculate", response_model=CalculateResponse)
def calculate(payload: CalculateRequest):
    logger.info("POST /calculate")
    try:
        return run_calculation(payload)
    except ParseError as e:
        detail = ParseErrorDetail(message=INVALID_INPUT_MESSAGE, fields=list(e.fields))
        raise HTTPException(status_code=422, detail=detail.model_dump()) from e


def run() -> None:
    configure_logging()
    logger.info(f"Starting {APP_TITLE} API on {API_HOST}:{API_PORT}")
    uvicorn.run(app, host=API_HOST, port=API_PORT)


if __name__ == "__main__":
    run()
