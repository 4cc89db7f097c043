import logging
import os
from pathlib import Path
import sys
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Ensure local src package is importable in serverless runtime.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from chart_lens import generate_chart, normalize, sample_series, sample_url  # noqa: E402
from chart_lens.exceptions import ChartLensError, InvalidURLError  # noqa: E402
from chart_lens.fetch import FetchConfig  # noqa: E402
from chart_lens.normalization import NormalizationConfig, resolve_mode  # noqa: E402
from chart_lens.schema import NormalizedSeries  # noqa: E402

app = FastAPI(title="chart-lens API", version="1.0.0")
logger = logging.getLogger(__name__)

raw_origins = os.getenv("FRONTEND_ORIGINS", "*")
allow_origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]
NORMALIZATION_CONFIG = NormalizationConfig.from_env()
FETCH_CONFIG = FetchConfig.from_env()

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


class NormalizeRequest(BaseModel):
    data: Any = None
    mode: str = "bar"


class GenerateRequest(BaseModel):
    url: str
    mode: str = "bar"


class ChartResponse(BaseModel):
    series: NormalizedSeries
    magnitudeNote: str | None = None
    sampleUrl: str


class FetchErrorDetail(BaseModel):
    message: str
    sampleUrl: str


def _resolve_mode_or_400(mode: str) -> str:
    try:
        return resolve_mode(mode)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _chart_response(series: NormalizedSeries) -> ChartResponse:
    return ChartResponse(
        series=series,
        magnitudeNote=series.magnitude_note,
        sampleUrl=sample_url(series.mode),
    )


@app.get("/samples/{mode}", response_model=ChartResponse)
def samples(mode: str) -> ChartResponse:
    resolved = _resolve_mode_or_400(mode)
    return _chart_response(sample_series(resolved))


@app.post("/normalize", response_model=ChartResponse)
def normalize_payload(body: NormalizeRequest) -> ChartResponse:
    resolved = _resolve_mode_or_400(body.mode)
    series = normalize(body.data, resolved, config=NORMALIZATION_CONFIG)
    return _chart_response(series)


@app.post("/generate", response_model=ChartResponse)
def generate(body: GenerateRequest) -> ChartResponse:
    resolved = _resolve_mode_or_400(body.mode)
    try:
        series = generate_chart(
            body.url,
            resolved,
            config=NORMALIZATION_CONFIG,
            fetch_config=FETCH_CONFIG,
        )
    except InvalidURLError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ChartLensError as exc:
        detail = FetchErrorDetail(message=str(exc), sampleUrl=sample_url(resolved))
        raise HTTPException(status_code=502, detail=detail.model_dump()) from exc
    except Exception as exc:
        logger.exception("generate failed")
        raise HTTPException(status_code=500, detail="internal_error") from exc
    return _chart_response(series)
