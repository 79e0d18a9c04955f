from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .errors import ComputationDegenerate, InvalidCoordinate, InvalidInstant
from .jyotish import compute_chart
from .schemas import ChartRequest, VedicChart

app = FastAPI(title="vedic-chart")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins for development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/api/chart", response_model=VedicChart)
def chart_endpoint(data: ChartRequest) -> VedicChart:
    try:
        return compute_chart(data)
    except (InvalidCoordinate, InvalidInstant, ComputationDegenerate) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
