import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict

# Load environment variables from .env file
load_dotenv()

from flight_progress.adapters.data_providers.flight_detail import (  # noqa: E402
    parse_flight_detail,
)
from flight_progress.application import TrackFlightProgress  # noqa: E402
from flight_progress.config import EngineConfig  # noqa: E402
from flight_progress.exceptions import FlightDetailParseError  # noqa: E402
from flight_progress.schemas.flight import FlightPhase  # noqa: E402
from flight_progress.services.schedule_status import (  # noqa: E402
    arrival_status_text,
    block_duration,
    departure_status_text,
    format_duration,
)

logger = logging.getLogger(__name__)

tracker = TrackFlightProgress(config=EngineConfig.from_env())

app = FastAPI(title="Flight Progress API")


# --- Pydantic Schemas (The JSON Contract) ---
# from_attributes lets the response models read the frozen dataclasses,
# including @property fields such as status_text.


class GeoCoordinateSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    latitude: float
    longitude: float


class MapRegionSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    center: GeoCoordinateSchema
    latitude_delta: float
    longitude_delta: float


class SnapshotSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    phase: FlightPhase
    status_text: str  # Captures @property
    fraction: float
    current_position: GeoCoordinateSchema
    traveled_path: List[GeoCoordinateSchema]
    remaining_path: List[GeoCoordinateSchema]
    heading_degrees: float


class ProgressResponse(BaseModel):
    flight_id: Optional[str] = None
    snapshot: SnapshotSchema
    region: Optional[MapRegionSchema] = None
    departure_status: str
    arrival_status: str
    duration_text: str


# --- API Endpoints ---


class ProgressRequest(BaseModel):
    flight: Dict[str, Any]
    now: Optional[datetime] = None


@app.get("/health")
async def health():
    return {"status": "ok", "cached_arcs": tracker.cache_size}


@app.post("/progress", response_model=ProgressResponse)
async def flight_progress(request: ProgressRequest):
    try:
        progress_request = parse_flight_detail(request.flight)
    except FlightDetailParseError as error:
        logger.info("Progress request rejected: %s", error)
        raise HTTPException(status_code=422, detail=str(error))

    snapshot = tracker.track_request(progress_request, now=request.now)
    region = tracker.region_for(progress_request)

    return ProgressResponse(
        flight_id=progress_request.flight_id,
        snapshot=SnapshotSchema.model_validate(snapshot),
        region=MapRegionSchema.model_validate(region) if region is not None else None,
        departure_status=departure_status_text(progress_request.window),
        arrival_status=arrival_status_text(progress_request.window),
        duration_text=format_duration(block_duration(progress_request.window)),
    )
