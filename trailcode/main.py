"""Trailcode microservice -- FastAPI application.

Endpoints:
    POST /encode               -- Encode hex data to a GeoJSON path
    POST /encode/instructions  -- Encode hex data to walking directions
    POST /encode/svg           -- Encode hex data to an SVG path preview
    POST /encode/png           -- Encode hex data to a PNG path preview
    POST /decode               -- Decode a GeoJSON path to hex data
    GET  /health               -- Health check
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse, Response
from pydantic import BaseModel, Field

from .decoder import decode
from .encoder import encode
from .errors import GeoJSONFormatError, InvalidBearingError
from .geojson_models import (
    FeatureCollection,
    path_from_feature_collection,
    path_to_feature_collection,
)
from .instructions import encode_to_instructions
from .renderer import DEFAULT_COLORS, render_png, render_svg

structlog.configure(
    processors=[
        structlog.dev.ConsoleRenderer(),
    ],
)

logger = structlog.get_logger(__name__)

VERSION = "0.1.0"

# Whole messages are held in memory
MAX_DATA_BYTES = 1024 * 1024

app = FastAPI(
    title="trailcode",
    description="Reversible codec between binary data and geodesic walking paths",
    version=VERSION,
)


# --------------------------------------------------------------------------
# Request / Response models
# --------------------------------------------------------------------------


class EncodeRequest(BaseModel):
    """Request body for /encode and /encode/instructions."""

    data_hex: str = Field(
        ...,
        description="Hex-encoded data to encode; empty string encodes an empty message",
        examples=["48656c6c6f"],
    )


class RenderRequest(EncodeRequest):
    """Request body for /encode/svg and /encode/png."""

    colors: list[str] = Field(
        default_factory=lambda: list(DEFAULT_COLORS),
        description="Line color and start marker color",
    )
    size: int = Field(
        default=512,
        ge=64,
        le=2048,
        description="Output image size in pixels (square)",
    )


class DecodeResponse(BaseModel):
    """Response body for /decode."""

    data_hex: str = Field(description="Decoded data as lowercase hex")
    byte_count: int = Field(description="Number of decoded bytes")


class HealthResponse(BaseModel):
    """Response body for /health."""

    status: str
    service: str
    version: str


def _parse_hex(data_hex: str) -> bytes:
    """Decode request hex, raising ValueError on bad or oversized input."""
    clean = data_hex.strip().removeprefix("0x").removeprefix("0X")
    data = bytes.fromhex(clean)
    if len(data) > MAX_DATA_BYTES:
        raise ValueError(f"Data too large: {len(data)} bytes (max {MAX_DATA_BYTES})")
    return data


# --------------------------------------------------------------------------
# Endpoints
# --------------------------------------------------------------------------


@app.post("/encode", response_model=FeatureCollection)
async def encode_geojson(request: EncodeRequest) -> FeatureCollection:
    """Encode hex data into a GeoJSON FeatureCollection."""
    try:
        data = _parse_hex(request.data_hex)
        path = encode(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("encode_geojson_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Encoding failed")

    logger.info("encode_success", data_bytes=len(data))
    return path_to_feature_collection(path)


@app.post("/encode/instructions", response_class=PlainTextResponse)
async def encode_instructions(request: EncodeRequest) -> PlainTextResponse:
    """Encode hex data into plain-text walking directions."""
    try:
        data = _parse_hex(request.data_hex)
        text = encode_to_instructions(data)
    except InvalidBearingError as e:
        logger.error("encode_instructions_invalid_bearing", error=str(e))
        raise HTTPException(status_code=500, detail="Encoding failed")
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("encode_instructions_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Encoding failed")

    return PlainTextResponse(content=text)


@app.post(
    "/encode/svg",
    response_class=Response,
    responses={
        200: {
            "content": {"image/svg+xml": {}},
            "description": "SVG preview of the encoded path",
        },
        422: {"description": "Invalid input"},
    },
)
async def encode_svg(request: RenderRequest) -> Response:
    """Encode hex data and render the path as SVG."""
    try:
        path = encode(_parse_hex(request.data_hex))
        svg_content = render_svg(path, request.colors, request.size)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("encode_svg_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Encoding failed")

    return Response(content=svg_content, media_type="image/svg+xml")


@app.post(
    "/encode/png",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}, "description": "PNG preview of the encoded path"},
        422: {"description": "Invalid input"},
    },
)
async def encode_png(request: RenderRequest) -> Response:
    """Encode hex data and render the path as PNG."""
    try:
        path = encode(_parse_hex(request.data_hex))
        png_bytes = render_png(path, request.colors, request.size)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("encode_png_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Encoding failed")

    return Response(content=png_bytes, media_type="image/png")


@app.post("/decode", response_model=DecodeResponse)
async def decode_endpoint(collection: FeatureCollection) -> DecodeResponse:
    """Decode a GeoJSON path back to hex data."""
    try:
        data = decode(path_from_feature_collection(collection))
    except GeoJSONFormatError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error("decode_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Decoding failed")

    logger.info("decode_success", data_bytes=len(data))
    return DecodeResponse(data_hex=data.hex(), byte_count=len(data))


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint for Docker and load balancer probes."""
    return HealthResponse(
        status="healthy",
        service="trailcode",
        version=VERSION,
    )
