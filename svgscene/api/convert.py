"""POST /api/resolve and /api/roundtrip — SVG text in, scene or SVG text out."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from svgscene.config import Settings
from svgscene.dependencies import get_settings
from svgscene.engine.options import ResolveOptions
from svgscene.engine.resolver import resolve_svg
from svgscene.errors import ConversionError, SvgParseError
from svgscene.models.requests import ResolveRequest, RoundtripRequest
from svgscene.models.responses import ResolveResponse, RoundtripResponse
from svgscene.models.scene_document import SceneDocument
from svgscene.svg.serializer import serialize_svg

router = APIRouter()
logger = logging.getLogger(__name__)


def _resolve_or_raise(svg: str, options: ResolveOptions) -> SceneDocument:
    try:
        return resolve_svg(svg, options)
    except SvgParseError as e:
        logger.info("Rejected malformed SVG: %s", e)
        raise HTTPException(status_code=400, detail={"code": "malformed_svg", "message": str(e)}) from e
    except ConversionError as e:
        logger.info("Conversion failed: %s", e.message)
        raise HTTPException(status_code=422, detail={"code": e.code, "message": e.message}) from e


@router.post("/resolve", response_model=ResolveResponse)
def resolve(req: ResolveRequest, settings: Settings = Depends(get_settings)) -> ResolveResponse:
    start = time.perf_counter()
    options = ResolveOptions(dpi=req.dpi if req.dpi is not None else settings.dpi)
    doc = _resolve_or_raise(req.svg, options)
    elapsed = (time.perf_counter() - start) * 1000

    return ResolveResponse(
        document=doc.to_dict(),
        defs_count=len(doc.defs),
        node_count=doc.node_count(),
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/roundtrip", response_model=RoundtripResponse)
def roundtrip(req: RoundtripRequest) -> RoundtripResponse:
    doc = _resolve_or_raise(req.svg, ResolveOptions())
    return RoundtripResponse(svg=serialize_svg(doc))
