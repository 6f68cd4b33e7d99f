# api/main.py
"""
FastAPI backend for PortalCheck - exposes the portal_check engine as REST API.
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response, StreamingResponse
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Literal
import io

from portal_check import (
    FrameInput,
    ISection,
    InvalidFrameError,
    LOAD_COMBINATIONS,
    run_analysis,
)
from portal_check.config import CONFIG
from portal_check.report import combination_table
from portal_check.viz import frame_svg


app = FastAPI(
    title=f"{CONFIG.app_name} API",
    description="Steel portal frame code check",
    version=CONFIG.version,
)

# CORS only when a browser frontend is configured
if CONFIG.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(CONFIG.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# =============================================================================
# Request Models
# =============================================================================

class SectionParams(BaseModel):
    """I-section dimensions (mm)."""
    h: float = Field(CONFIG.default_section_h, gt=0, description="Web height (mm)")
    tw: float = Field(CONFIG.default_section_tw, gt=0, description="Web thickness (mm)")
    bf: float = Field(CONFIG.default_section_bf, gt=0, description="Flange width (mm)")
    tf: float = Field(CONFIG.default_section_tf, gt=0, description="Flange thickness (mm)")


class FrameParams(BaseModel):
    """Input parameters for a portal frame check. Every field has a default."""
    height_mm: float = Field(
        CONFIG.default_height_mm, ge=CONFIG.height_range[0], le=CONFIG.height_range[1],
        description="Column clear height (mm)")
    width_mm: float = Field(
        CONFIG.default_width_mm, ge=CONFIG.width_range[0], le=CONFIG.width_range[1],
        description="Frame width (mm)")
    dead_load_kg_m: float = Field(CONFIG.default_dead_kg_m, ge=0, description="Dead load (kg/m)")
    live_load_kg_m: float = Field(CONFIG.default_live_kg_m, ge=0, description="Live load (kg/m)")
    wind_load_kg: float = Field(CONFIG.default_wind_kg, ge=0, description="Wind load per column (kg)")
    fy_mpa: float = Field(CONFIG.default_fy_mpa, gt=0, description="Yield strength (MPa)")
    e_gpa: float = Field(CONFIG.default_e_gpa, gt=0, description="Elastic modulus (GPa)")
    k_factor: float = Field(
        CONFIG.default_k_factor, ge=CONFIG.k_factor_range[0], le=CONFIG.k_factor_range[1],
        description="Effective length factor")
    col1: SectionParams = Field(default_factory=SectionParams)
    col2: SectionParams = Field(default_factory=SectionParams)
    beam1: SectionParams = Field(default_factory=SectionParams)
    beam2: SectionParams = Field(default_factory=SectionParams)
    beam1_conn: Literal['hinge', 'moment'] = CONFIG.default_connection
    beam2_conn: Literal['hinge', 'moment'] = CONFIG.default_connection

    def to_frame(self) -> FrameInput:
        data = self.model_dump()
        for key in ('col1', 'col2', 'beam1', 'beam2'):
            data[key] = ISection(**data[key])
        return FrameInput(**data)


def check_frame(params: FrameParams):
    """Run the check, turning invalid input into a 400."""
    frame = params.to_frame()
    try:
        verdict = run_analysis(frame)
    except InvalidFrameError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return frame, verdict


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": f"{CONFIG.app_name} API"}


@app.get("/api/combinations")
async def list_combinations() -> List[Dict[str, Any]]:
    """The fixed load combination table, in tie-break order."""
    return [
        {"name": c.name, "dead": c.dead, "live": c.live, "wind": c.wind}
        for c in LOAD_COMBINATIONS
    ]


@app.post("/api/check")
async def check(params: FrameParams) -> Dict[str, Any]:
    """Check the frame and return the verdict."""
    _, verdict = check_frame(params)
    return verdict.to_dict()


@app.post("/api/diagram")
async def diagram(params: FrameParams):
    """Frame status diagram as SVG."""
    frame, verdict = check_frame(params)
    return Response(content=frame_svg(frame, verdict), media_type="image/svg+xml")


@app.post("/api/export/csv")
async def export_csv(params: FrameParams):
    """Per-combination results as CSV."""
    _, verdict = check_frame(params)
    output = io.StringIO()
    combination_table(verdict).to_csv(output, index=False)
    output.seek(0)
    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=portal_check.csv"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
