"""
FastAPI REST API for Mock Data Generator

Provides endpoints for:
- Mock data generation (JSON or CSV)
- Dataset metrics
- Configuration presets
"""

from fastapi import FastAPI, HTTPException, Header
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
from datetime import datetime
import logging
import json
import os

from mockgen import __version__
from mockgen.config import ConfigLoader
from mockgen.exceptions import MockDataError
from mockgen.formatters import media_type_for
from mockgen.generators import supported_types
from mockgen.orchestrator import mock_data, get_dataset_metrics
from mockgen.utils import setup_logging

setup_logging(level=os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Mock Data Generator API",
    description="Generate fake user records as JSON or CSV",
    version=__version__
)

allowed_origins = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def require_api_key(x_api_key: Optional[str] = Header(default=None)):
    expected = os.getenv("API_KEY")
    if expected and x_api_key != expected:
        raise HTTPException(status_code=401, detail="Invalid or missing API key")


# Pydantic models
class TemplateModel(BaseModel):
    """Record template (accepted, not applied)"""
    name: str
    schema_: str = Field(..., alias="schema")
    rules: Dict[str, str] = Field(default_factory=dict)


class MockDataRequestModel(BaseModel):
    """Mock data request"""
    type: str = Field(..., description="Entity kind, e.g. 'user'")
    count: int = Field(..., ge=0, le=100000, description="Number of records to generate")
    format: str = Field("json", description="Output format: json or csv (others render as json)")
    seed: str = Field("", description="Seed label (does not affect output)")
    locale: str = Field("en-US", description="Locale label (does not affect output)")
    template: Optional[TemplateModel] = Field(None, description="Record template (not applied)")

    def to_wire(self) -> Dict[str, Any]:
        payload = self.model_dump(exclude={"template"})
        if self.template is not None:
            payload["template"] = self.template.model_dump(by_alias=True)
        return payload


@app.get("/", tags=["General"])
async def root():
    """API root endpoint"""
    return {
        "name": "Mock Data Generator API",
        "version": __version__,
        "status": "running",
        "endpoints": {
            "generate": "/mock-data",
            "metrics": "/metrics/{entity_type}",
            "presets": "/presets",
        }
    }


@app.get("/health", tags=["General"])
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "supported_types": supported_types(),
    }


# Plain def: generation is CPU-bound and runs in the threadpool
@app.post("/mock-data", tags=["Generation"])
def generate_mock_data_endpoint(
    request: MockDataRequestModel,
    x_api_key: Optional[str] = Header(default=None)
):
    """
    Generate mock data

    Returns the formatted records as the response body
    """
    require_api_key(x_api_key)

    try:
        content = mock_data(request.to_wire())
    except MockDataError as e:
        logger.error(f"Generation error: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return Response(content=content, media_type=media_type_for(request.format))


@app.get("/metrics/{entity_type}", tags=["Metrics"])
async def dataset_metrics(entity_type: str):
    """Dataset metrics for an entity kind"""
    return json.loads(get_dataset_metrics(entity_type))


@app.get("/presets", tags=["Configuration"])
async def list_presets():
    """List available configuration presets"""
    loader = ConfigLoader()
    presets = loader.list_presets()

    return {
        "presets": presets,
        "count": len(presets)
    }


@app.get("/presets/{preset_name}", tags=["Configuration"])
async def get_preset(preset_name: str):
    """Get a configuration preset"""
    try:
        loader = ConfigLoader()
        config = loader.load_preset(preset_name)

        return {
            "preset_name": preset_name,
            "config": config.to_dict()
        }

    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


# Run with: uvicorn api:app --reload
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
