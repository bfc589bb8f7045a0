# This file defines liveness, readiness, and version endpoints for API operations.
# It exists so the dashboard and monitors can verify the demo backend quickly.
# Readiness reports whether the file store is loaded and the demo file is present.

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request

from src.api.api_config import ApiConfig
from src.api.dependencies import get_config, get_file_store
from src.api.schema_versions import build_version_fields
from src.api.schemas.health_schemas import HealthResponse, ReadinessResponse, VersionResponse
from src.api.services.file_service import FileStore
from src.demo.mock_data import DEMO_FILE_ID

router = APIRouter(tags=["health"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
FileStoreDep = Annotated[FileStore, Depends(get_file_store)]


def _status_fields(request: Request, config: ApiConfig) -> dict[str, Any]:
    return {
        **build_version_fields(
            api_version_path=config.api_version_path,
            schema_version=config.schema_version,
        ),
        "request_id": request.state.request_id,
        "timestamp": datetime.now(tz=UTC),
    }


@router.get("/health", response_model=HealthResponse)
def health(request: Request, config: ConfigDep) -> dict[str, object]:
    return {
        **_status_fields(request, config),
        "status": "ok",
        "environment": config.environment,
        "service_name": config.api_name,
    }


@router.get("/ready", response_model=ReadinessResponse)
def ready(request: Request, config: ConfigDep, files: FileStoreDep) -> dict[str, object]:
    file_ids = {item.id for item in files.list_files()}
    demo_loaded = DEMO_FILE_ID in file_ids
    return {
        **_status_fields(request, config),
        "ready": demo_loaded or not config.seed_demo_file,
        "file_count": len(file_ids),
        "demo_file_loaded": demo_loaded,
    }


@router.get("/version", response_model=VersionResponse)
def version(request: Request, config: ConfigDep) -> dict[str, object]:
    return {
        **_status_fields(request, config),
        "api_version_path": config.api_version_path,
        "app_version": config.app_version,
        "project": config.api_name,
    }
