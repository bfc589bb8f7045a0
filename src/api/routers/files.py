# This file defines uploaded-file endpoints under the versioned API path.
# It exists so the dashboard can list, upload, page through, enrich, and delete booking files.
# Row pages use offset pagination with a `has_more` flag so large files can be read in chunks.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, File, Query, Request, UploadFile

from src.api.api_config import ApiConfig
from src.api.dependencies import get_config, get_enrichment_service, get_file_store
from src.api.error_handlers import APIError
from src.api.response_envelope import build_offset_pagination, envelope_for
from src.api.schemas.file_schemas import (
    DeleteResponseV1,
    EnrichFileRequestV1,
    FileDataResponseV1,
    FileListResponseV1,
    FileResponseV1,
)
from src.api.services.enrichment_service import EnrichmentService
from src.api.services.file_service import FileStore

router = APIRouter(prefix="/files", tags=["files"])
FileStoreDep = Annotated[FileStore, Depends(get_file_store)]
EnrichmentServiceDep = Annotated[EnrichmentService, Depends(get_enrichment_service)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


@router.get("", response_model=FileListResponseV1)
def list_files(
    request: Request,
    files: FileStoreDep,
    config: ConfigDep,
) -> dict[str, object]:
    return envelope_for(request, config, [item.to_dict() for item in files.list_files()])


@router.post("/upload", response_model=FileResponseV1, status_code=201)
def upload_file(
    request: Request,
    files: FileStoreDep,
    config: ConfigDep,
    file: UploadFile = File(...),
) -> dict[str, object]:
    if not file.filename:
        raise APIError(status_code=400, error_code="MISSING_FILE_NAME", message="Upload has no file name.")
    uploaded = files.upload(file.filename, file.file.read())
    warnings = [uploaded.error] if uploaded.error else None
    return envelope_for(request, config, uploaded.to_dict(), warnings=warnings)


@router.get("/{file_id}", response_model=FileResponseV1)
def get_file(
    request: Request,
    files: FileStoreDep,
    config: ConfigDep,
    file_id: str,
) -> dict[str, object]:
    return envelope_for(request, config, files.get_file(file_id).to_dict())


@router.get("/{file_id}/data", response_model=FileDataResponseV1)
def get_file_data(
    request: Request,
    files: FileStoreDep,
    config: ConfigDep,
    file_id: str,
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
) -> dict[str, object]:
    page_size = min(limit or config.default_page_size, config.max_page_size)
    rows, total = files.get_file_data(file_id, offset=offset, limit=page_size)
    return envelope_for(
        request,
        config,
        rows,
        pagination=build_offset_pagination(offset=offset, limit=page_size, total=total),
    )


@router.delete("/{file_id}", response_model=DeleteResponseV1)
def delete_file(
    request: Request,
    files: FileStoreDep,
    config: ConfigDep,
    file_id: str,
) -> dict[str, object]:
    files.delete_file(file_id)
    return envelope_for(request, config, {"id": file_id, "deleted": True})


@router.post("/{file_id}/enrich", response_model=FileResponseV1)
def enrich_file(
    request: Request,
    enrichment: EnrichmentServiceDep,
    config: ConfigDep,
    file_id: str,
    payload: EnrichFileRequestV1 | None = None,
) -> dict[str, object]:
    features = payload.features if payload else None
    updated = enrichment.enrich_file(file_id, features=features)
    return envelope_for(request, config, updated.to_dict())
