# This file defines response schemas for health, readiness, and version endpoints.
# Operational payloads are flat rather than enveloped so monitors can read them without unwrapping.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class ServiceStatusFields(BaseModel):
    api_version: str
    schema_version: str
    request_id: str
    timestamp: datetime


class HealthResponse(ServiceStatusFields):
    status: str
    environment: str
    service_name: str


class ReadinessResponse(ServiceStatusFields):
    ready: bool
    file_count: int
    demo_file_loaded: bool


class VersionResponse(ServiceStatusFields):
    api_version_path: str
    app_version: str
    project: str
