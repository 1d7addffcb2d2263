from datetime import datetime

from pydantic import BaseModel


class StorageStatus(BaseModel):
    path: str
    exists: bool
    writable: bool
    entries: int | None = None


class HealthResponse(BaseModel):
    status: str
    version: str
    environment: str
    timestamp: datetime
    auth_enabled: bool
    storage: StorageStatus
