from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MetadataRecord(BaseModel):
    """Sidecar document written next to every stored upload."""

    file_name: str
    create_date: str = Field(..., description='Upload time as YYYY/MM/DD HH:MM:SS.')
    file_size: int


class ListingEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    created: datetime = Field(..., description='Last modification time.')
    size: int
    is_directory: bool = Field(..., alias='isDirectory')


class ErrorResponse(BaseModel):
    error: str
