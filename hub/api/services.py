from typing import Literal

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from hub import logic
from hub.database import get_db

router = APIRouter(prefix="/api/services", tags=["services"])

Protocol = Literal["http", "https"]


class ServiceCreate(BaseModel):
    server_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str | None = None
    ports: list[int] = Field(default_factory=list)
    icon: str | None = None
    image: str | None = None
    color: str | None = None
    protocol: Protocol = "http"
    tags: list[str] = Field(default_factory=list)
    healthcheck_enabled: bool = False
    healthcheck_url: str | None = None
    healthcheck_expected_status: int | None = Field(default=None, ge=100, le=599)
    public_url: str | None = None


class ServiceUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    ports: list[int] | None = None
    icon: str | None = None
    image: str | None = None
    color: str | None = None
    protocol: Protocol | None = None
    tags: list[str] | None = None
    healthcheck_enabled: bool | None = None
    healthcheck_url: str | None = None
    healthcheck_expected_status: int | None = Field(default=None, ge=100, le=599)
    public_url: str | None = None


@router.get("")
def list_services(server_id: str | None = None, db: Session = Depends(get_db)):
    if not server_id:
        raise HTTPException(status_code=400, detail="Server ID is required")
    return [logic.serialize_service(s) for s in logic.list_services(db, server_id)]


@router.get("/{service_id}")
def get_service(service_id: str, db: Session = Depends(get_db)):
    service = logic.get_service(db, service_id)
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    return logic.serialize_service(service)


@router.post("", status_code=201)
def create_service(service: ServiceCreate, db: Session = Depends(get_db)):
    fields = service.model_dump(exclude={"server_id"})
    try:
        created = logic.create_service(db, service.server_id, **fields)
    except logic.NotFoundError:
        raise HTTPException(status_code=404, detail="Server not found")
    return logic.serialize_service(created)


@router.put("/{service_id}")
def update_service(service_id: str, service: ServiceUpdate, db: Session = Depends(get_db)):
    fields = service.model_dump(exclude_unset=True)
    for required in ("name", "ports", "protocol", "healthcheck_enabled"):
        if fields.get(required, "") is None:
            fields.pop(required)
    try:
        updated = logic.update_service(db, service_id, **fields)
    except logic.NotFoundError:
        raise HTTPException(status_code=404, detail="Service not found")
    return logic.serialize_service(updated)


@router.delete("/{service_id}")
def delete_service(service_id: str, db: Session = Depends(get_db)):
    try:
        logic.delete_service(db, service_id)
    except logic.NotFoundError:
        raise HTTPException(status_code=404, detail="Service not found")
    return {"success": True}
