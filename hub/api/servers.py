from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from hub import logic
from hub.database import get_db

router = APIRouter(prefix="/api/servers", tags=["servers"])


class ServerCreate(BaseModel):
    id: str | None = None
    name: str = Field(min_length=1)
    host: str = Field(min_length=1)
    description: str | None = None


class ServerUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    host: str | None = Field(default=None, min_length=1)
    description: str | None = None


@router.get("")
def list_servers(db: Session = Depends(get_db)):
    return [logic.serialize_server(s) for s in logic.list_servers(db)]


@router.get("/{server_id}")
def get_server(server_id: str, db: Session = Depends(get_db)):
    server = logic.get_server(db, server_id)
    if not server:
        raise HTTPException(status_code=404, detail="Server not found")
    return logic.serialize_server(server)


@router.post("", status_code=201)
def create_server(server: ServerCreate, db: Session = Depends(get_db)):
    try:
        created = logic.create_server(
            db,
            name=server.name,
            host=server.host,
            description=server.description,
            server_id=server.id,
        )
    except logic.ConflictError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    return logic.serialize_server(created)


@router.put("/{server_id}")
def update_server(server_id: str, server: ServerUpdate, db: Session = Depends(get_db)):
    fields = server.model_dump(exclude_unset=True)
    # name/host are required columns; an explicit null leaves them unchanged
    for required in ("name", "host"):
        if fields.get(required, "") is None:
            fields.pop(required)
    try:
        updated = logic.update_server(db, server_id, **fields)
    except logic.NotFoundError:
        raise HTTPException(status_code=404, detail="Server not found")
    return logic.serialize_server(updated)


@router.delete("/{server_id}")
def delete_server(server_id: str, db: Session = Depends(get_db)):
    try:
        logic.delete_server(db, server_id)
    except logic.NotFoundError:
        raise HTTPException(status_code=404, detail="Server not found")
    return {"success": True}
