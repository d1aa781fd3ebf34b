"""
HUB Logic Layer

Repository functions for servers and services. API routers call these and
translate HubError subclasses into HTTP responses.
"""

import logging
import time
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from hub.models import Server, Service, ServiceProtocol

logger = logging.getLogger(__name__)

SERVER_FIELDS = ("name", "host", "description")
SERVICE_FIELDS = (
    "name",
    "description",
    "ports",
    "icon",
    "image",
    "color",
    "protocol",
    "tags",
    "healthcheck_enabled",
    "healthcheck_url",
    "healthcheck_expected_status",
    "public_url",
)
# Blank values for these are stored as NULL
_NULLABLE_TEXT_FIELDS = {"description", "icon", "image", "color", "healthcheck_url", "public_url"}


class HubError(Exception):
    """Base error for repository operations"""


class NotFoundError(HubError):
    pass


class ConflictError(HubError):
    pass


# ============================================================================
# ID GENERATION
# ============================================================================

def _epoch_ms() -> int:
    return int(time.time() * 1000)


def generate_server_id() -> str:
    return f"server-{_epoch_ms()}"


def generate_service_id(server_id: str) -> str:
    return f"{server_id}-{_epoch_ms()}-{uuid.uuid4().hex[:9]}"


# ============================================================================
# NORMALIZATION
# ============================================================================

def _normalize_field(field: str, value: Any) -> Any:
    if field in _NULLABLE_TEXT_FIELDS:
        return value or None
    if field == "ports":
        return [int(p) for p in (value or [])]
    if field == "tags":
        return list(value) if value is not None else None
    if field == "protocol":
        if isinstance(value, ServiceProtocol):
            return value.value
        return value or ServiceProtocol.HTTP.value
    if field == "healthcheck_enabled":
        return bool(value)
    if field == "healthcheck_expected_status":
        return int(value) if value else None
    return value


def _apply_fields(obj, fields: Dict[str, Any], allowed) -> List[str]:
    changed = []
    for field, value in fields.items():
        if field not in allowed:
            continue
        setattr(obj, field, _normalize_field(field, value))
        changed.append(field)
    return changed


# ============================================================================
# SERIALIZATION
# ============================================================================

def serialize_service(service: Service) -> Dict[str, Any]:
    return {
        "id": service.id,
        "server_id": service.server_id,
        "name": service.name,
        "description": service.description,
        "ports": list(service.ports or []),
        "icon": service.icon,
        "image": service.image,
        "color": service.color,
        "protocol": service.protocol or ServiceProtocol.HTTP.value,
        "tags": list(service.tags) if service.tags is not None else None,
        "healthcheck_enabled": bool(service.healthcheck_enabled),
        "healthcheck_url": service.healthcheck_url,
        "healthcheck_expected_status": service.healthcheck_expected_status or None,
        "public_url": service.public_url,
    }


def serialize_server(server: Server, include_services: bool = True) -> Dict[str, Any]:
    data = {
        "id": server.id,
        "name": server.name,
        "host": server.host,
        "description": server.description,
    }
    if include_services:
        data["services"] = [serialize_service(s) for s in server.services]
    return data


# ============================================================================
# SERVERS
# ============================================================================

def list_servers(db: Session) -> List[Server]:
    """All servers ordered by name, with services eagerly loaded."""
    return db.scalars(
        select(Server).options(selectinload(Server.services)).order_by(Server.name)
    ).all()


def get_server(db: Session, server_id: str) -> Optional[Server]:
    return db.get(Server, server_id)


def create_server(
    db: Session,
    name: str,
    host: str,
    description: Optional[str] = None,
    server_id: Optional[str] = None,
) -> Server:
    server = Server(
        id=server_id or generate_server_id(),
        name=name,
        host=host,
        description=description or None,
    )
    if db.get(Server, server.id) is not None:
        raise ConflictError(f"Server '{server.id}' already exists")
    try:
        db.add(server)
        db.commit()
        db.refresh(server)
    except IntegrityError:
        db.rollback()
        raise ConflictError(f"Server '{server.id}' already exists")
    logger.info(f"Created server {server.id} ({server.name} @ {server.host})")
    return server


def update_server(db: Session, server_id: str, **fields) -> Server:
    """Partial update: only the supplied fields change."""
    server = db.get(Server, server_id)
    if not server:
        raise NotFoundError(f"Server '{server_id}' not found")

    changed = _apply_fields(server, fields, SERVER_FIELDS)
    if changed:
        db.commit()
        db.refresh(server)
        logger.info(f"Updated server {server_id}: {', '.join(changed)}")
    return server


def delete_server(db: Session, server_id: str):
    """Delete a server and every service attached to it."""
    server = db.get(Server, server_id)
    if not server:
        raise NotFoundError(f"Server '{server_id}' not found")
    service_count = len(server.services)
    db.delete(server)
    db.commit()
    logger.info(f"Deleted server {server_id} and {service_count} service(s)")


# ============================================================================
# SERVICES
# ============================================================================

def list_services(db: Session, server_id: str) -> List[Service]:
    return db.scalars(select(Service).where(Service.server_id == server_id)).all()


def get_service(db: Session, service_id: str) -> Optional[Service]:
    return db.get(Service, service_id)


def create_service(db: Session, server_id: str, **fields) -> Service:
    if db.get(Server, server_id) is None:
        raise NotFoundError(f"Server '{server_id}' not found")

    service = Service(id=generate_service_id(server_id), server_id=server_id)
    fields.setdefault("ports", [])
    fields.setdefault("protocol", ServiceProtocol.HTTP.value)
    fields.setdefault("healthcheck_enabled", False)
    _apply_fields(service, fields, SERVICE_FIELDS)

    db.add(service)
    db.commit()
    db.refresh(service)
    logger.info(f"Created service {service.id} ({service.name}) on server {server_id}")
    return service


def update_service(db: Session, service_id: str, **fields) -> Service:
    """Partial update: only the supplied fields change."""
    service = db.get(Service, service_id)
    if not service:
        raise NotFoundError(f"Service '{service_id}' not found")

    changed = _apply_fields(service, fields, SERVICE_FIELDS)
    if changed:
        db.commit()
        db.refresh(service)
        logger.info(f"Updated service {service_id}: {', '.join(changed)}")
    return service


def delete_service(db: Session, service_id: str):
    service = db.get(Service, service_id)
    if not service:
        raise NotFoundError(f"Service '{service_id}' not found")
    db.delete(service)
    db.commit()
    logger.info(f"Deleted service {service_id}")
