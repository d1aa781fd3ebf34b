"""
HUB Database Models

servers.db stores:
- Servers (host machines registered by the user)
- Services (ports/URLs running on a server, shown as cards on the homepage)

Deleting a server deletes its services.
"""

from sqlalchemy import Column, String, Boolean, Integer, ForeignKey, Text, JSON
from sqlalchemy.orm import declarative_base, relationship
import enum

Base = declarative_base()


class ServiceProtocol(str, enum.Enum):
    """Scheme used to build a service's local URL"""
    HTTP = "http"
    HTTPS = "https"


class Server(Base):
    """A host machine that runs services"""
    __tablename__ = "servers"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    host = Column(String, nullable=False)  # IP or domain
    description = Column(Text)

    services = relationship(
        "Service",
        back_populates="server",
        cascade="all, delete-orphan",
    )


class Service(Base):
    """A port/URL running on a server"""
    __tablename__ = "services"

    id = Column(String, primary_key=True)
    server_id = Column(String, ForeignKey("servers.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text)

    # Addressing
    ports = Column(JSON, nullable=False, default=list)  # JSON list of ints
    protocol = Column(String, default=ServiceProtocol.HTTP.value)
    public_url = Column(String)

    # Presentation
    icon = Column(String)  # emoji or image URL
    image = Column(String)  # image URL
    color = Column(String)  # hex, e.g. '#E5A00D'
    tags = Column(JSON)  # JSON list of strings

    # Health check
    healthcheck_enabled = Column(Boolean, default=False)
    healthcheck_url = Column(String)
    healthcheck_expected_status = Column(Integer)

    server = relationship("Server", back_populates="services")
