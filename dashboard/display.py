"""
Presentation helpers for service cards.

Builds the view model each card template renders: link targets, the icon or
image to show, and the colours to tint it with.
"""

from typing import Any, Dict, Optional
from urllib.parse import urlparse

DEFAULT_ICON = "🔌"
DEFAULT_ICON_BACKGROUND = "rgba(0, 0, 0, 0.05)"


def is_url(value: Optional[str]) -> bool:
    if not value:
        return False
    parsed = urlparse(value.strip())
    if parsed.scheme == "data":
        return True
    return bool(parsed.scheme and parsed.netloc)


def service_url(host: str, service: Dict[str, Any]) -> Optional[str]:
    """Local URL built from the first port, or None when no port is configured."""
    ports = service.get("ports") or []
    if not ports:
        return None
    protocol = service.get("protocol") or "http"
    return f"{protocol}://{host}:{ports[0]}"


def primary_url(host: str, service: Dict[str, Any]) -> Optional[str]:
    return service.get("public_url") or service_url(host, service)


def display_content(service: Dict[str, Any]) -> Dict[str, Optional[str]]:
    """
    Pick what the card shows: image > icon that is a URL > icon emoji > default.

    The fallback is what the browser swaps in if the image fails to load.
    """
    icon = service.get("icon")
    image_url = service.get("image") or (icon if is_url(icon) else None)
    fallback = (icon if icon and not is_url(icon) else None) or DEFAULT_ICON

    if image_url:
        return {"type": "image", "value": image_url, "fallback": fallback}
    return {"type": "icon", "value": fallback, "fallback": fallback}


def icon_background(color: Optional[str]) -> str:
    # "15" is a hex alpha suffix (~8% opacity)
    return f"{color}15" if color else DEFAULT_ICON_BACKGROUND


def build_service_card(host: str, service: Dict[str, Any]) -> Dict[str, Any]:
    protocol = service.get("protocol") or "http"
    healthcheck_url = service.get("healthcheck_url")
    return {
        "id": service.get("id"),
        "name": service.get("name"),
        "description": service.get("description"),
        "ports": service.get("ports") or [],
        "protocol_label": protocol.upper(),
        "tags": service.get("tags") or [],
        "url": primary_url(host, service),
        "local_url": service_url(host, service),
        "public_url": service.get("public_url"),
        "display": display_content(service),
        "background": icon_background(service.get("color")),
        "healthcheck_url": healthcheck_url if service.get("healthcheck_enabled") and healthcheck_url else None,
        "healthcheck_expected_status": service.get("healthcheck_expected_status"),
    }


def build_server_card(server: Dict[str, Any]) -> Dict[str, Any]:
    host = server.get("host", "")
    return {
        "id": server.get("id"),
        "name": server.get("name"),
        "host": host,
        "description": server.get("description"),
        "services": [build_service_card(host, s) for s in server.get("services") or []],
    }
