"""
Form parsing for the server and service configuration pages.

Turns submitted HTML form fields into JSON payloads for the hub API.
"""

from typing import Any, Dict, List, Mapping, Optional


def _text(form: Mapping[str, str], key: str) -> str:
    return (form.get(key) or "").strip()


def parse_ports(raw: Optional[str]) -> List[int]:
    """Comma-separated port list; entries that are not numbers are dropped."""
    ports = []
    for part in (raw or "").split(","):
        try:
            ports.append(int(part.strip()))
        except ValueError:
            continue
    return ports


def parse_tags(raw: Optional[str]) -> List[str]:
    return [t.strip() for t in (raw or "").split(",") if t.strip()]


def parse_status(raw: Optional[str]) -> Optional[int]:
    """Expected HTTP status; blank or 0 means any 2xx/3xx."""
    try:
        return int((raw or "").strip()) or None
    except ValueError:
        return None


def is_checked(form: Mapping[str, str], key: str) -> bool:
    return _text(form, key).lower() in {"on", "true", "1", "yes"}


def default_healthcheck_url(protocol: str, host: Optional[str], ports: List[int]) -> Optional[str]:
    if not host or not ports:
        return None
    return f"{protocol}://{host}:{ports[0]}"


def server_payload(form: Mapping[str, str]) -> Dict[str, Any]:
    return {
        "name": _text(form, "name"),
        "host": _text(form, "host"),
        "description": _text(form, "description") or None,
    }


def service_payload(form: Mapping[str, str], host: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the service payload from the service form.

    When health checks are enabled without a URL, the URL defaults to the
    service's local address on the server host. When they are disabled, the
    health-check URL and expected status are cleared.
    """
    ports = parse_ports(form.get("ports"))
    protocol = _text(form, "protocol") or "http"
    healthcheck_enabled = is_checked(form, "healthcheck_enabled")

    healthcheck_url = None
    expected_status = None
    if healthcheck_enabled:
        healthcheck_url = _text(form, "healthcheck_url") or default_healthcheck_url(protocol, host, ports)
        expected_status = parse_status(form.get("healthcheck_expected_status"))

    return {
        "name": _text(form, "name"),
        "description": _text(form, "description") or None,
        "ports": ports,
        "icon": _text(form, "icon") or None,
        "image": _text(form, "image") or None,
        "color": _text(form, "color") or None,
        "protocol": protocol,
        "tags": parse_tags(form.get("tags")),
        "healthcheck_enabled": healthcheck_enabled,
        "healthcheck_url": healthcheck_url,
        "healthcheck_expected_status": expected_status,
        "public_url": _text(form, "public_url") or None,
    }


def service_form_values(service: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Pre-fill values for the service form (empty when adding a new service)."""
    service = service or {}
    expected = service.get("healthcheck_expected_status")
    return {
        "name": service.get("name") or "",
        "description": service.get("description") or "",
        "ports": ", ".join(str(p) for p in service.get("ports") or []),
        "icon": service.get("icon") or "",
        "image": service.get("image") or "",
        "color": service.get("color") or "",
        "protocol": service.get("protocol") or "http",
        "tags": ", ".join(service.get("tags") or []),
        "healthcheck_enabled": bool(service.get("healthcheck_enabled")),
        "healthcheck_url": service.get("healthcheck_url") or "",
        "healthcheck_expected_status": str(expected) if expected else "",
        "public_url": service.get("public_url") or "",
    }
