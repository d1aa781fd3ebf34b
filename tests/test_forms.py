from werkzeug.datastructures import MultiDict

from dashboard.forms import parse_ports, parse_status, parse_tags, service_form_values, service_payload, server_payload


def test_parse_ports_drops_non_numbers():
    assert parse_ports("80, 443,abc, ,8080") == [80, 443, 8080]
    assert parse_ports("") == []
    assert parse_ports(None) == []


def test_parse_tags_trims_and_drops_empty():
    assert parse_tags(" media, streaming ,, ") == ["media", "streaming"]


def test_server_payload_blank_description_is_none():
    payload = server_payload(MultiDict({"name": " Media ", "host": "192.168.1.100", "description": " "}))
    assert payload == {"name": "Media", "host": "192.168.1.100", "description": None}


def test_healthcheck_url_defaults_to_local_address():
    form = MultiDict({
        "name": "Nextcloud",
        "ports": "443, 80",
        "protocol": "https",
        "healthcheck_enabled": "on",
    })
    payload = service_payload(form, host="192.168.1.102")
    assert payload["healthcheck_enabled"] is True
    assert payload["healthcheck_url"] == "https://192.168.1.102:443"
    assert payload["healthcheck_expected_status"] is None


def test_explicit_healthcheck_url_and_status_kept():
    form = MultiDict({
        "name": "Plex",
        "ports": "32400",
        "healthcheck_enabled": "on",
        "healthcheck_url": "http://192.168.1.100:32400/identity",
        "healthcheck_expected_status": "200",
    })
    payload = service_payload(form, host="192.168.1.100")
    assert payload["healthcheck_url"] == "http://192.168.1.100:32400/identity"
    assert payload["healthcheck_expected_status"] == 200


def test_disabled_healthcheck_clears_url_and_status():
    form = MultiDict({
        "name": "Plex",
        "ports": "32400",
        "healthcheck_url": "http://192.168.1.100:32400",
        "healthcheck_expected_status": "200",
    })
    payload = service_payload(form, host="192.168.1.100")
    assert payload["healthcheck_enabled"] is False
    assert payload["healthcheck_url"] is None
    assert payload["healthcheck_expected_status"] is None


def test_no_default_healthcheck_url_without_ports():
    form = MultiDict({"name": "Plex", "healthcheck_enabled": "on"})
    assert service_payload(form, host="192.168.1.100")["healthcheck_url"] is None


def test_service_payload_optional_fields():
    form = MultiDict({"name": "Grafana", "ports": "3000", "icon": "📊", "color": "", "tags": "monitoring"})
    payload = service_payload(form)
    assert payload["protocol"] == "http"
    assert payload["icon"] == "📊"
    assert payload["color"] is None
    assert payload["tags"] == ["monitoring"]
    assert payload["public_url"] is None


def test_service_form_values_round_trip_display():
    values = service_form_values({
        "name": "Apache",
        "ports": [80, 443],
        "tags": ["web", "hosting"],
        "protocol": "https",
        "healthcheck_enabled": True,
        "healthcheck_expected_status": 204,
    })
    assert values["ports"] == "80, 443"
    assert values["tags"] == "web, hosting"
    assert values["healthcheck_expected_status"] == "204"
    assert values["description"] == ""


def test_service_form_values_empty_for_new_service():
    values = service_form_values(None)
    assert values["protocol"] == "http"
    assert values["healthcheck_enabled"] is False


def test_parse_status_zero_or_blank_means_any():
    assert parse_status("0") is None
    assert parse_status("") is None
    assert parse_status("abc") is None
    assert parse_status(" 204 ") == 204


def test_expected_status_zero_is_not_sent():
    form = MultiDict({
        "name": "Plex",
        "ports": "32400",
        "healthcheck_enabled": "on",
        "healthcheck_expected_status": "0",
    })
    assert service_payload(form, host="192.168.1.100")["healthcheck_expected_status"] is None
