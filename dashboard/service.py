from flask import Flask, render_template, request, redirect, url_for, flash, jsonify
import logging
import requests

from hub.config import HUB_API_BASE_URL, GUI_SECRET_KEY, HEALTHCHECK_POLL_SECONDS
from dashboard.display import build_server_card, build_service_card
from dashboard.forms import server_payload, service_payload, service_form_values

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = GUI_SECRET_KEY
BASE_URL = HUB_API_BASE_URL.rstrip("/")


def call_api(method: str, path: str, **kwargs):
    resp = requests.request(method, f"{BASE_URL}{path}", timeout=10, **kwargs)
    try:
        payload = resp.json()
    except Exception:
        payload = {"raw": resp.text}

    if 200 <= resp.status_code < 300:
        return True, payload, None

    if isinstance(payload, dict):
        error = payload.get("detail") or payload.get("error") or payload.get("raw")
    else:
        error = str(payload)
    return False, payload, f"HTTP {resp.status_code}: {error}"


@app.context_processor
def inject_settings():
    return {"poll_seconds": HEALTHCHECK_POLL_SECONDS}


@app.route('/')
def index():
    try:
        ok, servers, error = call_api("GET", "/api/servers")
        if not ok:
            flash(f"Error fetching servers: {error}", "danger")
            servers = []
        return render_template('index.html', servers=[build_server_card(s) for s in servers])
    except Exception as e:
        flash(f"Error fetching servers: {e}", "danger")
        return render_template('index.html', servers=[])


# Server Routes
@app.route('/servers')
def server_list():
    editing = None
    try:
        ok, servers, error = call_api("GET", "/api/servers")
        if not ok:
            flash(f"Error fetching servers: {error}", "danger")
            servers = []
        edit_id = request.args.get('edit')
        if edit_id:
            editing = next((s for s in servers if s.get("id") == edit_id), None)
            if editing is None:
                flash(f"Server {edit_id} not found", "warning")
        return render_template('servers.html', servers=servers, editing=editing)
    except Exception as e:
        flash(f"Error fetching servers: {e}", "danger")
        return render_template('servers.html', servers=[], editing=None)


@app.route('/servers/create', methods=['POST'])
def server_create():
    try:
        payload = server_payload(request.form)
        if not all([payload["name"], payload["host"]]):
            flash("Name and host are required", "danger")
            return redirect(url_for('server_list'))
        ok, created, error = call_api("POST", "/api/servers", json=payload)
        if ok:
            flash(f"Server added: {created.get('name')}", "success")
        else:
            flash(f"Error adding server: {error}", "danger")
    except Exception as e:
        flash(f"Error adding server: {e}", "danger")
    return redirect(url_for('server_list'))


@app.route('/servers/<server_id>/update', methods=['POST'])
def server_update(server_id):
    try:
        payload = server_payload(request.form)
        if not all([payload["name"], payload["host"]]):
            flash("Name and host are required", "danger")
            return redirect(url_for('server_list', edit=server_id))
        ok, _, error = call_api("PUT", f"/api/servers/{server_id}", json=payload)
        if ok:
            flash("Server updated", "success")
        else:
            flash(f"Error updating server: {error}", "danger")
    except Exception as e:
        flash(f"Error updating server: {e}", "danger")
    return redirect(url_for('server_list'))


@app.route('/servers/<server_id>/delete', methods=['POST'])
def server_delete(server_id):
    try:
        ok, _, error = call_api("DELETE", f"/api/servers/{server_id}")
        if ok:
            flash("Server and its services deleted", "success")
        else:
            flash(f"Error deleting server: {error}", "danger")
    except Exception as e:
        flash(f"Error deleting server: {e}", "danger")
    return redirect(url_for('server_list'))


# Service Routes
@app.route('/servers/<server_id>/services')
def service_list(server_id):
    try:
        ok, server, error = call_api("GET", f"/api/servers/{server_id}")
        if not ok:
            flash(f"Error fetching server: {error}", "danger")
            return redirect(url_for('server_list'))
        ok, services, error = call_api("GET", "/api/services", params={"server_id": server_id})
        if not ok:
            flash(f"Error fetching services: {error}", "danger")
            services = []

        editing = None
        edit_id = request.args.get('edit')
        if edit_id:
            editing = next((s for s in services if s.get("id") == edit_id), None)
            if editing is None:
                flash(f"Service {edit_id} not found", "warning")

        cards = [build_service_card(server["host"], s) for s in services]
        return render_template(
            'services.html',
            server=server,
            services=cards,
            editing=editing,
            form=service_form_values(editing),
        )
    except Exception as e:
        flash(f"Error fetching services: {e}", "danger")
        return redirect(url_for('server_list'))


def _server_host(server_id: str):
    ok, server, _ = call_api("GET", f"/api/servers/{server_id}")
    return server.get("host") if ok and isinstance(server, dict) else None


@app.route('/servers/<server_id>/services/create', methods=['POST'])
def service_create(server_id):
    try:
        payload = service_payload(request.form, host=_server_host(server_id))
        if not payload["name"]:
            flash("Service name is required", "danger")
            return redirect(url_for('service_list', server_id=server_id))
        payload["server_id"] = server_id
        ok, created, error = call_api("POST", "/api/services", json=payload)
        if ok:
            flash(f"Service added: {created.get('name')}", "success")
        else:
            flash(f"Error adding service: {error}", "danger")
    except Exception as e:
        flash(f"Error adding service: {e}", "danger")
    return redirect(url_for('service_list', server_id=server_id))


@app.route('/servers/<server_id>/services/<service_id>/update', methods=['POST'])
def service_update(server_id, service_id):
    try:
        payload = service_payload(request.form, host=_server_host(server_id))
        if not payload["name"]:
            flash("Service name is required", "danger")
            return redirect(url_for('service_list', server_id=server_id, edit=service_id))
        ok, _, error = call_api("PUT", f"/api/services/{service_id}", json=payload)
        if ok:
            flash("Service updated", "success")
        else:
            flash(f"Error updating service: {error}", "danger")
    except Exception as e:
        flash(f"Error updating service: {e}", "danger")
    return redirect(url_for('service_list', server_id=server_id))


@app.route('/servers/<server_id>/services/<service_id>/delete', methods=['POST'])
def service_delete(server_id, service_id):
    try:
        ok, _, error = call_api("DELETE", f"/api/services/{service_id}")
        if ok:
            flash("Service deleted", "success")
        else:
            flash(f"Error deleting service: {error}", "danger")
    except Exception as e:
        flash(f"Error deleting service: {e}", "danger")
    return redirect(url_for('service_list', server_id=server_id))


# Health-check proxy (polled by static/dashboard.js)
@app.route('/healthcheck')
def healthcheck():
    url = request.args.get('url')
    if not url:
        return jsonify({"error": "URL is required"}), 400
    params = {"url": url}
    expected_status = request.args.get('expected_status')
    if expected_status:
        params["expected_status"] = expected_status
    try:
        ok, payload, error = call_api("GET", "/api/healthcheck", params=params)
        if ok:
            return jsonify(payload)
        return jsonify({"healthy": False, "state": "error", "status": None, "error": error, "url": url}), 502
    except Exception as e:
        logger.error(f"Health-check proxy failed for {url}: {e}")
        return jsonify({"error": "Failed to perform healthcheck"}), 500
