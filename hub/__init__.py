"""
HUB (Hosted Hub API) — servers, services and the health-check proxy.

Responsibilities:
- Own servers.db (servers and the services attached to them)
- CRUD endpoints for servers and services
- Proxy health checks on behalf of the dashboard browser client
"""
