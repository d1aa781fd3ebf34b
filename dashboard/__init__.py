"""
DASHBOARD (Hosted Hub GUI)

User-facing Flask service.
Responsibilities:
- Homepage with a card per server and per service
- Forms to add/edit/delete servers and services
- Proxy browser health-check polls to the hub API
"""
