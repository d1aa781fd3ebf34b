"""
Sample servers seeded into an empty servers.db when HUB_SEED_SAMPLE_DATA is set.
"""

SERVICE_ICONS = {
    "plex": "🎬",
    "apache": "🌐",
    "nginx": "⚡",
    "docker": "🐳",
    "portainer": "📦",
    "grafana": "📊",
    "prometheus": "📈",
    "jenkins": "🔧",
    "gitlab": "🦊",
    "nextcloud": "☁️",
    "default": "🔌",
}

SAMPLE_SERVERS = [
    {
        "id": "server-1",
        "name": "Media Server",
        "host": "192.168.1.100",
        "description": "Main media and entertainment server",
        "services": [
            {
                "name": "Plex Media Server",
                "description": "Stream your media collection",
                "ports": [32400],
                "icon": SERVICE_ICONS["plex"],
                "color": "#E5A00D",
                "protocol": "http",
                "tags": ["media", "streaming"],
            },
            {
                "name": "Apache Web Server",
                "description": "Hosting multiple sites",
                "ports": [80, 443],
                "icon": SERVICE_ICONS["apache"],
                "color": "#D22128",
                "protocol": "https",
                "tags": ["web", "hosting"],
            },
        ],
    },
    {
        "id": "server-2",
        "name": "Development Server",
        "host": "192.168.1.101",
        "description": "Development and CI/CD services",
        "services": [
            {
                "name": "Portainer",
                "description": "Docker container management",
                "ports": [9000],
                "icon": SERVICE_ICONS["portainer"],
                "color": "#13BEF9",
                "protocol": "http",
                "tags": ["docker", "management"],
            },
            {
                "name": "Jenkins",
                "description": "CI/CD automation",
                "ports": [8080],
                "icon": SERVICE_ICONS["jenkins"],
                "color": "#D24939",
                "protocol": "http",
                "tags": ["ci/cd", "automation"],
            },
            {
                "name": "Grafana",
                "description": "Monitoring and dashboards",
                "ports": [3000],
                "icon": SERVICE_ICONS["grafana"],
                "color": "#F46800",
                "protocol": "http",
                "tags": ["monitoring", "dashboards"],
            },
        ],
    },
    {
        "id": "server-3",
        "name": "Storage Server",
        "host": "192.168.1.102",
        "description": "File storage and backup",
        "services": [
            {
                "name": "Nextcloud",
                "description": "Self-hosted cloud storage",
                "ports": [80, 443],
                "icon": SERVICE_ICONS["nextcloud"],
                "color": "#0082C9",
                "protocol": "https",
                "tags": ["storage", "cloud"],
            },
        ],
    },
]
