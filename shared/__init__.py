"""
Shared utilities for Hosted Hub components.

- logging_config: consistent logging setup for the hub API and the dashboard GUI
"""
