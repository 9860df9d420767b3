"""
UniFi CLI.

Command-line client for the UniFi Site Manager API (https://api.ui.com).

Architecture:
- registry: static list of callable endpoints and option validators
- client: httpx client sending the X-API-Key header
- models: pydantic models for decoded responses
- render: column-aligned text tables
- cli: click entry point tying the pieces together

Usage:
    export UNIFI_KEY=...
    unifi-cli --action GetDevices
    python cli.py --action GetSites --debug
"""
