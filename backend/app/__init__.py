# backend/app/__init__.py
"""
Notification dispatch backend application package.

This package contains:
- main: FastAPI application entrypoint
- notifications: channel drivers and the driver manager
- utils: environment variable helpers
"""
