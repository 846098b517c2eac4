# backend/ufv_timesheet/__init__.py
"""
UFV timesheet service package.

This package contains:
- main: FastAPI application entrypoint
- notion: Notion database client and filters
- timesheet: row mapping, PDF form filling and the pipeline service
- notifications: Resend email client and error reporting
"""
