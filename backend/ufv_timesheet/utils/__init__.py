# backend/ufv_timesheet/utils/__init__.py

"""Shared helpers (environment configuration, logging setup)."""
