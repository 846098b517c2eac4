# backend/ufv_timesheet/notion/__init__.py

"""
Notion integration modules.

Responsibilities:
- query the timesheet database for the current pay period
- retrieve the database schema for introspection
- validate automation webhook payloads
"""
