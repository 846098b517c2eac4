# backend/ufv_timesheet/timesheet/__init__.py

"""
Timesheet pipeline modules.

- period: pay period calculation
- mapper: Notion rows -> TimesheetData -> form field values
- pdf: PDF template filling
- service: fetch -> map -> fill -> email, with error reporting
- router: HTTP endpoints
"""
