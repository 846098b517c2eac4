# backend/ufv_timesheet/notifications/__init__.py

"""
Notification layer.

- schemas: email and notification message schemas
- client: Resend HTTP client
- service: EmailService, notification senders and the composite service
- factory: shared instances for the application
"""
