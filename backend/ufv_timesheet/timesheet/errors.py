# backend/ufv_timesheet/timesheet/errors.py

"""
Exceptions raised by the timesheet pipeline.
"""


class TimesheetError(RuntimeError):
    """Base error for the timesheet pipeline."""


class TimesheetMappingError(TimesheetError):
    """A Notion row could not be turned into a timesheet entry."""


class TemplateNotFoundError(TimesheetError):
    """The PDF template file does not exist."""


class TemplateMismatchError(TimesheetError):
    """The PDF template does not carry the form fields we write."""


class TimesheetProcessingError(TimesheetError):
    """
    The pipeline aborted. The message carries the failing stage; the
    original exception is chained as __cause__.
    """
