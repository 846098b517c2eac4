# backend/ufv_timesheet/timesheet/pdf.py

"""
PDF form filling for the timesheet template.

The template is a static PDF with named text fields. Filling writes the
values into the widget annotations, asks viewers to regenerate appearances
and returns the serialized document.
"""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PyPdfError

from .errors import TemplateMismatchError, TemplateNotFoundError
from .mapper import build_field_values
from .schemas import TimesheetData

logger = logging.getLogger(__name__)


class PdfFormTemplate:
    """
    A fillable PDF template held in memory.

    The template is parsed once per instance. Each fill clones the parsed
    document, so one instance can serve any number of fills.
    """

    def __init__(self, content: bytes, name: str = "<bytes>") -> None:
        self._content = content
        self.name = name
        self._parsed: Optional[PdfReader] = None

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "PdfFormTemplate":
        """
        Load a template from disk.

        :raises TemplateNotFoundError: the file does not exist
        """
        path = Path(path)
        try:
            content = path.read_bytes()
        except FileNotFoundError as exc:
            logger.error("Failed to load PDF: %s not found", path)
            raise TemplateNotFoundError(f"PDF template not found: {path}") from exc

        return cls(content, name=str(path))

    def _reader(self) -> PdfReader:
        if self._parsed is not None:
            return self._parsed
        try:
            self._parsed = PdfReader(BytesIO(self._content))
        except PyPdfError as exc:
            logger.error("Failed to load PDF %s: %s", self.name, exc)
            raise TemplateMismatchError(f"Failed to load PDF {self.name}: {exc}") from exc
        return self._parsed

    def field_names(self) -> List[str]:
        """
        Names of the form fields, in AcroForm order.

        :raises TemplateMismatchError: the template has no form
        """
        reader = self._reader()
        fields = reader.get_fields()
        if not fields:
            raise TemplateMismatchError(f"PDF template {self.name} has no form fields")

        logger.info("Loaded PDF with %d page(s), %d form fields", len(reader.pages), len(fields))
        return list(fields.keys())

    def fill(self, values: Mapping[str, str]) -> bytes:
        """
        Write `values` into the template's form fields and return the PDF bytes.

        :raises TemplateMismatchError: a key of `values` is not a template field
        """
        known = set(self.field_names())
        unknown = sorted(name for name in values if name not in known)
        if unknown:
            raise TemplateMismatchError(
                f"PDF template {self.name} has no fields named: {', '.join(unknown)}"
            )

        writer = PdfWriter(clone_from=self._reader())
        for page in writer.pages:
            if "/Annots" not in page:
                continue
            writer.update_page_form_field_values(page, dict(values), auto_regenerate=False)
        writer.set_need_appearances_writer(True)

        output = BytesIO()
        writer.write(output)
        content = output.getvalue()

        logger.info("Successfully converted PDF to bytes, size: %d bytes", len(content))
        return content


def create_timesheet_pdf(data: TimesheetData, template: PdfFormTemplate) -> bytes:
    """
    Fill the timesheet template with one pay period of shifts.
    """
    values: Dict[str, str] = build_field_values(data, template.field_names())
    logger.info("Filling %d form fields for %d entries", len(values), len(data.entries))
    return template.fill(values)
