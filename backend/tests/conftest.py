# backend/tests/conftest.py
"""
Pytest configuration for the UFV timesheet service tests.

- Ensures that backend/ is on sys.path so that `import ufv_timesheet.*`
  works without installing the package.
- Sets safe dummy values for required environment variables.
- Provides a small fillable PDF template (see factories.py).
"""

import os
import sys
from pathlib import Path

import pytest


def _ensure_project_root_in_sys_path() -> None:
    # This file is located at: backend/tests/conftest.py
    # parents[1] -> backend/
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        # Insert at the beginning so it has priority over site-packages, etc.
        sys.path.insert(0, project_root_str)


def _ensure_test_env_vars() -> None:
    """
    Set dummy environment variables required for tests.

    These values are only for local testing and do NOT contain real secrets.
    In real environments, proper values should be provided via system env.
    """
    os.environ.setdefault("NOTION_API_KEY", "dummy-notion-api-key-for-tests")
    os.environ.setdefault("NOTION_DATABASE_ID", "dummy-notion-db-id-for-tests")
    os.environ.setdefault("NOTION_AUTOMATION_ID", "dummy-automation-id-for-tests")
    os.environ.setdefault("RESEND_API_KEY", "dummy-resend-api-key-for-tests")


_ensure_project_root_in_sys_path()
_ensure_test_env_vars()

from factories import build_form_pdf, template_field_names  # noqa: E402


@pytest.fixture
def form_template_bytes() -> bytes:
    return build_form_pdf(template_field_names())


@pytest.fixture
def form_template_path(tmp_path, form_template_bytes) -> Path:
    path = tmp_path / "sasi.pdf"
    path.write_bytes(form_template_bytes)
    return path
