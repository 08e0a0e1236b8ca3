"""Settings for the CSV content widget.

Defaults can be supplied through the environment (or the project .env):

    CSV_CONTENT_FILE_URL   -- source of the CSV file, absolute or "~/..."
    CSV_CONTENT_MARKER     -- cell value that marks a feature (default "x")
    CSV_CONTENT_VIEW_NAME  -- view template to render (default "Default")
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

from csv_content.table.patterns import DEFAULT_MARKER

ROOT = Path(__file__).parent.parent.parent.parent.resolve()

DEFAULT_VIEW_NAME = "Default"


class WidgetSettings(BaseModel):
    """Properties an editor sets on the widget."""

    csv_file_url: str | None = None
    marker: str = DEFAULT_MARKER
    view_name: str | None = None

    @property
    def resolved_view_name(self) -> str:
        return self.view_name or DEFAULT_VIEW_NAME

    @classmethod
    def from_env(cls) -> "WidgetSettings":
        """Build settings from CSV_CONTENT_* environment variables."""
        load_dotenv(ROOT / ".env")
        return cls(
            csv_file_url=os.getenv("CSV_CONTENT_FILE_URL") or None,
            marker=os.getenv("CSV_CONTENT_MARKER", DEFAULT_MARKER),
            view_name=os.getenv("CSV_CONTENT_VIEW_NAME") or None,
        )
