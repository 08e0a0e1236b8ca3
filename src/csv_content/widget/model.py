"""Content model handed to the widget's view.

The model holds the widget configuration, reports configuration errors as a
message (never as an exception), and builds the table lazily on first
access.  Retrieving the file is the caller's concern: either pass the
content in directly, or pass a ``fetch`` callable that takes the resolved
URL and returns the file content as a string.
"""

import logging
from collections.abc import Callable

from pydantic import BaseModel

from csv_content.table.patterns import DEFAULT_MARKER, MISSING_URL_MESSAGE, VIRTUAL_PATH_PREFIX
from csv_content.table.pipeline import build_table
from csv_content.table.schema import Table
from csv_content.widget.config import WidgetSettings

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], str]


class ContentUnavailableError(RuntimeError):
    """Raised when the table is requested but no content or fetcher was given."""


class RequestContext(BaseModel):
    """The parts of the current request needed to resolve a virtual path."""

    scheme: str
    authority: str
    application_path: str = "/"


# ---------------------------------------------------------------------------
# URL resolution
# ---------------------------------------------------------------------------


def resolve_source_url(url: str, request: RequestContext | None = None) -> str:
    """Resolve an application-relative "~/..." path to an absolute URL.

    Any other URL is returned unchanged.  A tilde not followed by "/" (e.g.
    "~files") is not a valid virtual path and raises ValueError.
    """
    if not url.startswith(VIRTUAL_PATH_PREFIX):
        return url
    if url != VIRTUAL_PATH_PREFIX and not url.startswith(VIRTUAL_PATH_PREFIX + "/"):
        raise ValueError(f"Invalid virtual path {url!r}; expected \"~/...\"")
    if request is None:
        raise ValueError(f"Cannot resolve virtual path {url!r} without a request context")

    app_path = request.application_path.rstrip("/")
    rest = url[len(VIRTUAL_PATH_PREFIX) :].lstrip("/")
    return f"{request.scheme}://{request.authority}{app_path}/{rest}"


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------


class CsvContentModel:
    """Model for the CSV content widget.

    ``error_message`` is set when no source URL was configured; in that case
    ``table`` is None and the content is never requested.  Otherwise
    ``table`` is built on first access from ``file_contents`` (when given) or
    from ``fetch(resolved_url)``, and cached.
    """

    def __init__(
        self,
        csv_file_url: str | None,
        marker: str | None = DEFAULT_MARKER,
        file_contents: str | None = None,
        fetch: Fetcher | None = None,
        request: RequestContext | None = None,
    ):
        self.csv_file_url = csv_file_url
        self.marker = marker
        self.file_contents = file_contents
        self.fetch = fetch
        self.request = request
        self.error_message: str | None = None
        self._table: Table | None = None
        self._built = False

        if not csv_file_url:
            logger.warning(MISSING_URL_MESSAGE)
            self.error_message = MISSING_URL_MESSAGE

    @property
    def table(self) -> Table | None:
        if self.error_message or self._built:
            return self._table
        if self.file_contents is None:
            self.file_contents = self._fetch_contents()
        self._table = build_table(self.file_contents, self.marker)
        self._built = True
        return self._table

    def _fetch_contents(self) -> str:
        if self.fetch is None:
            raise ContentUnavailableError(f"No file contents or fetcher supplied for {self.csv_file_url}")
        url = resolve_source_url(self.csv_file_url, self.request)
        logger.info("Fetching CSV content from %s", url)
        return self.fetch(url)


def index(
    settings: WidgetSettings, fetch: Fetcher | None = None, request: RequestContext | None = None
) -> tuple[str, CsvContentModel]:
    """Default widget action: pick the view and build its model."""
    model = CsvContentModel(settings.csv_file_url, settings.marker, fetch=fetch, request=request)
    return settings.resolved_view_name, model
