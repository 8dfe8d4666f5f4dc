"""Home — serves the bundled dashboard page at /.

Invariants:
    - Bytes of the configured HTML file are returned verbatim
    - Unreadable file → AssetError (500), never a partial body
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from esp_telemetry.api.dependencies import get_app_settings
from esp_telemetry.config import Settings
from esp_telemetry.core.errors import AssetError, ErrorContext

logger = logging.getLogger(__name__)
router = APIRouter(tags=["home"])


@router.get("/", response_class=Response)
def home(request: Request, settings: Settings = Depends(get_app_settings)):
    path = settings.index_html_path
    try:
        data = path.read_bytes()
    except OSError as e:
        logger.error(f"Failed to read {path}: {e}")
        raise AssetError(
            path.name,
            ErrorContext(request_id=getattr(request.state, "request_id", None)),
        )
    return Response(content=data, media_type="text/html")
