"""Build search request parameters from the dialog's search fields."""

import json
from typing import Any
from urllib.parse import quote

from image_dialog_search.models import InstanceSettings, SearchFields

# Characters encodeURIComponent leaves unescaped
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_dimensions(dimensions: Any) -> str:
    """URL-encode the compact JSON form of a dimension constraint."""
    payload = json.dumps(dimensions, separators=(",", ":"), ensure_ascii=False)
    return quote(payload, safe=_URI_COMPONENT_SAFE)


def build_search_arguments(fields: SearchFields, settings: InstanceSettings) -> dict[str, Any]:
    """Derive the search request payload.

    ``zoneIds`` is always present; every other key only appears when its
    field is set. Values are passed through unvalidated.
    """
    arguments: dict[str, Any] = {"zoneIds": list(fields.code_zones)}

    if settings.dimensions is not None:
        arguments["dimensions"] = encode_dimensions(settings.dimensions)

    if fields.start_date:
        arguments["startDate"] = fields.start_date

    if fields.end_date:
        arguments["endDate"] = fields.end_date

    # Resolved per call so a re-login is picked up
    if fields.my_images:
        arguments["createdBy"] = settings.api.user().get("userName")

    if fields.keywords:
        arguments["keywords"] = fields.keywords

    if fields.directory_code_name:
        arguments["directoryCodeName"] = fields.directory_code_name

    if fields.sub_directory_code_name:
        arguments["subDirectoryCodeName"] = fields.sub_directory_code_name

    return arguments
