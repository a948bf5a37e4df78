"""Catalogue of the image content sources the dialog can search."""

import dataclasses
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from image_dialog_search.config import GHT1T_CONTENT_TYPE_ID, PICTO_CONTENT_TYPE_ID
from image_dialog_search.models import SourceDefinition

logger = logging.getLogger(__name__)

# Defaults match the deployment the dialog was first built for; pass
# image_source_config to point the sources at other resources.
DEFAULT_IMAGE_CONTENT_TYPES: tuple[SourceDefinition, ...] = (
    SourceDefinition(
        name="Picto",
        id=PICTO_CONTENT_TYPE_ID,
        api_resource_name="images",
        configuration_api_resource_name="images/configuration",
    ),
    SourceDefinition(
        name="GHT1T",
        id=GHT1T_CONTENT_TYPE_ID,
        api_resource_name="images/ght1t",
        configuration_api_resource_name="zones-for-images",
    ),
)

SOURCE_KEYS: dict[str, int] = {
    "picto": PICTO_CONTENT_TYPE_ID,
    "ght1t": GHT1T_CONTENT_TYPE_ID,
}

# Ids are fixed; an "id" in an override is ignored like any unknown field.
_FIELD_ALIASES = {
    "name": "name",
    "apiResourceName": "api_resource_name",
    "api_resource_name": "api_resource_name",
    "configurationApiResourceName": "configuration_api_resource_name",
    "configuration_api_resource_name": "configuration_api_resource_name",
}


def _normalize_override(key: str, override: Mapping[str, Any]) -> dict[str, Any]:
    """Map an override onto SourceDefinition field names, dropping unknown fields."""
    changes: dict[str, Any] = {}
    for field_name, value in override.items():
        attr = _FIELD_ALIASES.get(field_name)
        if attr is None:
            logger.debug("Ignoring unknown field %r in %r source override", field_name, key)
            continue
        changes[attr] = value
    return changes


def merge_source_config(
    overrides: Mapping[str, Mapping[str, Any]] | None = None,
    defaults: Iterable[SourceDefinition] = DEFAULT_IMAGE_CONTENT_TYPES,
) -> list[SourceDefinition]:
    """Return a per-instance catalogue with caller overrides applied.

    Overrides are keyed by short source name (``picto``, ``ght1t``) and
    shallow-merged onto the built-in definition with the matching id. The
    built-in definitions are never modified.
    """
    catalogue = list(defaults)
    if not overrides:
        return catalogue

    for key, override in overrides.items():
        source_id = SOURCE_KEYS.get(key)
        if source_id is None:
            logger.debug("Ignoring unknown image source override %r", key)
            continue
        for index, source in enumerate(catalogue):
            if source.id == source_id:
                catalogue[index] = dataclasses.replace(source, **_normalize_override(key, override))
                break
    return catalogue


def filter_content_types(
    catalogue: Iterable[SourceDefinition], content_type_ids: Iterable[int]
) -> list[SourceDefinition]:
    """Keep the enabled definitions, in catalogue order."""
    enabled = set(content_type_ids)
    return [source for source in catalogue if source.id in enabled]


def find_source(catalogue: Iterable[SourceDefinition], source_id: int | None) -> SourceDefinition | None:
    """Look up a definition by id."""
    for source in catalogue:
        if source.id == source_id:
            return source
    return None
