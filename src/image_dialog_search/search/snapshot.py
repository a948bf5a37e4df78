"""Repair a restored last-search snapshot."""

import logging
from collections.abc import MutableMapping, Sequence
from typing import Any

from image_dialog_search.models import SourceDefinition

logger = logging.getLogger(__name__)


def correct_last_search_snapshot(
    snapshot: MutableMapping[str, Any], content_types: Sequence[SourceDefinition]
) -> MutableMapping[str, Any]:
    """Point the snapshot's content type at an enabled source.

    The snapshot is modified in place and returned. Only
    ``searchFields.contentTypeId`` is ever rewritten.
    """
    search_fields = snapshot.get("searchFields")
    if search_fields is None:
        return snapshot

    content_type_id = search_fields.get("contentTypeId")
    if content_type_id and any(source.id == content_type_id for source in content_types):
        return snapshot

    if not content_types:
        logger.warning("No enabled content type to restore snapshot content type %r onto", content_type_id)
        return snapshot

    logger.debug("Replacing snapshot content type %r with %r", content_type_id, content_types[0].id)
    search_fields["contentTypeId"] = content_types[0].id
    return snapshot
