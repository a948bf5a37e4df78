"""Load the option lists behind the dialog's filter controls."""

import asyncio
import logging
from collections.abc import Awaitable, Iterable, Sequence

from image_dialog_search.config import GHT1T_CONTENT_TYPE_ID, PICTO_CONTENT_TYPE_ID
from image_dialog_search.models import ApiClient, LookupData, SourceDefinition
from image_dialog_search.sources import find_source

logger = logging.getLogger(__name__)


def _configuration_resource(catalogue: Iterable[SourceDefinition], source_id: int) -> str:
    source = find_source(catalogue, source_id)
    return source.configuration_api_resource_name if source is not None else ""


async def _load_picto_lookups(api: ApiClient, resource_name: str, lookups: LookupData) -> None:
    data = await api.fetch(resource_name) or {}
    lookups.cloudinary_directories = list(data.get("directoryCodeNames") or [])
    lookups.cloudinary_sub_directories = list(data.get("subDirectoryCodeNames") or [])
    logger.debug(
        "Loaded %d directories and %d sub-directories from %s",
        len(lookups.cloudinary_directories),
        len(lookups.cloudinary_sub_directories),
        resource_name,
    )


async def _load_ght1t_lookups(api: ApiClient, resource_name: str, lookups: LookupData) -> None:
    data = await api.fetch(resource_name)
    lookups.zones = list(data or [])
    logger.debug("Loaded %d zones from %s", len(lookups.zones), resource_name)


async def load_lookups(
    api: ApiClient,
    catalogue: Sequence[SourceDefinition],
    content_type_ids: Iterable[int],
    lookups: LookupData,
) -> None:
    """Fetch lookup data for every enabled source and store it in ``lookups``.

    Fetches run concurrently. The first failure propagates; whatever other
    fetches already stored is kept, and fetches still in flight are not
    cancelled.
    """
    enabled = set(content_type_ids)
    pending: list[Awaitable[None]] = []

    if GHT1T_CONTENT_TYPE_ID in enabled:
        resource_name = _configuration_resource(catalogue, GHT1T_CONTENT_TYPE_ID)
        pending.append(_load_ght1t_lookups(api, resource_name, lookups))

    if PICTO_CONTENT_TYPE_ID in enabled:
        resource_name = _configuration_resource(catalogue, PICTO_CONTENT_TYPE_ID)
        pending.append(_load_picto_lookups(api, resource_name, lookups))

    if not pending:
        return

    await asyncio.gather(*pending)
