"""Image-specific behaviour plugged into the generic dialog search controller."""

from collections.abc import Mapping, MutableMapping
from typing import Any

from image_dialog_search.models import InstanceSettings, LookupData, SearchFields, SourceDefinition
from image_dialog_search.search.arguments import build_search_arguments
from image_dialog_search.search.lookups import load_lookups
from image_dialog_search.search.snapshot import correct_last_search_snapshot
from image_dialog_search.sources import filter_content_types, find_source, merge_source_config


class ImageSearchStrategy:
    """Search behaviour for the image picker dialog.

    Holds the instance's private source catalogue, the enabled content types
    and the lookup data loaded for the filter controls.
    """

    def __init__(self, settings: InstanceSettings) -> None:
        self.settings = settings
        self.all_image_content_types: list[SourceDefinition] = merge_source_config(
            settings.image_source_config
        )
        self.content_types: list[SourceDefinition] = filter_content_types(
            self.all_image_content_types, settings.content_type_ids
        )
        self.lookups = LookupData()

    def default_search_fields(self) -> SearchFields:
        fields = SearchFields()
        self.ensure_content_type(fields)
        return fields

    def restore_search_fields(self, data: Mapping[str, Any]) -> SearchFields:
        fields = SearchFields.from_snapshot(data)
        self.ensure_content_type(fields)
        return fields

    def ensure_search_fields(self, fields: SearchFields) -> None:
        self.ensure_content_type(fields)

    def ensure_content_type(self, fields: SearchFields) -> None:
        """Reset ``fields.content_type_id`` to the first enabled type if it is not enabled."""
        if not self.content_types:
            return
        if find_source(self.content_types, fields.content_type_id) is None:
            fields.content_type_id = self.content_types[0].id

    def api_resource_name(self, fields: SearchFields) -> str:
        source = find_source(self.all_image_content_types, fields.content_type_id)
        return source.api_resource_name if source is not None else ""

    def build_search_arguments(self, fields: SearchFields) -> dict[str, Any]:
        return build_search_arguments(fields, self.settings)

    async def load_lookups(self) -> None:
        await load_lookups(
            self.settings.api,
            self.all_image_content_types,
            self.settings.content_type_ids,
            self.lookups,
        )

    def reconcile_snapshot(self, snapshot: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
        return correct_last_search_snapshot(snapshot, self.content_types)
