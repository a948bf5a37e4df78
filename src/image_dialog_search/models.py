"""Data models for the image dialog search state."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from image_dialog_search.config import PICTO_CONTENT_TYPE_ID


class ApiClient(Protocol):
    """The injected API client the dialog talks to."""

    async def fetch(self, resource_name: str, params: Mapping[str, Any] | None = None) -> Any: ...

    def user(self) -> Mapping[str, Any]: ...


@dataclass(frozen=True)
class SourceDefinition:
    """One pluggable image backend."""

    name: str
    id: int
    api_resource_name: str
    configuration_api_resource_name: str


@dataclass
class InstanceSettings:
    """Caller-supplied parameters of one dialog instance."""

    api: ApiClient
    content_type_ids: list[int] = field(default_factory=list)
    image_source_config: dict[str, dict[str, Any]] | None = None
    dimensions: dict[str, Any] | None = None
    is_same: Callable[[Any, Any], bool] | None = None
    selected: Any = None
    search_on_display: bool = False

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "InstanceSettings":
        """Build settings from the camelCase option names used by callers."""
        return cls(
            api=params["api"],
            content_type_ids=list(params.get("contentTypeIds") or []),
            image_source_config=params.get("imageSourceConfig"),
            dimensions=params.get("dimensions"),
            is_same=params.get("isSame"),
            selected=params.get("selected"),
            search_on_display=bool(params.get("searchOnDisplay", False)),
        )


# snake_case attribute -> camelCase snapshot key
_SNAPSHOT_KEYS = {
    "start_date": "startDate",
    "end_date": "endDate",
    "keywords": "keywords",
    "my_images": "myImages",
    "code_zones": "codeZones",
    "content_type_id": "contentTypeId",
    "directory_code_name": "directoryCodeName",
    "sub_directory_code_name": "subDirectoryCodeName",
}


@dataclass
class SearchFields:
    """User-editable search inputs."""

    start_date: str | None = None
    end_date: str | None = None
    keywords: str = ""
    my_images: bool = False
    code_zones: list[Any] = field(default_factory=list)
    content_type_id: int | None = PICTO_CONTENT_TYPE_ID
    directory_code_name: str | None = None
    sub_directory_code_name: str | None = None

    def to_snapshot(self) -> dict[str, Any]:
        """Return the raw field state in the persisted camelCase layout."""
        data = {key: getattr(self, attr) for attr, key in _SNAPSHOT_KEYS.items()}
        data["codeZones"] = list(self.code_zones)
        return data

    @classmethod
    def from_snapshot(cls, data: Mapping[str, Any]) -> "SearchFields":
        """Restore fields from a persisted snapshot; missing keys keep defaults."""
        fields = cls()
        for attr, key in _SNAPSHOT_KEYS.items():
            if key in data:
                setattr(fields, attr, data[key])
        fields.code_zones = list(fields.code_zones or [])
        return fields


@dataclass
class LookupData:
    """Option lists for the filter controls."""

    cloudinary_directories: list[str] = field(default_factory=list)
    cloudinary_sub_directories: list[str] = field(default_factory=list)
    zones: list[Any] = field(default_factory=list)
