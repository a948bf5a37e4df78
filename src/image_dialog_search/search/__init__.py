"""Image dialog search CLI: inspect sources, search arguments, snapshots and lookups."""

import argparse
import json
from pathlib import Path


def main() -> None:
    """CLI entry point for image dialog search."""
    parser = argparse.ArgumentParser(description="Image dialog search tools")
    subparsers = parser.add_subparsers(dest="command")

    content_types_help = "Enabled content type ids (default: all built-in sources)"

    # sources
    src_parser = subparsers.add_parser("sources", help="Show the effective image source catalogue")
    src_parser.add_argument("--content-types", type=int, nargs="+", help=content_types_help)
    src_parser.add_argument("--config", type=Path, help="JSON file with image source overrides")

    # args
    args_parser = subparsers.add_parser("args", help="Build search arguments from saved fields")
    args_parser.add_argument(
        "--fields", type=Path, required=True, help="JSON file with searchFields or a full snapshot"
    )
    args_parser.add_argument("--content-types", type=int, nargs="+", help=content_types_help)
    args_parser.add_argument("--dimensions", help="Dimension constraint as a JSON object")
    args_parser.add_argument("--user", help="User name for 'my images' (or set IMAGE_DIALOG_USER_NAME)")

    # reconcile
    rec_parser = subparsers.add_parser("reconcile", help="Repair a saved last-search snapshot")
    rec_parser.add_argument("--snapshot", type=Path, required=True, help="Snapshot JSON file")
    rec_parser.add_argument("--content-types", type=int, nargs="+", help=content_types_help)

    # lookups
    lk_parser = subparsers.add_parser("lookups", help="Fetch zones and directories from the API")
    lk_parser.add_argument("--content-types", type=int, nargs="+", help=content_types_help)
    lk_parser.add_argument("--config", type=Path, help="JSON file with image source overrides")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return

    if args.command == "sources":
        _cmd_sources(args)
    elif args.command == "args":
        _cmd_args(args)
    elif args.command == "reconcile":
        _cmd_reconcile(args)
    elif args.command == "lookups":
        _cmd_lookups(args)


def _content_type_ids(args: argparse.Namespace) -> list[int]:
    from image_dialog_search.config import DEFAULT_CONTENT_TYPE_IDS

    return args.content_types or list(DEFAULT_CONTENT_TYPE_IDS)


def _read_json(path: Path | None) -> dict | None:
    if path is None:
        return None
    return json.loads(path.read_text(encoding="utf-8"))


def _source_to_dict(source) -> dict:
    return {
        "name": source.name,
        "id": source.id,
        "apiResourceName": source.api_resource_name,
        "configurationApiResourceName": source.configuration_api_resource_name,
    }


class _OfflineApi:
    """Stand-in API for commands that never hit the network."""

    def __init__(self, user_name: str) -> None:
        self.user_name = user_name

    async def fetch(self, resource_name, params=None):
        raise RuntimeError(f"Offline command tried to fetch {resource_name!r}")

    def user(self) -> dict:
        return {"userName": self.user_name}


def _cmd_sources(args: argparse.Namespace) -> None:
    """Print the merged catalogue and which entries are enabled."""
    from rich import print_json

    from image_dialog_search.sources import filter_content_types, merge_source_config

    catalogue = merge_source_config(_read_json(args.config))
    enabled = filter_content_types(catalogue, _content_type_ids(args))
    print_json(
        data={
            "catalogue": [_source_to_dict(s) for s in catalogue],
            "contentTypes": [s.id for s in enabled],
        }
    )


def _cmd_args(args: argparse.Namespace) -> None:
    """Print the search arguments derived from saved fields."""
    from rich import print_json

    from image_dialog_search.config import API_USER_NAME
    from image_dialog_search.models import InstanceSettings
    from image_dialog_search.search.strategy import ImageSearchStrategy

    data = _read_json(args.fields) or {}
    snapshot = data if "searchFields" in data else {"searchFields": data}

    settings = InstanceSettings(
        api=_OfflineApi(args.user or API_USER_NAME),
        content_type_ids=_content_type_ids(args),
        dimensions=json.loads(args.dimensions) if args.dimensions else None,
    )
    strategy = ImageSearchStrategy(settings)
    fields = strategy.restore_search_fields(strategy.reconcile_snapshot(snapshot)["searchFields"])
    print(f"Resource: {strategy.api_resource_name(fields) or '(none)'}")
    print_json(data=strategy.build_search_arguments(fields))


def _cmd_reconcile(args: argparse.Namespace) -> None:
    """Print a snapshot repaired against the enabled content types."""
    from rich import print_json

    from image_dialog_search.search.snapshot import correct_last_search_snapshot
    from image_dialog_search.sources import filter_content_types, merge_source_config

    snapshot = _read_json(args.snapshot) or {}
    content_types = filter_content_types(merge_source_config(), _content_type_ids(args))
    print_json(data=correct_last_search_snapshot(snapshot, content_types))


def _cmd_lookups(args: argparse.Namespace) -> None:
    """Fetch lookup data for the enabled sources."""
    import asyncio

    from rich import print_json

    from image_dialog_search.api import ContentApiClient
    from image_dialog_search.models import LookupData
    from image_dialog_search.search.lookups import load_lookups
    from image_dialog_search.sources import merge_source_config

    catalogue = merge_source_config(_read_json(args.config))
    content_type_ids = _content_type_ids(args)
    lookups = LookupData()

    async def run() -> None:
        async with ContentApiClient() as api:
            await load_lookups(api, catalogue, content_type_ids, lookups)

    asyncio.run(run())
    print_json(
        data={
            "zones": lookups.zones,
            "directoryCodeNames": lookups.cloudinary_directories,
            "subDirectoryCodeNames": lookups.cloudinary_sub_directories,
        }
    )
