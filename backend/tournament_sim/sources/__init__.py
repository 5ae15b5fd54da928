"""
Tournament data sources.

Provides a unified interface for loading groups and exhibition history
from local files or over HTTP.
"""

from pathlib import Path
from typing import Iterable, Optional, Union

from .base import TournamentSource
from .records import (
    SourceError,
    SourceNotFoundError,
    SourceAccessError,
    GroupTeamRecord,
    ExhibitionRecord,
    groups_from_records,
    exhibitions_from_records,
    parse_groups_document,
    parse_exhibitions_document
)
from .file import JsonFileSource, resolve_within
from .http import HttpJsonSource


def get_source(
    kind: str,
    groups_path: Optional[str] = None,
    exhibitions_path: Optional[str] = None,
    base_url: Optional[str] = None,
    data_dir: Optional[Union[str, Path]] = None,
    allowed_hosts: Optional[Iterable[str]] = None
) -> TournamentSource:
    """
    Get the appropriate data source.

    Args:
        kind: Source kind ('file' or 'http')
        groups_path: Groups file path, or endpoint for http
        exhibitions_path: Exhibitions file path, or endpoint for http
        base_url: Base URL (required for http)
        data_dir: Directory file paths are confined to, if given
        allowed_hosts: Hosts the http source may fetch from, if given

    Returns:
        TournamentSource instance

    Raises:
        ValueError: If the kind is not supported or base_url is missing
        SourceAccessError: If a path or URL falls outside the given limits
    """
    kind_lower = kind.lower()

    if kind_lower == "file":
        return JsonFileSource(
            groups_path=groups_path or "groups.json",
            exhibitions_path=exhibitions_path or "exhibitions.json",
            data_dir=data_dir
        )

    if kind_lower == "http":
        if not base_url:
            raise ValueError("base_url is required for the http source")
        source = HttpJsonSource(
            base_url,
            groups_endpoint=groups_path or "/groups.json",
            exhibitions_endpoint=exhibitions_path or "/exhibitions.json",
            allowed_hosts=allowed_hosts
        )
        # Reject disallowed hosts before any request is made
        source.url_for(source.groups_endpoint)
        source.url_for(source.exhibitions_endpoint)
        return source

    raise ValueError(f"Unsupported source: {kind}. Supported: file, http")


__all__ = [
    "TournamentSource",
    "SourceError",
    "SourceNotFoundError",
    "SourceAccessError",
    "GroupTeamRecord",
    "ExhibitionRecord",
    "groups_from_records",
    "exhibitions_from_records",
    "parse_groups_document",
    "parse_exhibitions_document",
    "JsonFileSource",
    "resolve_within",
    "HttpJsonSource",
    "get_source",
]
