"""
Local JSON file source.
"""

import json
from pathlib import Path
from typing import Any, Optional, Union

from .base import TournamentSource
from .records import (
    SourceAccessError,
    SourceError,
    SourceNotFoundError,
    parse_exhibitions_document,
    parse_groups_document
)
from ..simulator.models import Exhibitions, Groups


def resolve_within(path: Union[str, Path], root: Union[str, Path]) -> Path:
    """
    Resolve a path against a root directory, refusing anything outside it.

    Relative paths are taken relative to the root. Symlinks and `..`
    segments are resolved before the check.

    Raises:
        SourceAccessError: If the resolved path escapes the root
    """
    root = Path(root).resolve()
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = root / candidate
    candidate = candidate.resolve()

    if not candidate.is_relative_to(root):
        raise SourceAccessError(f"Path is outside the data directory: {path}")
    return candidate


class JsonFileSource(TournamentSource):
    """Reads groups.json and exhibitions.json from disk."""

    def __init__(
        self,
        groups_path: Union[str, Path] = "groups.json",
        exhibitions_path: Union[str, Path] = "exhibitions.json",
        data_dir: Optional[Union[str, Path]] = None
    ):
        """
        Initialize the file source.

        Args:
            groups_path: Path of the groups document
            exhibitions_path: Path of the exhibitions document
            data_dir: If given, both paths must resolve inside this directory
        """
        if data_dir is not None:
            groups_path = resolve_within(groups_path, data_dir)
            exhibitions_path = resolve_within(exhibitions_path, data_dir)
        self.groups_path = Path(groups_path)
        self.exhibitions_path = Path(exhibitions_path)

    @property
    def source_name(self) -> str:
        return "file"

    def _read_json(self, path: Path) -> Any:
        if not path.exists():
            raise SourceNotFoundError(f"File not found: {path}")
        try:
            with path.open(encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise SourceError(f"Invalid JSON in {path}: {e}")
        except UnicodeDecodeError:
            raise SourceError(f"{path} is not UTF-8 text")
        except OSError as e:
            raise SourceError(f"Cannot read {path}: {e}")

    async def fetch_groups(self) -> Groups:
        return parse_groups_document(self._read_json(self.groups_path))

    async def fetch_exhibitions(self) -> Exhibitions:
        return parse_exhibitions_document(self._read_json(self.exhibitions_path))
