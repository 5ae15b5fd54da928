"""
Raw input documents and their conversion to simulator models.

Both documents are JSON objects:

groups.json:      {"A": [{"Team": "Kanada", "ISOCode": "CAN", "FIBARanking": 7}, ...]}
exhibitions.json: {"CAN": [{"Date": "06/07/24", "Opponent": "GER", "Result": "92-88"}, ...]}
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from ..simulator.models import ExhibitionMatch, Exhibitions, Groups, Team


logger = logging.getLogger(__name__)


class SourceError(Exception):
    """Raised when input data cannot be fetched or is not valid."""
    pass


class SourceNotFoundError(SourceError):
    """Raised when an input document does not exist."""
    pass


class SourceAccessError(SourceError):
    """Raised when a requested path or URL is outside what the source may read."""
    pass


class GroupTeamRecord(BaseModel):
    """A team entry in the groups document."""
    name: str = Field(..., alias="Team", min_length=1)
    code: str = Field(..., alias="ISOCode", min_length=1)
    ranking: int = Field(..., alias="FIBARanking", ge=1)

    class Config:
        populate_by_name = True


class ExhibitionRecord(BaseModel):
    """An exhibition match entry."""
    date: Optional[str] = Field(None, alias="Date")
    opponent: str = Field(..., alias="Opponent", min_length=1)
    result: str = Field(..., alias="Result")

    class Config:
        populate_by_name = True


def groups_from_records(records: Dict[str, List[GroupTeamRecord]]) -> Groups:
    """Convert validated group records into simulator teams, keeping group order."""
    return {
        label: [
            Team(code=r.code, name=r.name, ranking=r.ranking, group=label)
            for r in entries
        ]
        for label, entries in records.items()
    }


def exhibitions_from_records(records: Dict[str, List[ExhibitionRecord]]) -> Exhibitions:
    """Convert validated exhibition records into simulator matches."""
    return {
        code: [ExhibitionMatch(opponent=r.opponent, result=r.result, date=r.date) for r in entries]
        for code, entries in records.items()
    }


def _describe(error: Exception) -> str:
    # Validation messages embed the offending input values
    if isinstance(error, ValidationError):
        return f"{error.error_count()} invalid entries"
    return "entries must be lists of objects"


def _require_mapping(data: Any, document: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise SourceError(f"{document} must be a JSON object keyed by group or team code")
    return data


def parse_groups_document(data: Any) -> Groups:
    """Validate a raw groups document and convert it."""
    data = _require_mapping(data, "groups document")
    try:
        records = {
            label: [GroupTeamRecord.model_validate(entry) for entry in entries]
            for label, entries in data.items()
        }
    except (ValidationError, TypeError) as e:
        logger.debug("Groups document rejected: %s", e)
        raise SourceError(f"Invalid groups document: {_describe(e)}")
    return groups_from_records(records)


def parse_exhibitions_document(data: Any) -> Exhibitions:
    """Validate a raw exhibitions document and convert it."""
    data = _require_mapping(data, "exhibitions document")
    try:
        records = {
            code: [ExhibitionRecord.model_validate(entry) for entry in entries]
            for code, entries in data.items()
        }
    except (ValidationError, TypeError) as e:
        logger.debug("Exhibitions document rejected: %s", e)
        raise SourceError(f"Invalid exhibitions document: {_describe(e)}")
    return exhibitions_from_records(records)
