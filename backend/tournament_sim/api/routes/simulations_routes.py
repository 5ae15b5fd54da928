"""
Simulation API routes.
"""

import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from ..schemas import (
    SimulationRunRequest,
    SourceRunRequest,
    SimulationResultsResponse
)
from ...core.config import SemifinalMode, get_data_dir, get_source_hosts, load_settings
from ...report import render_report
from ...simulator import TournamentError, TournamentResult, simulate_tournament
from ...simulator.models import Exhibitions, Groups
from ...sources import (
    get_source,
    groups_from_records,
    exhibitions_from_records,
    SourceAccessError,
    SourceError,
    SourceNotFoundError
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/simulations", tags=["simulations"])


def _run(
    groups: Groups,
    exhibitions: Exhibitions,
    seed: Optional[int],
    semifinal_mode: Optional[str]
) -> TournamentResult:
    """Run the simulation, translating data errors into HTTP 422."""
    settings = load_settings().with_overrides(
        seed=seed,
        semifinal_mode=SemifinalMode(semifinal_mode) if semifinal_mode else None
    )

    try:
        return simulate_tournament(groups, exhibitions, settings=settings)
    except TournamentError as e:
        logger.warning("Simulation rejected: %s", e)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"{type(e).__name__}: {e}"
        )


def _run_inline(request: SimulationRunRequest) -> TournamentResult:
    return _run(
        groups_from_records(request.groups),
        exhibitions_from_records(request.exhibitions),
        request.seed,
        request.semifinal_mode
    )


@router.post("/run", response_model=SimulationResultsResponse)
async def run_simulation(request: SimulationRunRequest) -> SimulationResultsResponse:
    """
    Simulate a tournament from inline groups and exhibitions.

    Pass a seed to make the run reproducible.
    """
    result = _run_inline(request)
    return SimulationResultsResponse(**result.to_dict())


@router.post("/report", response_class=PlainTextResponse)
async def run_simulation_report(request: SimulationRunRequest) -> str:
    """Simulate a tournament and return the console-style text report."""
    return render_report(_run_inline(request))


@router.post("/run-from-source", response_model=SimulationResultsResponse)
async def run_simulation_from_source(request: SourceRunRequest) -> SimulationResultsResponse:
    """
    Load tournament data from a file or HTTP source and simulate it.

    File paths must resolve inside TOURNAMENT_DATA_DIR and http sources
    must be on a host listed in TOURNAMENT_SOURCE_HOSTS.
    """
    try:
        source = get_source(
            request.source,
            groups_path=request.groups_path,
            exhibitions_path=request.exhibitions_path,
            base_url=request.base_url,
            data_dir=get_data_dir(),
            allowed_hosts=get_source_hosts()
        )
        groups, exhibitions = await source.fetch_all()
    except SourceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except SourceAccessError as e:
        logger.warning("Source request refused: %s", e)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e)
        )
    except SourceError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Error loading tournament data: {str(e)}"
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    result = _run(groups, exhibitions, request.seed, request.semifinal_mode)
    return SimulationResultsResponse(**result.to_dict())
