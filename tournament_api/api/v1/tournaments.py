from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from tournament_api.api.deps import get_tournament_service
from tournament_api.api.validation import errors_body, validate_tournament
from tournament_api.models.tournament import TournamentStatus
from tournament_api.schemas.tournament import TournamentIn, TournamentOut
from tournament_api.services.tournament import NotFound, TournamentService

router = APIRouter()


@router.get("/tournaments", response_model=list[TournamentOut])
def list_tournaments(service: TournamentService = Depends(get_tournament_service)):
    return service.find_all()


@router.get("/tournaments/status/{status}", response_model=list[TournamentOut])
def list_tournaments_by_status(
    status: TournamentStatus,
    service: TournamentService = Depends(get_tournament_service),
):
    return service.find_by_status(status)


@router.get("/tournaments/game/{game}", response_model=list[TournamentOut])
def list_tournaments_by_game(
    game: str,
    service: TournamentService = Depends(get_tournament_service),
):
    return service.find_by_game(game)


@router.get("/tournaments/{tournament_id}", response_model=TournamentOut)
def get_tournament(
    tournament_id: int,
    service: TournamentService = Depends(get_tournament_service),
):
    t = service.find_by_id(tournament_id)
    if isinstance(t, NotFound):
        return Response(status_code=404)
    return t


@router.post("/tournaments", response_model=TournamentOut, status_code=201)
def create_tournament(
    payload: TournamentIn,
    service: TournamentService = Depends(get_tournament_service),
):
    errors = validate_tournament(payload, require_status=False)
    if errors:
        return JSONResponse(status_code=400, content=errors_body(errors))
    return service.create(payload)


@router.put("/tournaments/{tournament_id}", response_model=TournamentOut)
def update_tournament(
    tournament_id: int,
    payload: TournamentIn,
    service: TournamentService = Depends(get_tournament_service),
):
    errors = validate_tournament(payload)
    if errors:
        return JSONResponse(status_code=400, content=errors_body(errors))

    t = service.update(tournament_id, payload)
    if isinstance(t, NotFound):
        return Response(status_code=404)
    return t


@router.delete("/tournaments/{tournament_id}", status_code=204)
def delete_tournament(
    tournament_id: int,
    service: TournamentService = Depends(get_tournament_service),
):
    if isinstance(service.delete(tournament_id), NotFound):
        return Response(status_code=404)
    return Response(status_code=204)
