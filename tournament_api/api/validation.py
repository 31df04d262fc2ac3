from dataclasses import asdict, dataclass

from tournament_api.schemas.tournament import TournamentIn


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


def validate_tournament(payload: TournamentIn, require_status: bool = True) -> list[FieldError]:
    """Check required fields on a parsed tournament payload.

    Returns an empty list when the payload can be handed to the service.
    ``status`` may be left out on create, where it defaults to UPCOMING.
    """
    errors: list[FieldError] = []

    if not (payload.name or "").strip():
        errors.append(FieldError("name", "Tournament name is required"))
    if not (payload.game or "").strip():
        errors.append(FieldError("game", "Game name is required"))
    if require_status and payload.status is None:
        errors.append(FieldError("status", "Status is required"))
    if payload.start_date is None:
        errors.append(FieldError("startDate", "Start date is required"))

    return errors


def errors_body(errors: list[FieldError]) -> dict:
    return {"errors": [asdict(e) for e in errors]}
