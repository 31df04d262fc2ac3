from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from tournament_api.core.settings import settings
from tournament_api.db.session import SessionLocal
from tournament_api.repositories.tournament import TournamentRepository
from tournament_api.services.tournament import TournamentService


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_tournament_service(db: Session = Depends(get_db)) -> TournamentService:
    return TournamentService(
        TournamentRepository(db),
        latency=settings.FIND_ALL_LATENCY_SECONDS,
    )
