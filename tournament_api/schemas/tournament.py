from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

from tournament_api.models.tournament import TournamentStatus

# Keep prizePool a JSON number rather than pydantic's default decimal string.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class TournamentIn(BaseModel):
    # Everything is optional here; required/blank checks live in validate_tournament
    # so they can be reported as a single list of field errors.
    name: str | None = None
    game: str | None = None
    status: TournamentStatus | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    max_participants: int | None = None
    current_participants: int | None = None
    prize_pool: Decimal | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("start_date", "end_date")
    @classmethod
    def _naive_utc(cls, v: datetime | None) -> datetime | None:
        if v is not None and v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class TournamentOut(BaseModel):
    id: int
    name: str
    game: str
    status: TournamentStatus
    start_date: datetime
    end_date: datetime | None
    max_participants: int | None
    current_participants: int
    prize_pool: Money | None
    created_at: datetime
    updated_at: datetime

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
