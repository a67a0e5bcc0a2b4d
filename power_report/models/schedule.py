# power_report/models/schedule.py
import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt

TBD_OPPONENT = "TBD Opponent"


class ScheduleTeam(BaseModel):
    """A participant as listed in the schedule feed."""

    model_config = ConfigDict(populate_by_name=True)

    team_id: Optional[StrictInt] = Field(None, alias="teamId")
    team_city: Optional[str] = Field(None, alias="teamCity")
    team_name: Optional[str] = Field(None, alias="teamName")

    @property
    def display_name(self) -> str:
        """Opponent label: city and name, the name alone, or a placeholder."""
        if self.team_city and self.team_name is not None:
            return f"{self.team_city} {self.team_name}"
        if self.team_name:
            return self.team_name
        return TBD_OPPONENT


class Game(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    game_date_utc: Optional[str] = Field(None, alias="gameDateUTC")
    home_team: ScheduleTeam = Field(..., alias="homeTeam")
    away_team: ScheduleTeam = Field(..., alias="awayTeam")


class GameDate(BaseModel):
    games: List[Game]


class LeagueSchedule(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    game_dates: List[GameDate] = Field(..., alias="gameDates")


class ScheduleResponse(BaseModel):
    """Top level of scheduleLeagueV2.json."""

    model_config = ConfigDict(populate_by_name=True)

    league_schedule: LeagueSchedule = Field(..., alias="leagueSchedule")


class GameListing(BaseModel):
    """One upcoming game from a single team's point of view."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    opponent: str
    is_home: bool
