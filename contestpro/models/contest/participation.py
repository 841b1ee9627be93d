from pydantic import BaseModel, ConfigDict
from typing import Optional, Union


class ParticipationCreate(BaseModel):
    """Schema for a paid contest entry; extra fields (task, submission link) are stored as sent"""
    model_config = ConfigDict(extra="allow")

    contest_title: str
    contest_prize: Optional[Union[float, str]] = None
    creator_email: Optional[str] = None
    participant_email: str
    transaction_id: Optional[str] = None
    isWinner: bool = False


class ParticipationStats(BaseModel):
    """Totals returned by the stats endpoint"""
    totalParticipants: int
    totalWinners: int
    participants: list
    winners: list
