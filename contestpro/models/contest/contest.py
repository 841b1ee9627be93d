from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union
from enum import Enum

from contestpro.models.auth.email import SubmittedEmail


class ContestType(str, Enum):
    """
    Contest types offered by the client.

    OTHERS is a listing sentinel: filtering by it returns every contest whose
    type is not one of the named types.
    """
    BOOK_REVIEW = "Book Review"
    MOVIE_REVIEW = "Movie Review"
    ARTICLE_WRITING = "Article Writing"
    OTHERS = "Others"


# Types a contest can be filed under explicitly; anything else lists under "Others"
KNOWN_CONTEST_TYPES = [
    ContestType.BOOK_REVIEW.value,
    ContestType.MOVIE_REVIEW.value,
    ContestType.ARTICLE_WRITING.value,
]


class ContestCreator(BaseModel):
    """Creator snapshot embedded in a contest"""
    model_config = ConfigDict(extra="allow")

    email: SubmittedEmail
    name: Optional[str] = None
    photo: Optional[str] = None


class ContestCreate(BaseModel):
    """Schema for creating a contest; extra fields (dates, images, instructions) are stored as sent"""
    model_config = ConfigDict(extra="allow")

    title: str = Field(..., min_length=1)
    prize: Optional[Union[float, str]] = None
    contestType: Optional[str] = None
    creator: ContestCreator
    # New contests wait for admin approval
    isPending: bool = True
