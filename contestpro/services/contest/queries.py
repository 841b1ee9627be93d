"""
Contest and participation query builders

Translate listing query parameters into MongoDB filters and pipelines. These
functions only build queries; the services run them.
"""
from dataclasses import dataclass
from typing import Optional, Dict, List, Any

from contestpro.models.contest.contest import ContestType, KNOWN_CONTEST_TYPES
from contestpro.core.exceptions import InvalidQueryError


def build_contest_query(
    is_pending: Optional[str] = None,
    email: Optional[str] = None,
    contest_type: Optional[str] = None
) -> Dict[str, Any]:
    """
    Build the contest listing filter.

    - Public listings only show approved contests (isPending=false)
    - isPending="true"/"false" selects the approval state explicitly
    - email lists a creator's own contests, pending and approved
    - contest_type filters by type; "Others" means none of the known types
    """
    query: Dict[str, Any] = {"isPending": False}

    if is_pending:
        query["isPending"] = is_pending == "true"

    if email:
        query["creator.email"] = email
        query["isPending"] = {"$in": [False, True]}

    if contest_type and contest_type != ContestType.OTHERS.value:
        query["contestType"] = contest_type
    elif contest_type == ContestType.OTHERS.value:
        query["contestType"] = {"$nin": KNOWN_CONTEST_TYPES}

    return query


@dataclass
class ParticipationQuery:
    """A resolved participation listing: a find filter or an aggregation pipeline"""
    filter: Optional[Dict[str, Any]] = None
    pipeline: Optional[List[Dict[str, Any]]] = None

    @property
    def is_aggregation(self) -> bool:
        return self.pipeline is not None


def build_creator_summary_pipeline(creator_email: str) -> List[Dict[str, Any]]:
    """One row per contest title among a creator's participations"""
    return [
        {"$match": {"creator_email": creator_email}},
        {
            "$group": {
                "_id": "$contest_title",
                "contest_title": {"$first": "$contest_title"},
                "contest_prize": {"$first": "$contest_prize"},
                "transaction_id": {"$first": "$transaction_id"}
            }
        }
    ]


def build_participation_query(
    creator: Optional[str] = None,
    contest_title: Optional[str] = None,
    participant: Optional[str] = None,
    winner: Optional[str] = None
) -> ParticipationQuery:
    """
    Resolve participation listing parameters to a single query.

    Parameters are checked in order creator, contest_title, participant; the
    first one present decides the query. Raises InvalidQueryError when none is.
    """
    if creator:
        return ParticipationQuery(pipeline=build_creator_summary_pipeline(creator))

    if contest_title:
        # Deployed clients send a participant email under this name
        return ParticipationQuery(filter={"participant_email": contest_title})

    if participant:
        query: Dict[str, Any] = {"participant_email": participant}
        if winner:
            query["isWinner"] = True
        return ParticipationQuery(filter=query)

    raise InvalidQueryError()


def build_existing_winner_query(contest_title: str) -> Dict[str, Any]:
    """Filter matching the declared winner of a contest, if any"""
    return {"contest_title": contest_title, "isWinner": True}
