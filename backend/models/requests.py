from typing import Any

from pydantic import BaseModel, Field

# Records stay loosely typed: the engine validates them, rejecting a malformed
# primary record (400) but skipping a malformed pool entry with a diagnostic.
RawRecord = dict[str, Any]


class JobFitRequest(BaseModel):
    actor: RawRecord
    requirement: RawRecord
    config: dict[str, Any] | None = None


class PeerRankingRequest(BaseModel):
    actor: RawRecord
    pool: list[RawRecord] = Field(default=[], max_length=1000)
    config: dict[str, Any] | None = None


class JobMatchRequest(BaseModel):
    actor: RawRecord
    requirements: list[RawRecord] = Field(default=[], max_length=1000)
    config: dict[str, Any] | None = None


class BatchMatchRequest(BaseModel):
    actors: list[RawRecord] = Field(default=[], max_length=1000)
    requirements: list[RawRecord] = Field(default=[], max_length=1000)
    config: dict[str, Any] | None = None


class CandidateRankingRequest(BaseModel):
    requirement: RawRecord
    actors: list[RawRecord] = Field(default=[], max_length=1000)
    config: dict[str, Any] | None = None


class RecommendationRequest(BaseModel):
    actor: RawRecord
    peer_pool: list[RawRecord] = Field(default=[], max_length=1000)
    transitions: list[RawRecord] = Field(default=[], max_length=1000)
    skill_edges: list[RawRecord] = Field(default=[], max_length=1000)
    config: dict[str, Any] | None = None
