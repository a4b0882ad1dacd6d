from pydantic import BaseModel

from models.schemas.match_result import MatchResult, PeerMatch, StudentJobMatches


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = ""


class PeerRankingResponse(BaseModel):
    peers: list[PeerMatch] = []
    diagnostics: list[str] = []


class JobMatchResponse(BaseModel):
    matches: list[MatchResult] = []
    diagnostics: list[str] = []


class BatchMatchResponse(BaseModel):
    results: list[StudentJobMatches] = []
    diagnostics: list[str] = []


class CandidateRankingResponse(BaseModel):
    rankings: list[MatchResult] = []
    diagnostics: list[str] = []
