from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import (
    BatchMatchRequest,
    CandidateRankingRequest,
    JobFitRequest,
    JobMatchRequest,
    PeerRankingRequest,
    RecommendationRequest,
)
from models.responses import (
    BatchMatchResponse,
    CandidateRankingResponse,
    HealthResponse,
    JobMatchResponse,
    PeerRankingResponse,
)
from models.schemas.match_result import MatchResult
from models.schemas.recommendation import RecommendationBundle
from services.matching import engine
from services.matching.errors import ConfigurationError, MatchingError

API_VERSION = "1.0.0"

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def _http_error(e: MatchingError) -> HTTPException:
    status_code = 422 if isinstance(e, ConfigurationError) else 400
    return HTTPException(status_code=status_code, detail=str(e))


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", version=API_VERSION)


@router.post("/match/job-fit", response_model=MatchResult)
@limiter.limit(settings.rate_limit)
async def job_fit(request: Request, body: JobFitRequest):
    try:
        return engine.score_job_fit(body.actor, body.requirement, body.config)
    except MatchingError as e:
        raise _http_error(e)


@router.post("/match/jobs", response_model=JobMatchResponse)
@limiter.limit(settings.rate_limit)
async def match_jobs(request: Request, body: JobMatchRequest):
    diagnostics: list[str] = []
    try:
        matches = engine.match_jobs_for_actor(body.actor, body.requirements, body.config, diagnostics)
    except MatchingError as e:
        raise _http_error(e)
    return JobMatchResponse(matches=matches, diagnostics=diagnostics)


@router.post("/match/peers", response_model=PeerRankingResponse)
@limiter.limit(settings.rate_limit)
async def match_peers(request: Request, body: PeerRankingRequest):
    diagnostics: list[str] = []
    try:
        peers = engine.rank_peers(body.actor, body.pool, body.config, diagnostics)
    except MatchingError as e:
        raise _http_error(e)
    return PeerRankingResponse(peers=peers, diagnostics=diagnostics)


@router.post("/match/batch", response_model=BatchMatchResponse)
@limiter.limit(settings.rate_limit)
async def match_batch(request: Request, body: BatchMatchRequest):
    diagnostics: list[str] = []
    try:
        results = engine.match_students_to_jobs(body.actors, body.requirements, body.config, diagnostics)
    except MatchingError as e:
        raise _http_error(e)
    return BatchMatchResponse(results=results, diagnostics=diagnostics)


@router.post("/match/job-rankings", response_model=CandidateRankingResponse)
@limiter.limit(settings.rate_limit)
async def job_rankings(request: Request, body: CandidateRankingRequest):
    diagnostics: list[str] = []
    try:
        rankings = engine.rank_candidates_for_job(body.requirement, body.actors, body.config, diagnostics)
    except MatchingError as e:
        raise _http_error(e)
    return CandidateRankingResponse(rankings=rankings, diagnostics=diagnostics)


@router.post("/recommendations", response_model=RecommendationBundle)
@limiter.limit(settings.rate_limit)
async def recommendations(request: Request, body: RecommendationRequest):
    try:
        return engine.build_recommendation_bundle(
            body.actor, body.peer_pool, body.transitions, body.skill_edges, body.config
        )
    except MatchingError as e:
        raise _http_error(e)
