from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_weights
from config import settings
from models.requests import MatchRequest, ScoreRequest
from models.responses import MatchOut, MatchResponse
from models.schemas.match_result import MatchResult
from models.schemas.rank_options import RankOptions
from services.geo import format_distance
from services.pipeline.ranker import rank
from services.pipeline.score_engine import score_one
from services.pipeline.summary import build_summary, summarize_matches

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def _to_match_out(result: MatchResult, include_skill_gaps: bool, include_career_advice: bool) -> MatchOut:
    return MatchOut(
        job_id=result.job_id,
        score=result.score,
        match_quality=result.match_quality,
        matched_skills=result.matched_skills,
        reasons=result.reasons,
        distance_km=result.distance_km,
        distance_label=format_distance(result.distance_km) if result.distance_km is not None else None,
        compatibility_factors=result.compatibility_factors,
        skill_gaps=result.skill_gaps if include_skill_gaps else None,
        career_advice=result.career_advice if include_career_advice else None,
    )


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "weight_profile": settings.weight_profile,
    }


@router.post("/match", response_model=MatchResponse, response_model_exclude_none=True)
@limiter.limit(settings.rate_limit)
def match(request: Request, body: MatchRequest):
    weights = get_weights(body.weight_profile, settings.weight_profile)
    options = RankOptions(**body.options.model_dump())

    results = rank(body.profile, body.jobs, options, weights=weights)

    return MatchResponse(
        matches=[
            _to_match_out(r, body.include_skill_gaps, body.include_career_advice)
            for r in results
        ],
        total_matches=len(results),
        total_jobs=len(body.jobs),
        weight_profile=weights.name,
        summary=build_summary(results, body.profile.full_name),
        stats=summarize_matches(results),
    )


@router.post("/match/score", response_model=MatchResult)
@limiter.limit(settings.rate_limit)
def match_score(request: Request, body: ScoreRequest):
    weights = get_weights(body.weight_profile, settings.weight_profile)
    return score_one(body.profile, body.job, weights=weights)
