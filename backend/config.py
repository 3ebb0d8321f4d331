import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False

    # Scoring engine
    weight_profile: str = "enhanced"  # "enhanced" | "basic"
    max_workers: int = 1  # scoring is GIL-bound
    parallel_threshold: int = 64  # below this many jobs, score inline

    # HTTP defaults (mirror the job-matching endpoint defaults)
    max_jobs_per_request: int = 2000
    default_min_score: int = 40
    default_max_distance_km: float = 100.0
    default_limit: int = 10
    rate_limit: str = "60/minute"
    rate_limit_enabled: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
