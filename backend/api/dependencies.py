"""Shared dependencies for API routes."""

import logging

from fastapi import HTTPException

from services.pipeline.weights import WeightProfile, get_weight_profile

logger = logging.getLogger(__name__)


def get_weights(name: str | None, default: str) -> WeightProfile:
    """Resolve a requested weight profile, mapping unknown names to a 400."""
    try:
        return get_weight_profile(name or default)
    except ValueError as e:
        logger.warning("Rejected match request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
