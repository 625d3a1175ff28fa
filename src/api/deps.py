"""FastAPI dependency injection."""

from fastapi import HTTPException

from src.config import settings
from src.models.inputs import ModelingOptions
from src.models.region import RegionalConfig
from src.regions.registry import UnknownRegionError, get_region


def resolve_region(code: str | None) -> RegionalConfig:
    """Region by code (settings.default_region when omitted); 404 if unsupported."""
    try:
        return get_region(code or settings.default_region)
    except UnknownRegionError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0]))


def default_options() -> ModelingOptions:
    return ModelingOptions(
        include_closing_costs_in_renter_initial_investment=(
            settings.include_closing_costs_in_renter_initial_investment
        ),
        model_buyer_side_investment=settings.model_buyer_side_investment,
    )
