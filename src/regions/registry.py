"""Lookup of supported jurisdictions by ISO country code."""

from src.models.region import RegionalConfig
from src.regions.south_africa import SOUTH_AFRICA
from src.regions.united_states import UNITED_STATES

REGIONS: dict[str, RegionalConfig] = {
    SOUTH_AFRICA.code: SOUTH_AFRICA,
    UNITED_STATES.code: UNITED_STATES,
}


class UnknownRegionError(KeyError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown region: {code!r}")


def get_region(code: str) -> RegionalConfig:
    """Case-insensitive lookup. Raises UnknownRegionError for unsupported codes."""
    try:
        return REGIONS[code.strip().upper()]
    except (KeyError, AttributeError):
        raise UnknownRegionError(code) from None


def available_regions() -> list[str]:
    return sorted(REGIONS)
