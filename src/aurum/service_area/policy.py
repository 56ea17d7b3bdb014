"""Region rules for pincodes, applied by callers before they touch the registry."""

import re

from aurum import config
from aurum.errors import InvalidPincode, InvalidRegion
from aurum.service_area.registry import list_service_areas

_PINCODE = re.compile(r"^\d{6}$")


class RegionPolicy:
    """Maps each served region to the pincode prefix it owns (e.g. Pune → 411)."""

    def __init__(self, regions=None):
        self.regions = dict(regions) if regions is not None else config.service_regions()

    def prefix_for(self, region):
        try:
            return self.regions[region]
        except KeyError:
            raise InvalidPincode(None, f"Unknown region {region!r}") from None

    def region_of(self, code):
        return next((region for region, prefix in self.regions.items() if code.startswith(prefix)), None)

    def validate(self, code, region=None):
        if not code or not _PINCODE.match(code):
            raise InvalidPincode(code, "Pincode must be exactly 6 digits")

        if region is not None:
            prefix = self.prefix_for(region)
            if not code.startswith(prefix):
                raise InvalidRegion(code, region, prefix)
        return code

    def codes_in(self, region):
        """Registered codes belonging to ``region``."""
        prefix = self.prefix_for(region)
        return [code for code in list_service_areas() if code.startswith(prefix)]
