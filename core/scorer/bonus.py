#!/usr/bin/env python3
"""
Geo Bonus - Flat bonus for African-region candidates on visa-sponsoring jobs.

The bonus is added before clamping, so it is the only contribution that
can push the raw sum past 100.
"""

from typing import Optional
import logging

logger = logging.getLogger(__name__)

DEFAULT_GEO_BONUS = 10

AFRICAN_LOCATIONS = frozenset({
    # Countries
    'ghana', 'nigeria', 'kenya', 'south africa', 'egypt', 'ethiopia',
    'tanzania', 'uganda', 'rwanda', 'senegal', "cote d'ivoire", 'ivory coast',
    'cameroon', 'morocco', 'tunisia', 'algeria', 'zambia', 'zimbabwe',
    'botswana', 'namibia', 'malawi', 'mozambique', 'angola', 'sierra leone',
    'liberia', 'gambia', 'togo', 'benin', 'burkina faso', 'mali', 'niger',
    # Cities
    'accra', 'kumasi', 'tamale', 'takoradi', 'lagos', 'abuja', 'ibadan',
    'port harcourt', 'nairobi', 'mombasa', 'johannesburg', 'cape town',
    'durban', 'pretoria', 'cairo', 'alexandria', 'addis ababa',
    'dar es salaam', 'kampala', 'kigali', 'dakar', 'abidjan', 'douala',
    'casablanca', 'tunis', 'lusaka', 'harare', 'gaborone', 'windhoek',
    'freetown', 'monrovia', 'lome', 'cotonou',
})


# Plain substring match: same-named places elsewhere ("Alexandria, VA") also count.
def is_african_location(location: Optional[str]) -> bool:
    text = (location or '').lower()
    return any(name in text for name in AFRICAN_LOCATIONS)


def calculate_geo_bonus(
    user_location: Optional[str],
    visa_sponsorship: Optional[bool],
    bonus: int = DEFAULT_GEO_BONUS
) -> int:
    """Return the bonus when the user is in Africa and the job sponsors visas, else 0."""
    if visa_sponsorship and is_african_location(user_location):
        return bonus
    return 0
