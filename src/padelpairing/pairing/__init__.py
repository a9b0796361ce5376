"""Pairing formats for Padel Pairing.

The set of formats is closed: a session picks one of them once, at setup,
through :func:`create_pairing_format`.
"""

# Padel Pairing
# Copyright (C) 2025  Padel Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import random
from typing import Dict, Optional, Type

from padelpairing.constants import (
    FORMAT_AMERICANO,
    FORMAT_MATSICANO,
    FORMAT_MEXICANO,
)
from padelpairing.exceptions import UnsupportedFormatException
from padelpairing.pairing.americano import (
    AmericanoFormat,
    available_partnerships,
    create_americano_matches,
)
from padelpairing.pairing.base import PairingFormat, validate_match_structure
from padelpairing.pairing.matsicano import MatsicanoFormat
from padelpairing.pairing.mexicano import (
    MexicanoFormat,
    create_mexicano_matches,
    create_random_matches,
    create_ranked_matches,
    rank_order,
)
from padelpairing.utils.validation import validate_format_name

PAIRING_FORMATS: Dict[str, Type[PairingFormat]] = {
    FORMAT_AMERICANO: AmericanoFormat,
    FORMAT_MEXICANO: MexicanoFormat,
    FORMAT_MATSICANO: MatsicanoFormat,
}


def create_pairing_format(
    name: str, player_count: int, rng: Optional[random.Random] = None
) -> PairingFormat:
    """Instantiate the pairing format called ``name``.

    Raises:
        UnsupportedFormatException: If the name is not a known format
    """
    result = validate_format_name(name)
    if not result.is_valid:
        raise UnsupportedFormatException(result.error_message)
    return PAIRING_FORMATS[result.sanitized_value](player_count, rng)


__all__ = [
    "PAIRING_FORMATS",
    "PairingFormat",
    "AmericanoFormat",
    "MexicanoFormat",
    "MatsicanoFormat",
    "available_partnerships",
    "create_americano_matches",
    "create_mexicano_matches",
    "create_random_matches",
    "create_ranked_matches",
    "create_pairing_format",
    "rank_order",
    "validate_match_structure",
]
