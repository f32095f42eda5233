"""
Domain package for passfields.

Exports the bundled record models and their kind declarations. Importing this
package registers the kinds so they can be resolved by name.
"""

from passfields.domain.kinds import LOCATION, SEAT
from passfields.domain.models import Location, Seat

__all__ = [
    "Location",
    "Seat",
    "LOCATION",
    "SEAT",
]
