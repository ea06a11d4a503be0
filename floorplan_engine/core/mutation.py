"""In-place edits of room bounds.

Both operations write straight into the caller's document and return the
same instance. An unknown room id leaves the document untouched.
"""

from __future__ import annotations
import logging

from floorplan_engine.models import Apartment
from floorplan_engine.core.query import find_room

logger = logging.getLogger(__name__)


def move_room(apartment: Apartment, room_id: str, dx: float, dy: float) -> Apartment:
    room = find_room(apartment, room_id)
    if room is None:
        logger.debug("move_room: no room with id %r", room_id)
        return apartment

    room.bounds.x += dx
    room.bounds.y += dy
    logger.debug("Moved room %s by (%s, %s)", room_id, dx, dy)
    return apartment


def resize_room(
    apartment: Apartment, room_id: str, new_width: float, new_height: float,
) -> Apartment:
    # No positivity check; a bad size shows up on the next validation pass
    room = find_room(apartment, room_id)
    if room is None:
        logger.debug("resize_room: no room with id %r", room_id)
        return apartment

    room.bounds.width = new_width
    room.bounds.height = new_height
    logger.debug("Resized room %s to %s x %s", room_id, new_width, new_height)
    return apartment
