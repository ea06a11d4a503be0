"""Floor-plan document models — apartment, rooms, walls, openings."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict

from .geometry import Bounds


class WallSide(str, Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


class WallType(str, Enum):
    BUILDING = "building"
    EXTERIOR = "exterior"
    INTERIOR = "interior"
    NONE = "none"


VALID_SIDES = {side.value for side in WallSide}


def is_horizontal_side(side: str) -> bool:
    """North/south walls run along the room width, east/west along its height."""
    return side in (WallSide.NORTH, WallSide.SOUTH)


class Wall(BaseModel):
    """Construction type of one room edge."""
    side: WallSide
    type: WallType


class Opening(BaseModel):
    """A door or window cut into one of the room's walls."""
    wall: str           # Kept as free text so invalid sides can be reported
    type: str           # door | window | ...
    position: float     # Offset along the wall where the opening begins
    width: float


class Room(BaseModel):
    """A rectangular room. `id` and `bounds` may be absent in raw documents."""
    id: str | None = None
    name: str = ""
    type: str = ""
    bounds: Bounds | None = None
    walls: list[Wall] = []
    openings: list[Opening] = []


class ApartmentMeta(BaseModel):
    """Document metadata; unknown keys are preserved."""
    model_config = ConfigDict(extra="allow")

    name: str = ""


class Apartment(BaseModel):
    """Root document: metadata plus an ordered collection of rooms."""
    meta: ApartmentMeta | None = None
    rooms: list[Room] = []
