import pytest

from floorplan_engine.models import Apartment, ApartmentMeta, Bounds, Opening, Room, Wall


def _room(room_id, x, y, w, h, **kwargs) -> Room:
    return Room(
        id=room_id,
        name=kwargs.pop("name", room_id),
        type=kwargs.pop("type", "bedroom"),
        bounds=Bounds(x=x, y=y, width=w, height=h),
        **kwargs,
    )


@pytest.fixture
def make_room():
    return _room


@pytest.fixture
def two_rooms() -> Apartment:
    """A 3x4 and a 2x4 room side by side."""
    return Apartment(
        meta=ApartmentMeta(name="Test Flat"),
        rooms=[
            _room("A", 0, 0, 3, 4),
            _room("B", 3, 0, 2, 4, type="kitchen"),
        ],
    )


@pytest.fixture
def flat() -> Apartment:
    return Apartment(
        meta=ApartmentMeta(name="Sample Flat", floor=2),
        rooms=[
            _room(
                "living", 0, 0, 5, 4, name="Living Room", type="living",
                walls=[
                    Wall(side="north", type="exterior"),
                    Wall(side="west", type="building"),
                    Wall(side="east", type="interior"),
                    Wall(side="south", type="none"),
                ],
                openings=[
                    Opening(wall="north", type="window", position=1, width=1.5),
                    Opening(wall="east", type="door", position=0.5, width=0.9),
                ],
            ),
            _room(
                "bed", 5, 0, 3.5, 4, name="Bedroom", type="bedroom",
                walls=[Wall(side="north", type="exterior")],
            ),
            _room("bath", 0, 4, 2, 2.5, name="Bathroom", type="bathroom"),
        ],
    )
