from __future__ import annotations

from .domain import LOCATION_UK, LOCATION_WORLD

GREETINGS = {
    LOCATION_WORLD: "Hello, World!",
    LOCATION_UK: "Hello, UK!",
}


class GreeterService:
    """Maps a location tag to its canned greeting.

    Unknown tags fall back to the world greeting.
    """

    def greet(self, location: str) -> str:
        return GREETINGS.get(location, GREETINGS[LOCATION_WORLD])
