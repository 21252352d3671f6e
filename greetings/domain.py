from __future__ import annotations

from typing import Protocol

LOCATION_WORLD = "world"
LOCATION_UK = "uk"


class Greeter(Protocol):
    def greet(self, location: str) -> str: ...
