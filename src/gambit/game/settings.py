"""User-configurable game settings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from gambit.core.enums import Color


@dataclass
class GameSettings:
    """All tunable options for a game."""

    # Loading
    strict_load: bool = False
    save_encoding: str = "utf-8"

    # New game
    white_to_move_on_new_game: bool = True

    # Networked play: the seat this process plays (None = both seats local)
    local_color: Color | None = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> GameSettings:
        """Build settings from a partial mapping, e.g. parsed config data.

        ``local_color`` may be given as ``"white"`` / ``"black"``.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown setting(s): {', '.join(unknown)}")

        kwargs = dict(values)
        color = kwargs.get("local_color")
        if isinstance(color, str):
            try:
                kwargs["local_color"] = Color[color.upper()]
            except KeyError:
                raise ValueError(f"Invalid local_color: {color!r}") from None
        return cls(**kwargs)
