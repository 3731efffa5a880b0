"""Game settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar

from chessgrid.core.enums import PieceType

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {raw!r}")


@dataclass(frozen=True)
class GameSettings:
    """Tunables shared by the lobby, game state and board UI.

    Args:
        min_name_length: Shortest accepted display name (after trimming).
        max_name_length: Longest accepted display name (after trimming).
        flip_for_black: Draw the board from black's side for black players.
    """

    min_name_length: int = 2
    max_name_length: int = 20
    flip_for_black: bool = True

    # Pawns reaching the last row always become this piece; not configurable.
    promotion_piece: ClassVar[PieceType] = PieceType.QUEEN

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GameSettings:
        """Read ``CHESSGRID_*`` overrides from the environment."""
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        for field_name in ("min_name_length", "max_name_length"):
            var = f"CHESSGRID_{field_name.upper()}"
            raw_len = env.get(var)
            if raw_len is None:
                continue
            try:
                kwargs[field_name] = int(raw_len)
            except ValueError:
                raise ValueError(f"Invalid {var}: {raw_len!r}") from None

        raw_flip = env.get("CHESSGRID_FLIP_FOR_BLACK")
        if raw_flip is not None:
            kwargs["flip_for_black"] = _parse_bool("CHESSGRID_FLIP_FOR_BLACK", raw_flip)

        return cls(**kwargs)  # type: ignore[arg-type]
