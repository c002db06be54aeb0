"""Append-only list of output blocks."""

from __future__ import annotations

from collections.abc import Iterable

from . import constants


class BlockBuilder:
    """Collects non-empty text blocks, joined by a blank line on ``build``.

    ``merge_into_last`` is the only way to touch an existing block: it
    continues the last paragraph instead of opening a new one.
    """

    def __init__(self) -> None:
        self._blocks: list[str] = []

    def __len__(self) -> int:
        return len(self._blocks)

    def __bool__(self) -> bool:
        return bool(self._blocks)

    @property
    def blocks(self) -> tuple[str, ...]:
        return tuple(self._blocks)

    def append(self, text: str) -> None:
        if text:
            self._blocks.append(text)

    def extend(self, texts: Iterable[str]) -> None:
        for text in texts:
            self.append(text)

    def merge_into_last(self, text: str) -> None:
        """Append ``text`` to the last block with one space, or start a block."""
        if not text:
            return
        if not self._blocks:
            self._blocks.append(text)
            return
        self._blocks[-1] = f"{self._blocks[-1]} {text}"

    def build(self, separator: str = constants.BLOCK_SEPARATOR) -> str:
        return separator.join(self._blocks)
