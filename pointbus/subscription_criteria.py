"""Detailed definition of a single subscription."""
from __future__ import annotations

from enum import Enum

COT_ALL = "All"


def _cot_text(cot: object) -> str:
    if isinstance(cot, Enum):
        return cot.name
    return str(cot)


class SubscriptionCriteria:
    """Subscription on a point ``name`` with the cause of transmission ``cot``.

    ``cot`` is a cause-of-transmission label such as ``"Inf"`` or ``"ReqCon"``;
    ``"All"`` subscribes on every cause.
    """

    __slots__ = ("_name", "_cot", "_dest")

    def __init__(self, name: str, cot: object) -> None:
        self._name = str(name)
        self._cot = cot
        self._dest = self.dest(cot, self._name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def cot(self) -> object:
        return self._cot

    def destination(self) -> str:
        """Destination string in the form ``"Cot:point name"``."""
        return self._dest

    @staticmethod
    def dest(cot: object, name: str) -> str:
        """Build the destination string for ``cot`` and ``name``."""
        text = _cot_text(cot)
        if text == COT_ALL:
            return name
        return f"{text}:{name}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SubscriptionCriteria):
            return NotImplemented
        return (self._name, self._cot, self._dest) == (other._name, other._cot, other._dest)

    def __hash__(self) -> int:
        return hash(self._dest)

    def __repr__(self) -> str:
        return f"SubscriptionCriteria(name={self._name!r}, cot={self._cot!r})"