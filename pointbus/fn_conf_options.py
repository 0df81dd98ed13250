"""Optional parameters of a function configuration keyword."""
from __future__ import annotations

import hashlib
import logging
import re
from dataclasses import dataclass
from typing import Optional

log = logging.getLogger(__name__)

_RE_DEFAULT = re.compile(r"[ \t]?default[ \t](\S+)")
_RE_STATUS = re.compile(r"[ \t]?status[ \t](\S+)")


def _stable_hash(value: object) -> int:
    digest = hashlib.blake2b(repr(value).encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, "little")


@dataclass(frozen=True)
class FnConfOptions:
    """Options such as ``default 0.1`` and ``status ok``."""

    default: Optional[str] = None
    status: Optional[str] = None

    @classmethod
    def from_str(cls, text: str) -> FnConfOptions:
        """Parse options from text; missing options stay ``None``."""
        log.debug("FnConfOptions.from_str | input: %s", text)
        default_match = _RE_DEFAULT.search(text)
        status_match = _RE_STATUS.search(text)
        return cls(
            default=default_match.group(1) if default_match else None,
            status=status_match.group(1) if status_match else None,
        )

    def hash(self) -> str:
        """Return a key identifying this unique set of options."""
        return f"default:{_stable_hash(self.default)}-status:{_stable_hash(self.status)}"