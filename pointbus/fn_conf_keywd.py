"""Keywords of function configuration: ``[input] kind [type] [data] [options]``."""
from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass, field

from pointbus.fn_conf_options import FnConfOptions

log = logging.getLogger(__name__)

_RE_KEYWD = re.compile(
    r"""[ \t]*(?:(\w+)[ \t]+)*(?:(let|fn|const|point){1}(?:[ \t](bool|int|real|double|string|any))*(?:$|(?:[ \t]+['"]*([\w/.]+)['"]*)))(?:[ \t](.+))?""",
    re.MULTILINE,
)


class FnConfKeywdError(ValueError):
    """Raised when a keyword cannot be parsed."""


class FnConfPointType(enum.Enum):
    """Type of a point or constant in the configuration."""

    Bool = "bool"
    Int = "int"
    Real = "real"
    Double = "double"
    String = "string"
    Any = "any"
    Unknown = "unknown"

    @classmethod
    def default(cls) -> FnConfPointType:
        return cls.Unknown


class FnConfKindName(enum.IntEnum):
    """Kind of a configuration entry; values combine into bit masks."""

    Fn = 1
    Var = 2
    Const = 4
    Point = 6

    def __or__(self, other: int) -> int:
        return int(self) | int(other)

    def __ror__(self, other: int) -> int:
        return int(other) | int(self)


_KINDS = {
    "fn": FnConfKindName.Fn,
    "let": FnConfKindName.Var,
    "const": FnConfKindName.Const,
    "point": FnConfKindName.Point,
}

_TYPES = {member.value: member for member in FnConfPointType if member is not FnConfPointType.Unknown}


@dataclass
class FnConfKeywdValue:
    """Parsed contents of a keyword."""

    input: str
    type_: FnConfPointType
    data: str
    options: FnConfOptions = field(default_factory=FnConfOptions)


@dataclass
class FnConfKeywd:
    """A parsed keyword: its kind and its contents."""

    kind: FnConfKindName
    value: FnConfKeywdValue

    @classmethod
    def from_str(cls, text: str) -> FnConfKeywd:
        """Parse a keyword such as ``input1 point real '/path/Point.Name' default 0.1``."""
        log.debug("FnConfKeywd.from_str | input: %s", text)
        match = _RE_KEYWD.search(text)
        if match is None:
            raise FnConfKeywdError(f"Unknown keyword '{text}'")
        input_name = match.group(1) or ""
        type_text = match.group(3)
        if type_text is None:
            type_ = FnConfPointType.Unknown
        else:
            type_ = _TYPES.get(type_text.lower(), FnConfPointType.Unknown)
            if type_ is FnConfPointType.Unknown:
                log.warning("FnConfKeywd.from_str | Error reading type of keyword '%s'", input_name)
        data = match.group(4)
        if data is None:
            if not input_name:
                raise FnConfKeywdError(f"Error reading data of keyword '{input_name}'")
            data = ""
        options_text = match.group(5)
        options = FnConfOptions.from_str(options_text) if options_text is not None else FnConfOptions()
        kind = _KINDS.get(match.group(2) or "")
        if kind is None:
            raise FnConfKeywdError(f"Unknown keyword '{input_name}'")
        return cls(kind, FnConfKeywdValue(input_name, type_, data, options))

    def input(self) -> str:
        return self.value.input

    def type_(self) -> FnConfPointType:
        return self.value.type_

    def data(self) -> str:
        return self.value.data