"""Query errors and panic handling for GraphQL execution."""

from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

__all__ = [
    "Location",
    "QueryError",
    "PanicHandler",
    "DefaultPanicHandler",
    "errorf",
]

_VERB = re.compile(r"%([-+# 0]*)(\d+)?(?:\.(\d+))?([a-zA-Z%])")


def _plain(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _format_arg(verb: str, value: Any, precision: str | None) -> str:
    if verb in ("v", "s"):
        return _plain(value)
    if verb == "d" and isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if verb == "f" and isinstance(value, (int, float)) and not isinstance(value, bool):
        digits = int(precision) if precision is not None else 6
        return f"{float(value):.{digits}f}"
    if verb == "q":
        return json.dumps(_plain(value), ensure_ascii=False)
    if verb == "t" and isinstance(value, bool):
        return _plain(value)
    if verb == "T":
        return type(value).__name__
    if verb in ("x", "X"):
        if isinstance(value, int) and not isinstance(value, bool):
            text = format(value, "x")
        elif isinstance(value, (bytes, bytearray)):
            text = bytes(value).hex()
        else:
            text = str(value).encode().hex()
        return text.upper() if verb == "X" else text
    return f"%!{verb}({type(value).__name__}={_plain(value)})"


def _sprintf(template: str, args: tuple[Any, ...]) -> str:
    remaining = list(args)

    def replace(match: re.Match[str]) -> str:
        flags, width, precision, verb = match.groups()
        if verb == "%":
            return "%"
        if not remaining:
            return f"%!{verb}(MISSING)"
        text = _format_arg(verb, remaining.pop(0), precision)
        if width:
            size = int(width)
            if "-" in flags:
                text = text.ljust(size)
            elif "0" in flags and verb in ("d", "f"):
                text = text.zfill(size)
            else:
                text = text.rjust(size)
        return text

    result = _VERB.sub(replace, template)
    if remaining:
        extra = ", ".join(f"{type(v).__name__}={_plain(v)}" for v in remaining)
        result += f"%!(EXTRA {extra})"
    return result


@dataclass(frozen=True)
class Location:
    """A line and column position in a query document."""

    line: int
    column: int

    def before(self, other: Location) -> bool:
        """Return True if this location comes before ``other``."""
        return (self.line, self.column) < (other.line, other.column)

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}


class QueryError(Exception):
    """An error reported while parsing, validating or executing a query."""

    def __init__(
        self,
        message: str = "",
        *,
        locations: list[Location] | None = None,
        path: list[Any] | None = None,
        rule: str = "",
        resolver_error: BaseException | None = None,
        extensions: dict[str, Any] | None = None,
        err: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.locations = list(locations or [])
        self.path = list(path or [])
        self.rule = rule
        self.resolver_error = resolver_error
        self.extensions = extensions
        self.err = err
        if err is not None:
            self.__cause__ = err

    def __str__(self) -> str:
        text = f"graphql: {self.message}"
        for loc in self.locations:
            text += f" (line {loc.line}, column {loc.column})"
        return text

    def __repr__(self) -> str:
        return (
            f"QueryError(message={self.message!r}, locations={self.locations!r}, "
            f"path={self.path!r}, rule={self.rule!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form, omitting empty optional members."""
        data: dict[str, Any] = {"message": self.message}
        if self.locations:
            data["locations"] = [loc.to_dict() for loc in self.locations]
        if self.path:
            data["path"] = list(self.path)
        if self.extensions:
            data["extensions"] = dict(self.extensions)
        return data


def errorf(format: str, *args: Any) -> QueryError:
    """Build a QueryError from a format string, wrapping a trailing exception."""
    cause = args[-1] if args and isinstance(args[-1], BaseException) else None
    return QueryError(_sprintf(format, args), err=cause)


class PanicHandler(ABC):
    """Turns an unexpected failure during execution into a QueryError."""

    @abstractmethod
    def make_panic_error(self, ctx: Any, value: Any) -> QueryError:
        """Create the error reported for ``value``."""


class DefaultPanicHandler(PanicHandler):
    """The default handler: reports the failure value in the message."""

    def make_panic_error(self, ctx: Any, value: Any) -> QueryError:
        return errorf("panic occurred: %v", value)