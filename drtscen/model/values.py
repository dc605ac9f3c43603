"""Value holders for scenario fields: parsed values together with their original text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


def _is_empty_string(original: Any) -> bool:
    return isinstance(original, str) and len(original) == 0


@dataclass
class JSONBytesFromString:
    """A byte string parsed from a single JSON string."""

    value: bytes = b""
    original: str = ""
    unspecified: bool = False


def json_bytes_empty() -> JSONBytesFromString:
    """An unspecified, empty byte value."""
    return JSONBytesFromString(value=b"", original="", unspecified=True)


@dataclass
class JSONBytesFromTree:
    """A byte string parsed from a JSON string or a (nested) list of strings.

    The original JSON tree is kept as plain Python data: ``str``, ``bool``,
    ``list`` or ``dict``.
    """

    value: bytes = b""
    original: Any = None
    unspecified: bool = False

    def original_empty(self) -> bool:
        """True if the value originates from the empty string."""
        return _is_empty_string(self.original)


def json_bytes_from_tree_values(items: list[JSONBytesFromTree]) -> list[bytes]:
    """Extract the byte values from a list of tree values."""
    return [item.value for item in items]


@dataclass
class JSONBigInt:
    """A parsed arbitrary-precision integer together with its original text."""

    value: int = 0
    original: str = ""
    unspecified: bool = False


def json_big_int_zero() -> JSONBigInt:
    """An unspecified zero value."""
    return JSONBigInt(value=0, original="", unspecified=True)


@dataclass
class JSONUint64:
    """A parsed unsigned 64-bit integer together with its original text."""

    value: int = 0
    original: str = ""
    unspecified: bool = False

    def original_empty(self) -> bool:
        """True if the value originates from the empty string."""
        return len(self.original) == 0


def json_uint64_zero() -> JSONUint64:
    """An unspecified zero value."""
    return JSONUint64(value=0, original="", unspecified=True)


@dataclass
class JSONValueList:
    """A list of byte values, as expressed in JSON."""

    values: list[JSONBytesFromString] = field(default_factory=list)

    def is_unspecified(self) -> bool:
        """True if the list holds no values."""
        return len(self.values) == 0

    def to_values(self) -> list[bytes]:
        """The byte values held in the list."""
        return [item.value for item in self.values]


@dataclass
class JSONCheckBytes:
    """A byte-string condition; "*" accepts any value."""

    value: bytes = b""
    is_star: bool = False
    original: Any = None
    unspecified: bool = False

    def original_empty(self) -> bool:
        """True if the condition originates from the empty string."""
        return _is_empty_string(self.original)

    def is_unspecified(self) -> bool:
        """True if the field was originally unspecified."""
        return self.unspecified

    def check(self, other: bytes) -> bool:
        """True if ``other`` satisfies the condition."""
        if self.is_star:
            return True
        return bytes(self.value or b"") == bytes(other or b"")


def json_check_bytes_unspecified() -> JSONCheckBytes:
    """A condition that expects an empty value and was not written explicitly."""
    return JSONCheckBytes(value=b"", is_star=False, original="", unspecified=True)


def json_check_bytes_star() -> JSONCheckBytes:
    """The explicit "*" condition."""
    return JSONCheckBytes(value=b"", is_star=True, original="*", unspecified=False)


def json_check_bytes_reconstructed(value: bytes, original_string: str) -> JSONCheckBytes:
    """A condition built from a value rather than from JSON source."""
    return JSONCheckBytes(
        value=value, is_star=False, original=original_string, unspecified=False
    )


@dataclass
class JSONCheckBigInt:
    """An integer condition; "*" accepts any value."""

    value: Optional[int] = 0
    is_star: bool = False
    original: str = ""
    unspecified: bool = False

    def is_unspecified(self) -> bool:
        """True if the field was originally unspecified."""
        return self.unspecified

    def check(self, other: int) -> bool:
        """True if ``other`` satisfies the condition."""
        if self.is_star:
            return True
        return self.value == other


def json_check_big_int_unspecified() -> JSONCheckBigInt:
    """An unspecified condition expecting zero."""
    return JSONCheckBigInt(value=0, is_star=False, original="", unspecified=True)


@dataclass
class JSONCheckUint64:
    """An unsigned 64-bit integer condition; "*" accepts any value."""

    value: int = 0
    is_star: bool = False
    original: str = ""
    unspecified: bool = False

    def is_unspecified(self) -> bool:
        """True if the field was originally unspecified."""
        return self.unspecified

    def check(self, other: int) -> bool:
        """True if ``other`` satisfies the condition."""
        if self.is_star:
            return True
        return self.value == other

    def check_bool(self, other: bool) -> bool:
        """Check against a flag: any positive value means true, zero means false."""
        if self.is_star:
            return True
        return (self.value > 0) == other


def json_check_uint64_unspecified() -> JSONCheckUint64:
    """An unspecified condition expecting zero."""
    return JSONCheckUint64(value=0, is_star=False, original="", unspecified=True)


@dataclass
class JSONCheckValueList:
    """A list of byte conditions, as expressed in JSON."""

    values: list[JSONCheckBytes] = field(default_factory=list)
    is_star: bool = False
    unspecified: bool = False

    def is_unspecified(self) -> bool:
        """True if the field was originally unspecified."""
        return self.unspecified

    def check_list(self, other: list[bytes]) -> bool:
        """True if every value in ``other`` satisfies the matching condition."""
        if self.is_star:
            return True
        if len(self.values) != len(other):
            return False
        return all(expected.check(actual) for expected, actual in zip(self.values, other))


def json_check_value_list_unspecified() -> JSONCheckValueList:
    """An unspecified, empty list of conditions."""
    return JSONCheckValueList(values=[], is_star=False, unspecified=True)


def json_check_value_list_star() -> JSONCheckValueList:
    """The "*" list condition."""
    return JSONCheckValueList(values=[], is_star=True, unspecified=False)