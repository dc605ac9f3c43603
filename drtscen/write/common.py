"""Conversion of scenario values into plain ordered JSON data."""

from __future__ import annotations

import json
from typing import Any

from drtscen.model.transaction import LogEntry, LogList, TransactionResult
from drtscen.model.values import (
    JSONBigInt,
    JSONBytesFromString,
    JSONBytesFromTree,
    JSONCheckBigInt,
    JSONCheckBytes,
    JSONCheckUint64,
    JSONCheckValueList,
    JSONUint64,
    JSONValueList,
)


def result_to_json(result: TransactionResult) -> dict[str, Any]:
    """The JSON form of an expected transaction result."""
    out: dict[str, Any] = {"out": check_value_list_to_json(result.out)}
    if not result.status.is_unspecified():
        out["status"] = check_big_int_to_json(result.status)
    if not result.message.is_unspecified():
        out["message"] = check_bytes_to_json(result.message)
    if not result.logs.is_unspecified:
        out["logs"] = "*" if result.logs.is_star else logs_to_json(result.logs)
    if not result.gas.is_unspecified():
        out["gas"] = check_uint64_to_json(result.gas)
    if not result.refund.is_unspecified():
        out["refund"] = check_big_int_to_json(result.refund)
    return out


def log_to_string(log_entry: LogEntry) -> str:
    """A JSON text of a log entry, for debugging."""
    return json.dumps(log_to_json(log_entry), indent=4)


def log_to_json(log_entry: LogEntry) -> dict[str, Any]:
    """The JSON form of an expected log entry."""
    return {
        "address": check_bytes_to_json(log_entry.address),
        "endpoint": check_bytes_to_json(log_entry.endpoint),
        "topics": check_value_list_to_json(log_entry.topics),
        "data": check_value_list_to_json(log_entry.data),
    }


def logs_to_json(log_list: LogList) -> list[Any]:
    """The JSON form of a list of expected logs."""
    result: list[Any] = [log_to_json(entry) for entry in log_list.entries]
    if log_list.more_allowed_at_end:
        result.append("+")
    return result


def big_int_to_json(value: JSONBigInt) -> str:
    """The original text of an integer."""
    return value.original


def check_big_int_to_json(value: JSONCheckBigInt) -> str:
    """The original text of an integer check."""
    return value.original


def bytes_from_string_to_string(value: JSONBytesFromString) -> str:
    """The original text, or the hex form of the bytes if there is none."""
    if not value.original and value.value:
        return value.value.hex()
    return value.original


def bytes_from_string_to_json(value: JSONBytesFromString) -> str:
    """The JSON form of a byte value parsed from a string."""
    return bytes_from_string_to_string(value)


def bytes_from_tree_to_json(value: JSONBytesFromTree) -> Any:
    """The original JSON tree, or the hex form if it was the empty string."""
    if value.original_empty():
        return value.value.hex()
    return value.original


def check_bytes_to_json(value: JSONCheckBytes) -> Any:
    """The original JSON of a byte check, or hex if it had none."""
    if value.original_empty() and value.value:
        return value.value.hex()
    return value.original


def value_list_to_json(value_list: JSONValueList) -> list[str]:
    """The JSON form of a list of byte values."""
    return [bytes_from_string_to_json(item) for item in value_list.values]


def check_value_list_to_json(value_list: JSONCheckValueList) -> Any:
    """The JSON form of a list of byte checks; "*" if any list is allowed."""
    if value_list.is_star:
        return "*"
    return [check_bytes_to_json(item) for item in value_list.values]


def uint64_to_json(value: JSONUint64) -> str:
    """The original text of an unsigned integer."""
    return value.original


def check_uint64_to_json(value: JSONCheckUint64) -> str:
    """The original text of an unsigned integer check."""
    return value.original