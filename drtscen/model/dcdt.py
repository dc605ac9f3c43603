"""Scenario model of token (DCDT) holdings, transfers and checks."""

from __future__ import annotations

from dataclasses import dataclass, field

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
    json_check_big_int_unspecified,
    json_check_bytes_unspecified,
    json_check_uint64_unspecified,
    json_check_value_list_unspecified,
    json_uint64_zero,
)


@dataclass
class DCDTTxData:
    """A token transfer within a transaction."""

    token_identifier: JSONBytesFromString = field(default_factory=JSONBytesFromString)
    nonce: JSONUint64 = field(default_factory=JSONUint64)
    value: JSONBigInt = field(default_factory=JSONBigInt)


@dataclass
class DCDTInstance:
    """One instance of a token (NFT/SFT), with its own nonce."""

    nonce: JSONUint64 = field(default_factory=JSONUint64)
    balance: JSONBigInt = field(default_factory=JSONBigInt)
    creator: JSONBytesFromString = field(default_factory=JSONBytesFromString)
    royalties: JSONUint64 = field(default_factory=JSONUint64)
    hash: JSONBytesFromString = field(default_factory=JSONBytesFromString)
    uris: JSONValueList = field(default_factory=JSONValueList)
    attributes: JSONBytesFromTree = field(default_factory=JSONBytesFromTree)


@dataclass
class DCDTData:
    """A token held by an account, with all its instances."""

    token_identifier: JSONBytesFromString = field(default_factory=JSONBytesFromString)
    instances: list[DCDTInstance] = field(default_factory=list)
    last_nonce: JSONUint64 = field(default_factory=JSONUint64)
    roles: list[str] = field(default_factory=list)
    frozen: JSONUint64 = field(default_factory=JSONUint64)


@dataclass
class CheckDCDTInstance:
    """Expectations on one token instance."""

    nonce: JSONUint64 = field(default_factory=JSONUint64)
    balance: JSONCheckBigInt = field(default_factory=JSONCheckBigInt)
    creator: JSONCheckBytes = field(default_factory=JSONCheckBytes)
    royalties: JSONCheckUint64 = field(default_factory=JSONCheckUint64)
    hash: JSONCheckBytes = field(default_factory=JSONCheckBytes)
    uris: JSONCheckValueList = field(default_factory=JSONCheckValueList)
    attributes: JSONCheckBytes = field(default_factory=JSONCheckBytes)


def new_check_dcdt_instance() -> CheckDCDTInstance:
    """An instance check with every field unspecified."""
    return CheckDCDTInstance(
        nonce=json_uint64_zero(),
        balance=json_check_big_int_unspecified(),
        creator=json_check_bytes_unspecified(),
        royalties=json_check_uint64_unspecified(),
        hash=json_check_bytes_unspecified(),
        uris=json_check_value_list_unspecified(),
        attributes=json_check_bytes_unspecified(),
    )


@dataclass
class CheckDCDTData:
    """Expectations on a token held by an account."""

    token_identifier: JSONBytesFromString = field(default_factory=JSONBytesFromString)
    instances: list[CheckDCDTInstance] = field(default_factory=list)
    last_nonce: JSONCheckUint64 = field(default_factory=JSONCheckUint64)
    roles: list[str] = field(default_factory=list)
    frozen: JSONCheckUint64 = field(default_factory=JSONCheckUint64)