"""Scenario model of transactions, their expected results and gas schedules."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from drtscen.model.dcdt import DCDTTxData
from drtscen.model.values import (
    JSONBigInt,
    JSONBytesFromString,
    JSONBytesFromTree,
    JSONCheckBigInt,
    JSONCheckBytes,
    JSONCheckUint64,
    JSONCheckValueList,
    JSONUint64,
    json_big_int_zero,
    json_bytes_empty,
    json_check_big_int_unspecified,
    json_check_bytes_unspecified,
    json_check_uint64_unspecified,
    json_uint64_zero,
)


class GasSchedule(enum.IntEnum):
    """The gas model a scenario runs with."""

    DEFAULT = 0
    DUMMY = 1
    V3 = 2
    V4 = 3


class TransactionType(enum.IntEnum):
    """The kind of simulated transaction."""

    SC_DEPLOY = 0
    SC_CALL = 1
    SC_QUERY = 2
    TRANSFER = 3
    VALIDATOR_REWARD = 4
    SC_UPGRADE = 5

    def has_sender(self) -> bool:
        """True if the transaction has a `from` field."""
        return self not in (TransactionType.SC_QUERY, TransactionType.VALIDATOR_REWARD)

    def has_receiver(self) -> bool:
        """True if the transaction has a receiver."""
        return self is not TransactionType.SC_DEPLOY

    def is_smart_contract_tx(self) -> bool:
        """True if the transaction allows an `expect` field."""
        return self in (
            TransactionType.SC_DEPLOY,
            TransactionType.SC_UPGRADE,
            TransactionType.SC_CALL,
            TransactionType.SC_QUERY,
        )

    def has_value(self) -> bool:
        """True if the transaction allows a `value` field."""
        return self is not TransactionType.SC_QUERY

    def has_dcdt(self) -> bool:
        """True if the transaction allows token transfers."""
        return self in (TransactionType.SC_CALL, TransactionType.TRANSFER)

    def has_function(self) -> bool:
        """True if the transaction allows a `function` field."""
        return self in (TransactionType.SC_CALL, TransactionType.SC_QUERY)

    def has_gas_limit(self) -> bool:
        """True if the transaction has a `gasLimit` field."""
        return self in (
            TransactionType.SC_DEPLOY,
            TransactionType.SC_UPGRADE,
            TransactionType.SC_CALL,
            TransactionType.TRANSFER,
        )

    def has_gas_price(self) -> bool:
        """True if the transaction has a `gasPrice` field."""
        return self.has_gas_limit()


@dataclass
class Transaction:
    """A transaction as described in a scenario."""

    type: TransactionType = TransactionType.SC_DEPLOY
    nonce: JSONUint64 = field(default_factory=json_uint64_zero)
    rewa_value: JSONBigInt = field(default_factory=json_big_int_zero)
    dcdt_value: list[DCDTTxData] = field(default_factory=list)
    sender: JSONBytesFromString = field(default_factory=json_bytes_empty)
    receiver: JSONBytesFromString = field(default_factory=json_bytes_empty)
    function: str = ""
    code: JSONBytesFromString = field(default_factory=json_bytes_empty)
    code_metadata: JSONBytesFromString = field(default_factory=json_bytes_empty)
    arguments: list[JSONBytesFromTree] = field(default_factory=list)
    gas_price: JSONUint64 = field(default_factory=json_uint64_zero)
    gas_limit: JSONUint64 = field(default_factory=json_uint64_zero)


@dataclass
class LogEntry:
    """An expected log entry of a transaction."""

    address: JSONCheckBytes = field(default_factory=JSONCheckBytes)
    endpoint: JSONCheckBytes = field(default_factory=JSONCheckBytes)
    topics: JSONCheckValueList = field(default_factory=JSONCheckValueList)
    data: JSONCheckValueList = field(default_factory=JSONCheckValueList)


@dataclass
class LogList:
    """The expected logs of a transaction."""

    is_unspecified: bool = False
    is_star: bool = False
    more_allowed_at_end: bool = False
    entries: list[LogEntry] = field(default_factory=list)


def _unspecified_logs() -> LogList:
    return LogList(is_unspecified=True, is_star=True)


@dataclass
class TransactionResult:
    """The expected result of a transaction."""

    out: JSONCheckValueList = field(default_factory=JSONCheckValueList)
    status: JSONCheckBigInt = field(default_factory=json_check_big_int_unspecified)
    message: JSONCheckBytes = field(default_factory=json_check_bytes_unspecified)
    gas: JSONCheckUint64 = field(default_factory=json_check_uint64_unspecified)
    refund: JSONCheckBigInt = field(default_factory=json_check_big_int_unspecified)
    logs: LogList = field(default_factory=_unspecified_logs)