"""Scenario model: accounts, account checks, steps and the scenario itself."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from typing import Optional

from drtscen.model.dcdt import CheckDCDTData, DCDTData
from drtscen.model.transaction import GasSchedule, Transaction, TransactionResult, TransactionType
from drtscen.model.values import (
    JSONBigInt,
    JSONBytesFromString,
    JSONBytesFromTree,
    JSONCheckBigInt,
    JSONCheckBytes,
    JSONCheckUint64,
    JSONUint64,
    JSONValueList,
    json_big_int_zero,
    json_bytes_empty,
    json_check_big_int_unspecified,
    json_check_bytes_unspecified,
    json_check_uint64_unspecified,
    json_uint64_zero,
)

STEP_NAME_EXTERNAL_STEPS = "externalSteps"
STEP_NAME_SET_STATE = "setState"
STEP_NAME_CHECK_STATE = "checkState"
STEP_NAME_DUMP_STATE = "dumpState"
STEP_NAME_SC_CALL = "scCall"
STEP_NAME_SC_DEPLOY = "scDeploy"
STEP_NAME_SC_UPGRADE = "scUpgrade"
STEP_NAME_SC_QUERY = "scQuery"
STEP_NAME_TRANSFER = "transfer"
STEP_NAME_VALIDATOR_REWARD = "validatorReward"

_TX_STEP_NAMES = {
    TransactionType.SC_CALL: STEP_NAME_SC_CALL,
    TransactionType.SC_DEPLOY: STEP_NAME_SC_DEPLOY,
    TransactionType.SC_UPGRADE: STEP_NAME_SC_UPGRADE,
    TransactionType.SC_QUERY: STEP_NAME_SC_QUERY,
    TransactionType.TRANSFER: STEP_NAME_TRANSFER,
    TransactionType.VALIDATOR_REWARD: STEP_NAME_VALIDATOR_REWARD,
}


@dataclass
class StorageKeyValuePair:
    """One entry of an account's storage."""

    key: JSONBytesFromString = field(default_factory=JSONBytesFromString)
    value: JSONBytesFromTree = field(default_factory=JSONBytesFromTree)


@dataclass
class Account:
    """An account as set up by a scenario."""

    address: JSONBytesFromString = field(default_factory=JSONBytesFromString)
    shard: JSONUint64 = field(default_factory=json_uint64_zero)
    is_smart_contract: bool = False
    comment: str = ""
    nonce: JSONUint64 = field(default_factory=json_uint64_zero)
    balance: JSONBigInt = field(default_factory=json_big_int_zero)
    username: JSONBytesFromString = field(default_factory=json_bytes_empty)
    storage: list[StorageKeyValuePair] = field(default_factory=list)
    code: JSONBytesFromString = field(default_factory=json_bytes_empty)
    code_metadata: JSONBytesFromString = field(default_factory=json_bytes_empty)
    owner: JSONBytesFromString = field(default_factory=json_bytes_empty)
    async_call_data: str = ""
    dcdt_data: list[DCDTData] = field(default_factory=list)
    update: bool = False
    developer_reward: JSONBigInt = field(default_factory=json_big_int_zero)


@dataclass
class CheckStorageKeyValuePair:
    """An expectation on a single storage entry."""

    key: JSONBytesFromString = field(default_factory=JSONBytesFromString)
    check_value: JSONCheckBytes = field(default_factory=JSONCheckBytes)


@dataclass
class CheckAccount:
    """Expectations on an account."""

    address: JSONBytesFromString = field(default_factory=JSONBytesFromString)
    comment: str = ""
    nonce: JSONCheckUint64 = field(default_factory=json_check_uint64_unspecified)
    balance: JSONCheckBigInt = field(default_factory=json_check_big_int_unspecified)
    username: JSONCheckBytes = field(default_factory=json_check_bytes_unspecified)
    explicit_storage: bool = False
    ignore_storage: bool = True
    more_storage_allowed: bool = False
    check_storage: list[CheckStorageKeyValuePair] = field(default_factory=list)
    code: JSONCheckBytes = field(default_factory=json_check_bytes_unspecified)
    code_metadata: JSONCheckBytes = field(default_factory=json_check_bytes_unspecified)
    owner: JSONCheckBytes = field(default_factory=json_check_bytes_unspecified)
    async_call_data: JSONCheckBytes = field(default_factory=json_check_bytes_unspecified)
    check_dcdt_data: list[CheckDCDTData] = field(default_factory=list)
    ignore_dcdt: bool = False
    more_dcdt_tokens_allowed: bool = False
    developer_reward: JSONCheckBigInt = field(default_factory=json_check_big_int_unspecified)


@dataclass
class CheckAccounts:
    """Expectations on the set of accounts."""

    accounts: list[CheckAccount] = field(default_factory=list)
    more_accounts_allowed: bool = False


def find_check_account(accounts: list[CheckAccount], address: bytes) -> Optional[CheckAccount]:
    """The first check account with the given address, or None."""
    return next((acct for acct in accounts if acct.address.value == address), None)


class Step(abc.ABC):
    """The basic block of a scenario."""

    @abc.abstractmethod
    def step_type_name(self) -> str:
        """The step type name used in JSON."""


@dataclass
class NewAddressMock:
    """An explicit address to hand out for a given creator and nonce."""

    creator_address: JSONBytesFromString = field(default_factory=JSONBytesFromString)
    creator_nonce: JSONUint64 = field(default_factory=JSONUint64)
    new_address: JSONBytesFromString = field(default_factory=JSONBytesFromString)


@dataclass
class BlockInfo:
    """Data for the block info hooks."""

    block_timestamp: JSONUint64 = field(default_factory=JSONUint64)
    block_nonce: JSONUint64 = field(default_factory=JSONUint64)
    block_round: JSONUint64 = field(default_factory=JSONUint64)
    block_epoch: JSONUint64 = field(default_factory=JSONUint64)
    block_random_seed: Optional[JSONBytesFromTree] = None


class TraceGasStatus(enum.IntEnum):
    """Whether gas tracing was requested for included steps."""

    FALSE_VALUE = 0
    TRUE_VALUE = 1
    UNDEFINED = 2

    def to_int(self) -> int:
        """The integer form of the status."""
        return int(self)


@dataclass
class ExternalStepsStep(Step):
    """Includes the steps of another scenario file."""

    comment: str = ""
    trace_gas: TraceGasStatus = TraceGasStatus.UNDEFINED
    path: str = ""

    def step_type_name(self) -> str:
        return STEP_NAME_EXTERNAL_STEPS


@dataclass
class SetStateStep(Step):
    """Writes accounts and block data into the mock blockchain."""

    set_state_ident: str = ""
    comment: str = ""
    accounts: list[Account] = field(default_factory=list)
    previous_block_info: Optional[BlockInfo] = None
    current_block_info: Optional[BlockInfo] = None
    block_hashes: JSONValueList = field(default_factory=JSONValueList)
    new_address_mocks: list[NewAddressMock] = field(default_factory=list)

    def step_type_name(self) -> str:
        return STEP_NAME_SET_STATE


@dataclass
class CheckStateStep(Step):
    """Verifies the state of the mock blockchain."""

    check_state_ident: str = ""
    comment: str = ""
    check_accounts: CheckAccounts = field(default_factory=CheckAccounts)

    def step_type_name(self) -> str:
        return STEP_NAME_CHECK_STATE


@dataclass
class DumpStateStep(Step):
    """Prints the whole state, for debugging."""

    comment: str = ""

    def step_type_name(self) -> str:
        return STEP_NAME_DUMP_STATE


@dataclass
class TxStep(Step):
    """Executes a transaction."""

    tx_ident: str = ""
    comment: str = ""
    display_logs: bool = False
    tx: Optional[Transaction] = None
    expected_result: Optional[TransactionResult] = None

    def step_type_name(self) -> str:
        if self.tx is None or self.tx.type not in _TX_STEP_NAMES:
            raise ValueError("unknown TransactionType")
        return _TX_STEP_NAMES[self.tx.type]


@dataclass
class Scenario:
    """A test scenario made of steps."""

    name: str = ""
    comment: str = ""
    check_gas: bool = True
    trace_gas: bool = False
    is_new_test: bool = False
    gas_schedule: GasSchedule = GasSchedule.DEFAULT
    steps: list[Step] = field(default_factory=list)