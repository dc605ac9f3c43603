"""Conversion of a whole scenario into ordered JSON data and text."""

from __future__ import annotations

import json
from typing import Any

from drtscen.model.scenario import (
    BlockInfo,
    CheckStateStep,
    DumpStateStep,
    ExternalStepsStep,
    NewAddressMock,
    Scenario,
    SetStateStep,
    TxStep,
)
from drtscen.model.transaction import GasSchedule, Transaction, TransactionType
from drtscen.write.accounts import accounts_to_json, check_accounts_to_json
from drtscen.write.common import (
    big_int_to_json,
    bytes_from_string_to_json,
    bytes_from_tree_to_json,
    result_to_json,
    uint64_to_json,
    value_list_to_json,
)
from drtscen.write.dcdt import dcdt_tx_data_to_json

_GAS_SCHEDULE_NAMES = {
    GasSchedule.DEFAULT: "default",
    GasSchedule.DUMMY: "dummy",
    GasSchedule.V3: "v3",
    GasSchedule.V4: "v4",
}


def scenario_to_json_string(scenario: Scenario) -> str:
    """The JSON text of a scenario, ending with a newline."""
    return json.dumps(scenario_to_ordered_json(scenario), indent=4) + "\n"


def scenario_to_ordered_json(scenario: Scenario) -> dict[str, Any]:
    """The ordered JSON data of a scenario."""
    result: dict[str, Any] = {}
    if scenario.name:
        result["name"] = scenario.name
    if scenario.comment:
        result["comment"] = scenario.comment
    if not scenario.check_gas:
        result["checkGas"] = False
    if scenario.trace_gas:
        result["traceGas"] = True
    if scenario.gas_schedule != GasSchedule.DEFAULT:
        result["gasSchedule"] = gas_schedule_to_json(scenario.gas_schedule)
    result["steps"] = [_step_to_json(step) for step in scenario.steps]
    return result


def _step_to_json(step: Any) -> dict[str, Any]:
    out: dict[str, Any] = {"step": step.step_type_name()}
    if isinstance(step, ExternalStepsStep):
        if step.comment:
            out["comment"] = step.comment
        out["path"] = step.path
    elif isinstance(step, SetStateStep):
        if step.set_state_ident:
            out["id"] = step.set_state_ident
        if step.comment:
            out["comment"] = step.comment
        if step.accounts:
            out["accounts"] = accounts_to_json(step.accounts)
        if step.new_address_mocks:
            out["newAddresses"] = new_address_mocks_to_json(step.new_address_mocks)
        if step.previous_block_info is not None:
            out["previousBlockInfo"] = block_info_to_json(step.previous_block_info)
        if step.current_block_info is not None:
            out["currentBlockInfo"] = block_info_to_json(step.current_block_info)
        if not step.block_hashes.is_unspecified():
            out["blockHashes"] = value_list_to_json(step.block_hashes)
    elif isinstance(step, CheckStateStep):
        if step.check_state_ident:
            out["id"] = step.check_state_ident
        if step.comment:
            out["comment"] = step.comment
        out["accounts"] = check_accounts_to_json(step.check_accounts)
    elif isinstance(step, DumpStateStep):
        if step.comment:
            out["comment"] = step.comment
    elif isinstance(step, TxStep):
        if step.tx_ident:
            out["id"] = step.tx_ident
        if step.comment:
            out["comment"] = step.comment
        if step.display_logs:
            out["displayLogs"] = True
        out["tx"] = transaction_to_json(step.tx)
        if step.tx.type.is_smart_contract_tx() and step.expected_result is not None:
            out["expect"] = result_to_json(step.expected_result)
    return out


def transaction_to_json(tx: Transaction) -> dict[str, Any]:
    """The JSON form of a transaction, with only the fields its type allows."""
    result: dict[str, Any] = {}
    tx_type = tx.type
    if tx_type.has_sender():
        result["from"] = bytes_from_string_to_json(tx.sender)
    if tx_type.has_receiver():
        result["to"] = bytes_from_string_to_json(tx.receiver)
    if tx_type.has_value() and tx.rewa_value.original and tx.rewa_value.original != "0":
        result["rewaValue"] = big_int_to_json(tx.rewa_value)
    if tx.dcdt_value:
        result["dcdtValue"] = dcdt_tx_data_to_json(tx.dcdt_value)
    if tx_type.has_function():
        result["function"] = tx.function
    is_deploy_or_upgrade = tx_type in (TransactionType.SC_DEPLOY, TransactionType.SC_UPGRADE)
    if is_deploy_or_upgrade:
        result["contractCode"] = bytes_from_string_to_json(tx.code)
    if tx_type.has_function() or tx_type is TransactionType.SC_DEPLOY:
        result["arguments"] = [bytes_from_tree_to_json(arg) for arg in tx.arguments]
    if tx_type.has_gas_limit() and tx.gas_limit.original:
        result["gasLimit"] = uint64_to_json(tx.gas_limit)
    if tx_type.has_gas_price() and tx.gas_price.original:
        result["gasPrice"] = uint64_to_json(tx.gas_price)
    return result


def new_address_mocks_to_json(mocks: list[NewAddressMock]) -> list[dict[str, Any]]:
    """The JSON form of the new address mocks."""
    return [
        {
            "creatorAddress": bytes_from_string_to_json(mock.creator_address),
            "creatorNonce": uint64_to_json(mock.creator_nonce),
            "newAddress": bytes_from_string_to_json(mock.new_address),
        }
        for mock in mocks
    ]


def block_info_to_json(block_info: BlockInfo) -> dict[str, Any]:
    """The JSON form of block info, with only the fields that were written."""
    result: dict[str, Any] = {}
    if block_info.block_timestamp.original:
        result["blockTimestamp"] = uint64_to_json(block_info.block_timestamp)
    if block_info.block_nonce.original:
        result["blockNonce"] = uint64_to_json(block_info.block_nonce)
    if block_info.block_round.original:
        result["blockRound"] = uint64_to_json(block_info.block_round)
    if block_info.block_epoch.original:
        result["blockEpoch"] = uint64_to_json(block_info.block_epoch)
    if block_info.block_random_seed is not None:
        result["blockRandomSeed"] = bytes_from_tree_to_json(block_info.block_random_seed)
    return result


def gas_schedule_to_json(gas_schedule: GasSchedule) -> str:
    """The name of a gas schedule; empty for an unknown one."""
    return _GAS_SCHEDULE_NAMES.get(gas_schedule, "")