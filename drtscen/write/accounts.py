"""Conversion of accounts and account expectations into plain ordered JSON data."""

from __future__ import annotations

from typing import Any

from drtscen.model.scenario import Account, CheckAccounts
from drtscen.write.common import (
    big_int_to_json,
    bytes_from_string_to_json,
    bytes_from_string_to_string,
    bytes_from_tree_to_json,
    check_big_int_to_json,
    check_bytes_to_json,
    check_uint64_to_json,
    uint64_to_json,
)
from drtscen.write.dcdt import dcdt_data_to_json
from drtscen.write.dcdt_check import check_dcdt_data_to_json


def accounts_to_json(accounts: list[Account]) -> dict[str, Any]:
    """The JSON form of the accounts of a set-state step, keyed by address."""
    result: dict[str, Any] = {}
    for account in accounts:
        acct: dict[str, Any] = {}
        if account.comment:
            acct["comment"] = account.comment
        if account.update:
            acct["update"] = True
        if account.shard.original:
            acct["shard"] = uint64_to_json(account.shard)
        if account.nonce.original:
            acct["nonce"] = uint64_to_json(account.nonce)
        if account.balance.original:
            acct["balance"] = big_int_to_json(account.balance)
        if account.dcdt_data:
            acct["dcdt"] = dcdt_data_to_json(account.dcdt_data)
        storage = {
            bytes_from_string_to_string(entry.key): bytes_from_tree_to_json(entry.value)
            for entry in account.storage
        }
        if account.username.value:
            acct["username"] = bytes_from_string_to_json(account.username)
        if storage:
            acct["storage"] = storage
        if account.code.original:
            acct["code"] = bytes_from_string_to_json(account.code)
        if account.code_metadata.original:
            acct["codeMetadata"] = bytes_from_string_to_json(account.code_metadata)
        if account.owner.value:
            acct["owner"] = bytes_from_string_to_json(account.owner)
        if account.developer_reward.original:
            acct["developerRewards"] = big_int_to_json(account.developer_reward)
        if account.async_call_data:
            acct["asyncCallData"] = account.async_call_data
        result[bytes_from_string_to_string(account.address)] = acct
    return result


def check_accounts_to_json(check_accounts: CheckAccounts) -> dict[str, Any]:
    """The JSON form of the account expectations of a check-state step."""
    result: dict[str, Any] = {}
    for check in check_accounts.accounts:
        acct: dict[str, Any] = {}
        if check.comment:
            acct["comment"] = check.comment
        if not check.nonce.is_unspecified():
            acct["nonce"] = check_uint64_to_json(check.nonce)
        if not check.balance.is_unspecified():
            acct["balance"] = check_big_int_to_json(check.balance)
        if check.ignore_dcdt:
            acct["dcdt"] = "*"
        elif check.check_dcdt_data:
            acct["dcdt"] = check_dcdt_data_to_json(
                check.check_dcdt_data, check.more_dcdt_tokens_allowed
            )
        if not check.username.is_unspecified():
            acct["username"] = check_bytes_to_json(check.username)
        if check.explicit_storage:
            if check.ignore_storage:
                acct["storage"] = "*"
            else:
                storage: dict[str, Any] = {
                    bytes_from_string_to_string(entry.key): check_bytes_to_json(entry.check_value)
                    for entry in check.check_storage
                }
                if check.more_storage_allowed:
                    storage["+"] = ""
                acct["storage"] = storage
        if not check.code.is_unspecified():
            acct["code"] = check_bytes_to_json(check.code)
        if not check.code_metadata.is_unspecified():
            acct["codeMetadata"] = check_bytes_to_json(check.code_metadata)
        if not check.owner.is_unspecified():
            acct["owner"] = check_bytes_to_json(check.owner)
        if not check.developer_reward.is_unspecified():
            acct["developerRewards"] = check_big_int_to_json(check.developer_reward)
        if not check.async_call_data.is_unspecified():
            acct["asyncCallData"] = check_bytes_to_json(check.async_call_data)
        result[bytes_from_string_to_string(check.address)] = acct
    if check_accounts.more_accounts_allowed:
        result["+"] = ""
    return result