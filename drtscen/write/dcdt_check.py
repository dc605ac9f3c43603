"""Conversion of token expectations into plain ordered JSON data."""

from __future__ import annotations

from typing import Any

from drtscen.model.dcdt import CheckDCDTData, CheckDCDTInstance
from drtscen.write.common import (
    check_big_int_to_json,
    check_bytes_to_json,
    check_uint64_to_json,
    check_value_list_to_json,
    uint64_to_json,
)


def check_dcdt_data_to_json(
    items: list[CheckDCDTData], more_dcdt_tokens_allowed: bool
) -> dict[str, Any]:
    """The JSON form of the expected tokens of an account, keyed by token."""
    result: dict[str, Any] = {
        item.token_identifier.original: check_dcdt_item_to_json(item) for item in items
    }
    if more_dcdt_tokens_allowed:
        result["+"] = ""
    return result


def check_dcdt_item_to_json(item: CheckDCDTData) -> Any:
    """The JSON form of one expected token: just the balance when compact."""
    if is_compact_check_dcdt(item):
        return check_big_int_to_json(item.instances[0].balance)

    result: dict[str, Any] = {}
    if item.instances:
        result["instances"] = [_check_instance_to_json(inst) for inst in item.instances]
    if item.last_nonce.original:
        result["lastNonce"] = check_uint64_to_json(item.last_nonce)
    if item.roles:
        result["roles"] = list(item.roles)
    if item.frozen.original:
        result["frozen"] = check_uint64_to_json(item.frozen)
    return result


def _check_instance_to_json(instance: CheckDCDTInstance) -> dict[str, Any]:
    result: dict[str, Any] = {"nonce": uint64_to_json(instance.nonce)}
    if instance.balance.original:
        result["balance"] = check_big_int_to_json(instance.balance)
    if not instance.creator.unspecified and instance.creator.value:
        result["creator"] = check_bytes_to_json(instance.creator)
    if not instance.royalties.unspecified and instance.royalties.original:
        result["royalties"] = check_uint64_to_json(instance.royalties)
    if not instance.hash.unspecified and instance.hash.value:
        result["hash"] = check_bytes_to_json(instance.hash)
    if not instance.uris.is_unspecified():
        result["uri"] = check_value_list_to_json(instance.uris)
    if not instance.attributes.unspecified and instance.attributes.value:
        result["attributes"] = check_bytes_to_json(instance.attributes)
    return result


def is_compact_check_dcdt(item: CheckDCDTData) -> bool:
    """True if the expected token can be written as its balance alone."""
    return (
        len(item.instances) == 1
        and not item.instances[0].nonce.original
        and not item.roles
        and not item.frozen.original
    )