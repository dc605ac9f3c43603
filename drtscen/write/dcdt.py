"""Conversion of token holdings and token transfers into plain ordered JSON data."""

from __future__ import annotations

from typing import Any

from drtscen.model.dcdt import DCDTData, DCDTInstance, DCDTTxData
from drtscen.write.common import (
    big_int_to_json,
    bytes_from_string_to_json,
    bytes_from_tree_to_json,
    uint64_to_json,
    value_list_to_json,
)


def dcdt_tx_data_to_json(items: list[DCDTTxData]) -> list[dict[str, Any]]:
    """The JSON form of the token transfers of a transaction."""
    return [dcdt_tx_entry_to_json(item) for item in items]


def dcdt_tx_entry_to_json(item: DCDTTxData) -> dict[str, Any]:
    """The JSON form of a single token transfer."""
    result: dict[str, Any] = {}
    if item.token_identifier.original:
        result["tokenIdentifier"] = bytes_from_string_to_json(item.token_identifier)
    if item.nonce.original:
        result["nonce"] = uint64_to_json(item.nonce)
    if item.value.original:
        result["value"] = big_int_to_json(item.value)
    return result


def dcdt_data_to_json(items: list[DCDTData]) -> dict[str, Any]:
    """The JSON form of the tokens held by an account, keyed by token."""
    return {item.token_identifier.original: dcdt_item_to_json(item) for item in items}


def dcdt_item_to_json(item: DCDTData) -> Any:
    """The JSON form of one held token: just the balance when compact."""
    if is_compact_dcdt(item):
        return big_int_to_json(item.instances[0].balance)

    result: dict[str, Any] = {}
    if item.instances:
        result["instances"] = [_instance_to_json(instance) for instance in item.instances]
    if item.last_nonce.original:
        result["lastNonce"] = uint64_to_json(item.last_nonce)
    if item.roles:
        result["roles"] = list(item.roles)
    if item.frozen.original:
        result["frozen"] = uint64_to_json(item.frozen)
    return result


def _instance_to_json(instance: DCDTInstance) -> dict[str, Any]:
    result: dict[str, Any] = {"nonce": uint64_to_json(instance.nonce)}
    if instance.balance.original:
        result["balance"] = big_int_to_json(instance.balance)
    if instance.creator.original:
        result["creator"] = bytes_from_string_to_json(instance.creator)
    if instance.royalties.original:
        result["royalties"] = uint64_to_json(instance.royalties)
    if instance.hash.original:
        result["hash"] = bytes_from_string_to_json(instance.hash)
    if not instance.uris.is_unspecified():
        result["uri"] = value_list_to_json(instance.uris)
    if instance.attributes.value:
        result["attributes"] = bytes_from_tree_to_json(instance.attributes)
    return result


def is_compact_dcdt(item: DCDTData) -> bool:
    """True if the token can be written as its balance alone."""
    return (
        len(item.instances) == 1
        and not item.instances[0].nonce.original
        and not item.roles
        and not item.frozen.original
    )