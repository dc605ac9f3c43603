from drtscen.model.dcdt import (
    CheckDCDTData,
    CheckDCDTInstance,
    DCDTData,
    DCDTInstance,
    DCDTTxData,
    new_check_dcdt_instance,
)
from drtscen.model.values import JSONBigInt, JSONBytesFromString, JSONUint64


def test_new_check_instance_all_unspecified():
    inst = new_check_dcdt_instance()
    assert inst.nonce.unspecified is True
    assert inst.balance.is_unspecified() is True
    assert inst.creator.is_unspecified() is True
    assert inst.royalties.is_unspecified() is True
    assert inst.hash.is_unspecified() is True
    assert inst.uris.is_unspecified() is True
    assert inst.attributes.is_unspecified() is True


def test_new_check_instance_checks_empty_and_zero():
    inst = new_check_dcdt_instance()
    assert inst.balance.check(0) is True
    assert inst.balance.check(1) is False
    assert inst.creator.check(b"") is True
    assert inst.uris.check_list([]) is True


def test_new_check_instances_are_independent():
    first = new_check_dcdt_instance()
    second = new_check_dcdt_instance()
    first.uris.values.append(first.creator)
    assert second.uris.values == []


def test_default_check_instance_is_not_unspecified():
    inst = CheckDCDTInstance()
    assert inst.balance.is_unspecified() is False
    assert inst.creator.is_unspecified() is False


def test_dcdt_data_lists_not_shared():
    a = DCDTData()
    b = DCDTData()
    a.instances.append(DCDTInstance())
    a.roles.append("DCDTRoleLocalMint")
    assert b.instances == []
    assert b.roles == []


def test_check_dcdt_data_holds_instances():
    data = CheckDCDTData(
        token_identifier=JSONBytesFromString(b"TOK-123456", "str:TOK-123456"),
        instances=[new_check_dcdt_instance()],
    )
    assert data.token_identifier.value == b"TOK-123456"
    assert len(data.instances) == 1


def test_tx_data_fields():
    tx = DCDTTxData(
        token_identifier=JSONBytesFromString(b"TOK", "str:TOK"),
        nonce=JSONUint64(value=3, original="3"),
        value=JSONBigInt(value=500, original="500"),
    )
    assert (tx.token_identifier.value, tx.nonce.value, tx.value.value) == (b"TOK", 3, 500)