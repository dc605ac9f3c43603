from drtscen.model.scenario import (
    Account,
    CheckAccount,
    CheckAccounts,
    CheckStorageKeyValuePair,
    StorageKeyValuePair,
)
from drtscen.model.values import (
    JSONBigInt,
    JSONBytesFromString,
    JSONBytesFromTree,
    JSONCheckBigInt,
    JSONCheckBytes,
    JSONCheckUint64,
    JSONUint64,
)
from drtscen.write.accounts import accounts_to_json, check_accounts_to_json


def _addr(original):
    return JSONBytesFromString(value=original.encode(), original=original)


def test_default_account_is_empty_map():
    result = accounts_to_json([Account(address=_addr("address:owner"))])
    assert result == {"address:owner": {}}


def test_address_without_original_uses_hex():
    account = Account(address=JSONBytesFromString(value=b"\x01\x02", original=""))
    assert list(accounts_to_json([account])) == [b"\x01\x02".hex()]


def test_account_fields_in_order():
    account = Account(
        address=_addr("address:a"),
        comment="c",
        update=True,
        nonce=JSONUint64(value=1, original="1"),
        balance=JSONBigInt(value=100, original="100"),
        username=JSONBytesFromString(value=b"user", original="str:user"),
        storage=[
            StorageKeyValuePair(
                key=_addr("str:key"),
                value=JSONBytesFromTree(value=b"v", original="str:v"),
            )
        ],
        code=JSONBytesFromString(value=b"code", original="file:code.wasm"),
        owner=JSONBytesFromString(value=b"o" * 32, original="address:owner"),
        developer_reward=JSONBigInt(value=5, original="5"),
        async_call_data="data",
    )
    acct = accounts_to_json([account])["address:a"]
    assert list(acct) == [
        "comment",
        "update",
        "nonce",
        "balance",
        "username",
        "storage",
        "code",
        "owner",
        "developerRewards",
        "asyncCallData",
    ]
    assert acct["update"] is True
    assert acct["storage"] == {"str:key": "str:v"}
    assert acct["code"] == "file:code.wasm"
    assert acct["balance"] == "100"


def test_check_default_account_is_empty():
    checks = CheckAccounts(accounts=[CheckAccount(address=_addr("address:a"))])
    assert check_accounts_to_json(checks) == {"address:a": {}}


def test_check_more_accounts_allowed():
    checks = CheckAccounts(accounts=[CheckAccount(address=_addr("address:a"))], more_accounts_allowed=True)
    result = check_accounts_to_json(checks)
    assert list(result) == ["address:a", "+"]
    assert result["+"] == ""


def test_check_ignore_dcdt_and_storage_star():
    check = CheckAccount(
        address=_addr("address:a"),
        ignore_dcdt=True,
        explicit_storage=True,
        ignore_storage=True,
    )
    acct = check_accounts_to_json(CheckAccounts(accounts=[check]))["address:a"]
    assert acct == {"dcdt": "*", "storage": "*"}


def test_check_explicit_storage_map():
    check = CheckAccount(
        address=_addr("address:a"),
        explicit_storage=True,
        ignore_storage=False,
        more_storage_allowed=True,
        check_storage=[
            CheckStorageKeyValuePair(
                key=_addr("str:k"),
                check_value=JSONCheckBytes(value=b"v", original="str:v"),
            )
        ],
    )
    acct = check_accounts_to_json(CheckAccounts(accounts=[check]))["address:a"]
    assert acct["storage"] == {"str:k": "str:v", "+": ""}


def test_check_specified_fields():
    check = CheckAccount(
        address=_addr("address:a"),
        nonce=JSONCheckUint64(value=3, original="3"),
        balance=JSONCheckBigInt(is_star=True, value=None, original="*"),
        code=JSONCheckBytes(value=b"c", original="file:c.wasm"),
    )
    acct = check_accounts_to_json(CheckAccounts(accounts=[check]))["address:a"]
    assert acct == {"nonce": "3", "balance": "*", "code": "file:c.wasm"}