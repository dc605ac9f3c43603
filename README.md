# drtscen

Building blocks for smart contract scenario tests. The package is pure
Python and has no third-party dependencies.

## What is in it

- `drtscen.model.values`: value wrappers that keep a parsed value together
  with its original text. They include `JSONBytesFromString`,
  `JSONBytesFromTree`, `JSONBigInt`, `JSONUint64` and `JSONValueList`. The
  check conditions `JSONCheckBytes`, `JSONCheckBigInt`, `JSONCheckUint64` and
  `JSONCheckValueList` accept `"*"` as "any value" and offer `check(...)` or
  `check_list(...)`.
- `drtscen.model.dcdt`: token transfers (`DCDTTxData`), token holdings
  (`DCDTData`, `DCDTInstance`) and token checks (`CheckDCDTData`,
  `CheckDCDTInstance`, `new_check_dcdt_instance()`).
- `drtscen.model.transaction`: `GasSchedule`, `TransactionType` and its
  field rules (`has_sender()`, `has_function()`, `is_smart_contract_tx()` and
  so on), as well as `Transaction`, `TransactionResult`, `LogList` and
  `LogEntry`.
- `drtscen.model.scenario`: accounts and account checks (`Account`,
  `CheckAccount`, `CheckAccounts`, `find_check_account`), and the steps
  `ExternalStepsStep`, `SetStateStep`, `CheckStateStep`, `DumpStateStep` and
  `TxStep`, plus `Scenario`.
- `drtscen.write`: turns model objects into plain ordered JSON data (dicts,
  lists and strings). `scenario_writer.scenario_to_json_string` renders a whole
  scenario as JSON text, indented by four spaces and ending in a newline.
  Values are written with their original text. Where there is none, the
  bytes are written as hex.
- `drtscen.worldmock`: an in-memory blockchain world.
  - `account`: `Account`, `CodeMetadata`, and the helpers `compute_hash`
    (32-byte BLAKE2b), `is_smart_contract_address` and
    `generate_mock_address`.
  - `account_map`: `AccountMap`.
  - `accounts_adapter`: `MockAccountsAdapter`, which takes snapshots of the
    accounts and reverts to them.
  - `stubs`: `EnableEpochsHandlerStub`, `GuardedAccountHandlerStub` and
    `MockGuardedAccountHandler`.
  - `world_update`: applies transaction output (`OutputAccount`,
    `StorageUpdate`, `OutputTransfer`) to the world.
  - `world`: `MockWorld`, which also answers block, storage, code and
    payability queries.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Writing a scenario

```python
from drtscen.model.scenario import Scenario, DumpStateStep
from drtscen.write.scenario_writer import scenario_to_json_string

scenario = Scenario(name="example", steps=[DumpStateStep(comment="debug")])
print(scenario_to_json_string(scenario))
```

## Using the world mock

```python
from drtscen.worldmock.world import MockWorld

world = MockWorld()
address = bytes(32)
account = world.acct_map.create_account(address, world)
account.add_to_balance(1000)

snapshot = world.get_snapshot()
account.save_key_value(b"key", b"value")
world.revert_to_snapshot(snapshot)  # storage is back to what the snapshot held
```

Reverting to a snapshot restores the storage of each account. It does not
restore balances or nonces.

Errors are raised as exceptions derived from `WorldMockError`. Examples are
`InsufficientFundsError` and `OperationNotPermittedError` in
`drtscen.worldmock.account`, and `InvalidAccountError` in
`drtscen.worldmock.accounts_adapter`. Validation and payload checks such as
`Account.validate` raise `ValueError` or `TypeError`.

## What it does not do

- It does not read scenario JSON. It has no parser and no interpreter for
  value expressions such as `str:` or `0x`, so model objects have to be built
  in code.
- It does not run scenarios and executes no contract code.
- It has no built-in functions such as token transfers, and it does not store
  token data in account storage.
- It has no command-line tool.