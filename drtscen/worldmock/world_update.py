"""Updates of the mock world state after and before transactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from drtscen.worldmock.account import CodeMetadata, WorldMockError


@dataclass
class StorageUpdate:
    """A single storage write produced by a transaction."""

    offset: bytes = b""
    data: bytes = b""


@dataclass
class OutputTransfer:
    """A transfer produced by a transaction."""

    value: int = 0
    gas_limit: int = 0
    data: bytes = b""


@dataclass
class OutputAccount:
    """The changes a transaction makes to one account."""

    address: bytes = b""
    nonce: int = 0
    balance: Optional[int] = None
    balance_delta: Optional[int] = None
    storage_updates: dict[bytes, StorageUpdate] = field(default_factory=dict)
    code: bytes = b""
    code_metadata: bytes = b""
    code_deployer_address: Optional[bytes] = None
    output_transfers: list[OutputTransfer] = field(default_factory=list)


class WorldUpdateMixin:
    """State updates for a world holding ``acct_map`` and ``accounts_adapter``."""

    def update_balance(self, address: bytes, new_balance: int) -> None:
        """Set the balance of an existing account."""
        acct = self.acct_map.get_account(address)
        if acct is None:
            raise WorldMockError("method UpdateBalance expects an existing address")
        acct.balance = new_balance

    def update_balance_with_delta(self, address: bytes, balance_delta: int) -> None:
        """Change the balance of an existing account by ``balance_delta``."""
        acct = self.acct_map.get_account(address)
        if acct is None:
            raise WorldMockError("method UpdateBalanceWithDelta expects an existing address")
        acct.balance = acct.balance + balance_delta

    def update_world_state_before(self, from_addr: bytes, gas_limit: int, gas_price: int) -> None:
        """Increase the sender's nonce and take the gas payment up front."""
        acct = self.acct_map.get_account(from_addr)
        if acct is None:
            raise WorldMockError("method UpdateWorldStateBefore expects an existing address")
        acct.nonce += 1
        gas_payment = gas_limit * gas_price
        if acct.balance < gas_payment:
            raise WorldMockError("not enough balance to pay gas upfront")
        acct.balance -= gas_payment

    def update_accounts(
        self,
        output_accounts: Mapping[bytes, OutputAccount],
        accounts_to_delete: Iterable[bytes],
    ) -> None:
        """Apply transaction output to the world, then delete accounts."""
        for mod_acct in output_accounts.values():
            self.update_account_from_output_account(mod_acct)
        for address in accounts_to_delete:
            self.acct_map.delete_account(address)

    def update_account_from_output_account(self, mod_acct: OutputAccount) -> None:
        """Apply the output of a transaction to a single account."""
        acct = self.acct_map.get_account(mod_acct.address)
        if acct is None:
            acct = self.acct_map.create_account(mod_acct.address, self)
            acct.owner_address = mod_acct.code_deployer_address
            self.acct_map.put_account(acct)
        acct.exists = True
        if mod_acct.balance_delta is not None:
            acct.balance = acct.balance + mod_acct.balance_delta
        elif mod_acct.balance is not None:
            acct.balance = mod_acct.balance
        if mod_acct.nonce > acct.nonce:
            acct.nonce = mod_acct.nonce
        if mod_acct.code:
            acct.set_code_and_metadata(mod_acct.code, CodeMetadata.from_bytes(mod_acct.code_metadata))
        if mod_acct.output_transfers and mod_acct.output_transfers[0].data:
            acct.async_call_data = bytes(mod_acct.output_transfers[0].data).decode(
                "utf-8", errors="surrogateescape"
            )
        for update in mod_acct.storage_updates.values():
            acct.storage[bytes(update.offset)] = update.data

    def create_state_backup(self) -> None:
        """Take a snapshot of all accounts."""
        self.accounts_adapter.snapshot_state()

    def commit_changes(self) -> None:
        """Discard all snapshots."""
        self.accounts_adapter.commit()

    def rollback_changes(self) -> None:
        """Restore the state of the first snapshot."""
        self.accounts_adapter.revert_to_snapshot(0)