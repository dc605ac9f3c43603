"""A map from address to mock account."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from drtscen.worldmock.account import Account, CodeMetadata, WorldMockError, compute_hash

SYSTEM_ACCOUNT_ADDRESS = b"\xff" * 32


class AccountMap(dict):
    """Accounts of the mock world, keyed by address bytes."""

    def create_account(self, address: bytes, world: Any) -> Account:
        """Create an empty, existing account for ``address`` and store it."""
        account = Account(
            exists=True,
            address=bytes(address),
            nonce=0,
            balance=0,
            balance_delta=0,
            storage={},
            code=None,
            owner_address=None,
            shard_id=0,
            is_smart_contract=False,
            developer_reward=0,
            mock_world=world,
        )
        self.put_account(account)
        return account

    def create_smart_contract_account(
        self, owner: bytes, address: bytes, code: bytes, world: Any
    ) -> Account:
        """Create a contract account holding ``code``."""
        return self.create_smart_contract_account_with_code_hash(owner, address, code, code, world)

    def create_smart_contract_account_with_code_hash(
        self,
        owner: bytes,
        address: bytes,
        code: bytes,
        code_hash: Optional[bytes],
        world: Any,
    ) -> Account:
        """Create a payable contract account holding ``code``."""
        account = self.create_account(address, world)
        account.code = code
        account.code_hash = code if code_hash is None else code_hash
        account.is_smart_contract = True
        account.owner_address = owner
        account.set_code_and_metadata(code, CodeMetadata(payable=True))
        return account

    def put_account(self, account: Account) -> None:
        """Store ``account`` under its address, filling in missing defaults."""
        if account.code is not None and account.code_hash is None:
            account.code_hash = compute_hash(account.code)
        if account.balance is None:
            account.balance = 0
        if account.balance_delta is None:
            account.balance_delta = 0
        if account.developer_reward is None:
            account.developer_reward = 0
        self[bytes(account.address)] = account

    def put_accounts(self, accounts: Iterable[Account]) -> None:
        """Store several accounts."""
        for account in accounts:
            self.put_account(account)

    def get_account(self, address: bytes) -> Optional[Account]:
        """The account at ``address``, or None."""
        return self.get(bytes(address))

    def delete_account(self, address: bytes) -> None:
        """Remove the account at ``address`` if present."""
        self.pop(bytes(address), None)

    def clone(self) -> "AccountMap":
        """A deep copy of every account."""
        result = AccountMap()
        for address, account in self.items():
            result[address] = account.clone()
        return result

    def load_account_storage_from(self, other: "AccountMap") -> None:
        """Point each account's storage at the storage of the same account in ``other``."""
        for address, account in self.items():
            other_account = other.get(address)
            if other_account is None:
                if address == SYSTEM_ACCOUNT_ADDRESS:
                    continue
                raise WorldMockError(
                    f"account {bytes(address).hex()} could not be loaded from AccountMap"
                )
            account.storage = other_account.storage