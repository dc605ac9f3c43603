"""An accounts adapter backed by the accounts of a mock world, with snapshots."""

from __future__ import annotations

from typing import Any, Optional

from drtscen.worldmock.account import Account, WorldMockError
from drtscen.worldmock.account_map import AccountMap


class InvalidAccountError(WorldMockError):
    """The requested account does not exist."""

    def __init__(self, message: str = "account does not exist") -> None:
        super().__init__(message)


class TrieHandlingNotImplementedError(WorldMockError):
    """Trie operations are not available in the mock."""

    def __init__(self, message: str = "trie handling not implemented") -> None:
        super().__init__(message)


class MockAccountsAdapter:
    """Account access over ``world.acct_map``, keeping snapshots for rollback."""

    def __init__(self, world: Any) -> None:
        self.world = world
        self.snapshots: list[AccountMap] = []

    def get_existing_account(self, address: bytes) -> Account:
        """The account at ``address``; raises if it does not exist."""
        account = self.world.acct_map.get(bytes(address))
        if account is None:
            raise InvalidAccountError()
        return account

    def load_account(self, address: bytes) -> Account:
        """The account at ``address``, created empty if missing."""
        account = self.world.acct_map.get(bytes(address))
        if account is None:
            account = self.world.acct_map.create_account(address, self.world)
        return account

    def save_account(self, account: Account) -> None:
        """Store ``account`` in the world."""
        if not isinstance(account, Account):
            raise TypeError("invalid account to save")
        self.world.acct_map.put_account(account)

    def remove_account(self, address: bytes) -> None:
        """Remove the account at ``address``; raises if it does not exist."""
        if bytes(address) not in self.world.acct_map:
            raise InvalidAccountError()
        self.world.acct_map.delete_account(address)

    def commit(self) -> None:
        """Discard all snapshots."""
        self.snapshots = []

    def journal_len(self) -> int:
        """The index of the latest snapshot, -1 when there is none."""
        return len(self.snapshots) - 1

    def revert_to_snapshot(self, snapshot_index: int) -> None:
        """Restore account storage from a snapshot, dropping it and all later ones."""
        if not self.snapshots:
            raise WorldMockError("no snapshots")
        if snapshot_index >= len(self.snapshots) or snapshot_index < 0:
            raise WorldMockError(
                f"snapshot {snapshot_index} out of bounds "
                f"(min 0, max {len(self.snapshots) - 1})"
            )
        snapshot = self.snapshots[snapshot_index]
        self.snapshots = self.snapshots[:snapshot_index]
        self.world.acct_map.load_account_storage_from(snapshot)

    def get_num_checkpoints(self) -> int:
        """The number of snapshots held."""
        return len(self.snapshots)

    def get_code(self, code_hash: bytes) -> Optional[bytes]:
        """The code of the first account whose code hash matches, or None."""
        return next(
            (
                account.code
                for account in self.world.acct_map.values()
                if account.code_hash == code_hash
            ),
            None,
        )

    def root_hash(self) -> bytes:
        """Not available in the mock."""
        raise TrieHandlingNotImplementedError()

    def recreate_trie(self, root_hash: bytes) -> None:
        """Not available in the mock."""
        raise TrieHandlingNotImplementedError()

    def snapshot_state(self) -> None:
        """Record a deep copy of all accounts."""
        self.snapshots.append(self.world.acct_map.clone())

    def set_state_checkpoint(self) -> None:
        """Does nothing in the mock."""

    def is_pruning_enabled(self) -> bool:
        """Always False."""
        return False