"""The mock world: accounts, blocks and address mocks for contract tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from drtscen.worldmock.account import WorldMockError
from drtscen.worldmock.account_map import AccountMap
from drtscen.worldmock.accounts_adapter import MockAccountsAdapter
from drtscen.worldmock.blockchain_hook import BlockchainHookMixin
from drtscen.worldmock.stubs import MockGuardedAccountHandler, enable_epochs_handler_all_flags
from drtscen.worldmock.world_update import WorldUpdateMixin

RANDOM_SEED_LENGTH = 48


@dataclass
class NewAddressMock:
    """An explicit address to hand out for a given creator and nonce."""

    creator_address: bytes = b""
    creator_nonce: int = 0
    new_address: bytes = b""


@dataclass
class BlockInfo:
    """Metadata about a mocked block."""

    block_timestamp: int = 0
    block_nonce: int = 0
    block_round: int = 0
    block_epoch: int = 0
    random_seed: Optional[bytes] = None

    def get_random_seed_slice(self) -> bytes:
        """The configured random seed, or zeros; always 48 bytes long."""
        if self.random_seed is None:
            self.random_seed = bytes(RANDOM_SEED_LENGTH)
        return self.random_seed


class MockWorld(BlockchainHookMixin, WorldUpdateMixin):
    """A mock representation of the blockchain for contract tests."""

    def __init__(self) -> None:
        self.self_shard_id = 0
        self.acct_map = AccountMap()
        self.accounts_adapter = MockAccountsAdapter(self)
        self.previous_block_info: Optional[BlockInfo] = None
        self.current_block_info: Optional[BlockInfo] = None
        self.blockhashes: list[bytes] = []
        self.new_address_mocks: list[NewAddressMock] = []
        self.state_root_hash: Optional[bytes] = None
        self.err: Optional[Exception] = None
        self.last_created_contract_address: Optional[bytes] = None
        self.compiled_code: dict[bytes, bytes] = {}
        self.is_paused_value = False
        self.is_limited_transfer_value = False
        self.guarded_account_handler: Any = MockGuardedAccountHandler()
        self.provided_blockchain_hook: Any = None
        self.enable_epochs_handler: Any = enable_epochs_handler_all_flags()
        self.other_vm_output_map: dict[bytes, Any] = {}

    def set_provided_blockchain_hook(self, hook: Any) -> None:
        """Use ``hook`` as a fallback source of storage data."""
        self.provided_blockchain_hook = hook

    def clear(self) -> None:
        """Reset accounts, blocks, address mocks and compiled code."""
        self.acct_map = AccountMap()
        self.accounts_adapter = MockAccountsAdapter(self)
        self.previous_block_info = None
        self.current_block_info = None
        self.blockhashes = []
        self.new_address_mocks = []
        self.compiled_code = {}

    def set_current_block_hash(self, block_hash: bytes) -> None:
        """Make ``block_hash`` the only known hash, that of the current block."""
        if self.current_block_info is None:
            self.current_block_info = BlockInfo()
        self.blockhashes = [block_hash]

    def number_of_shards(self) -> int:
        """One more than the highest shard of any account."""
        return max((account.shard_id for account in self.acct_map.values()), default=0) + 1

    def _existing_account(self, address: bytes):
        account = self.acct_map.get_account(address)
        if account is None:
            raise WorldMockError(f"account not found: {bytes(address).hex()}")
        return account

    def compute_id(self, address: bytes) -> int:
        """The shard of the account at ``address``; it must exist."""
        return self._existing_account(address).shard_id

    def self_id(self) -> int:
        """The shard this world runs in."""
        return self.self_shard_id

    def same_shard(self, first_address: bytes, second_address: bytes) -> bool:
        """Whether both accounts live in the same shard; both must exist."""
        return (
            self._existing_account(first_address).shard_id
            == self._existing_account(second_address).shard_id
        )

    def communication_identifier(self, dest_shard_id: int) -> str:
        """The identifier of the channel to a destination shard."""
        return f"commID-dest-{dest_shard_id}"

    def get_snapshot(self) -> int:
        """Take a snapshot and return its index."""
        self.create_state_backup()
        return self.accounts_adapter.journal_len()

    def revert_to_snapshot(self, snapshot: int) -> None:
        """Restore account storage from the snapshot with the given index."""
        self.accounts_adapter.revert_to_snapshot(snapshot)