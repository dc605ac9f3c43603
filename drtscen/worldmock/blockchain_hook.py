"""Blockchain hook queries answered from the state of a mock world."""

from __future__ import annotations

from typing import Optional

from drtscen.worldmock.account import (
    CodeMetadata,
    WorldMockError,
    generate_mock_address,
    is_smart_contract_address,
)


class BlockchainHookMixin:
    """Blockchain hook methods for a world holding accounts, block info and mocks.

    The host class provides ``err``, ``acct_map``, ``new_address_mocks``,
    ``last_created_contract_address``, ``provided_blockchain_hook``,
    ``previous_block_info``, ``current_block_info``, ``blockhashes``,
    ``state_root_hash``, ``self_shard_id``, ``compiled_code``,
    ``is_paused_value`` and ``is_limited_transfer_value``.
    """

    def _raise_custom_error(self) -> None:
        if self.err is not None:
            raise self.err

    def new_address(self, creator_address: bytes, creator_nonce: int, vm_type: Optional[bytes]) -> bytes:
        """The address of a new contract: an explicit mock if one matches, else a generated one."""
        self._raise_custom_error()
        for mock in self.new_address_mocks or []:
            if bytes(creator_address) == bytes(mock.creator_address) and creator_nonce == mock.creator_nonce:
                self.last_created_contract_address = mock.new_address
                return mock.new_address
        result = generate_mock_address(creator_address, creator_nonce, vm_type)
        self.last_created_contract_address = result
        return result

    def get_storage_data(self, account_address: bytes, key: bytes) -> tuple[bytes, int]:
        """The stored value and trie depth; an empty value if the key is missing."""
        self._raise_custom_error()
        acct = self.acct_map.get_account(account_address)
        if acct is None:
            return b"", 0
        found = acct.storage_value(key)
        if not found and self.provided_blockchain_hook is not None:
            try:
                hook_value = self.provided_blockchain_hook.get_storage_data(account_address, key)
            except Exception:
                hook_value = None
            if hook_value is not None:
                found = hook_value[0] if isinstance(hook_value, tuple) else hook_value
        return found, 0

    def get_blockhash(self, nonce: int) -> bytes:
        """The hash of the block with the given nonce, looking back from the current one."""
        self._raise_custom_error()
        current = self.current_nonce()
        if nonce > current:
            raise WorldMockError("requested nonce is greater than current nonce")
        offset = current - nonce
        hashes = self.blockhashes or []
        if offset >= len(hashes):
            raise WorldMockError(
                "requested nonce is older than the oldest available block nonce"
            )
        return hashes[offset]

    def last_nonce(self) -> int:
        """The nonce of the last committed block."""
        return 0 if self.previous_block_info is None else self.previous_block_info.block_nonce

    def last_round(self) -> int:
        """The round of the last committed block."""
        return 0 if self.previous_block_info is None else self.previous_block_info.block_round

    def last_time_stamp(self) -> int:
        """The timestamp of the last committed block."""
        return 0 if self.previous_block_info is None else self.previous_block_info.block_timestamp

    def last_random_seed(self) -> Optional[bytes]:
        """The random seed of the last committed block."""
        if self.previous_block_info is None:
            return None
        return self.previous_block_info.get_random_seed_slice()

    def last_epoch(self) -> int:
        """The epoch of the last committed block."""
        return 0 if self.previous_block_info is None else self.previous_block_info.block_epoch

    def get_state_root_hash(self) -> Optional[bytes]:
        """The state root hash of the last committed block."""
        return self.state_root_hash

    def current_nonce(self) -> int:
        """The nonce of the current block."""
        return 0 if self.current_block_info is None else self.current_block_info.block_nonce

    def current_round(self) -> int:
        """The round of the current block."""
        return 0 if self.current_block_info is None else self.current_block_info.block_round

    def current_time_stamp(self) -> int:
        """The timestamp of the current block."""
        return 0 if self.current_block_info is None else self.current_block_info.block_timestamp

    def current_random_seed(self) -> Optional[bytes]:
        """The random seed of the current block."""
        if self.current_block_info is None:
            return None
        return self.current_block_info.get_random_seed_slice()

    def current_epoch(self) -> int:
        """The epoch of the current block."""
        return 0 if self.current_block_info is None else self.current_block_info.block_epoch

    def get_all_state(self, account_address: bytes) -> dict[bytes, bytes]:
        """The whole storage of an account, as is."""
        account = self.acct_map.get_account(account_address)
        if account is None:
            raise WorldMockError(f"account not found: {bytes(account_address).hex()}")
        return account.storage

    def get_user_account(self, address: bytes):
        """The account at ``address`` if it lives in this shard."""
        self._raise_custom_error()
        account = self.acct_map.get_account(address)
        if account is None or self.self_shard_id != account.shard_id:
            raise WorldMockError(f"account not found: {bytes(address).hex()}")
        return account

    def get_code(self, account) -> Optional[bytes]:
        """The code of the given account, or None if it is not in this shard."""
        found = self.acct_map.get_account(account.address)
        if found is None or self.self_shard_id != found.shard_id:
            return None
        return found.code

    def get_shard_of_address(self, address: bytes) -> int:
        """The shard of the account at ``address``; 0 if unknown."""
        account = self.acct_map.get_account(address)
        return 0 if account is None else account.shard_id

    def is_smart_contract(self, address: bytes) -> bool:
        """Whether the address is a contract, judged by its account or its format."""
        account = self.acct_map.get_account(address)
        if account is None:
            return is_smart_contract_address(address)
        return account.is_smart_contract

    def is_payable(self, snd_address: bytes, rcv_address: bytes) -> bool:
        """Whether the receiver accepts payments from the sender."""
        account = self.acct_map.get_account(rcv_address)
        if account is None or not account.is_smart_contract:
            return True
        metadata = CodeMetadata.from_bytes(account.code_metadata)
        if is_smart_contract_address(snd_address):
            return metadata.payable_by_sc or metadata.payable
        return metadata.payable

    def save_compiled_code(self, code_hash: bytes, code: bytes) -> None:
        """Remember compiled code under its hash."""
        self.compiled_code[bytes(code_hash)] = code

    def get_compiled_code(self, code_hash: bytes) -> tuple[bool, Optional[bytes]]:
        """Whether compiled code is known for the hash, and the code."""
        key = bytes(code_hash)
        if key in self.compiled_code:
            return True, self.compiled_code[key]
        return False, None

    def clear_compiled_codes(self) -> None:
        """Forget all compiled code."""
        self.compiled_code = {}

    def is_paused(self, token_id: bytes) -> bool:
        """The configured paused flag, for any token."""
        return self.is_paused_value

    def is_limited_transfer(self, token_id: bytes) -> bool:
        """The configured limited-transfer flag, for any token."""
        return self.is_limited_transfer_value