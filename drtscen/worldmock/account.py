"""Mock blockchain accounts, address helpers and the errors they raise."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import Any, Optional

SC_ADDRESS_NUM_LEADING_ZEROS = 8
ADDRESS_LENGTH = 32
NUM_INIT_CHARACTERS_FOR_SC_ADDRESS = 10
VM_TYPE_LEN = 2

_METADATA_UPGRADEABLE = 1
_METADATA_READABLE = 4
_METADATA_GUARDED = 8
_METADATA_PAYABLE = 2
_METADATA_PAYABLE_BY_SC = 4
_CODE_METADATA_LENGTH = 2


class WorldMockError(Exception):
    """Base class of errors raised by the mock world."""


class InsufficientFundsError(WorldMockError):
    """The balance is too low for the requested operation."""

    def __init__(self, message: str = "insufficient funds") -> None:
        super().__init__(message)


class NilWorldMockError(WorldMockError):
    """An account needs a mock world but has none."""

    def __init__(self, message: str = "nil worldmock") -> None:
        super().__init__(message)


class OperationNotPermittedError(WorldMockError):
    """The operation was rejected for lack of permissions."""

    def __init__(self, message: str = "operation not permitted") -> None:
        super().__init__(message)


class InvalidAddressLengthError(WorldMockError):
    """An address of the wrong length was given."""

    def __init__(self, message: str = "invalid address length") -> None:
        super().__init__(message)


def compute_hash(data: bytes) -> bytes:
    """The 32-byte BLAKE2b hash used for contract code."""
    return hashlib.blake2b(bytes(data), digest_size=32).digest()


def is_smart_contract_address(address: bytes) -> bool:
    """True if the address begins with the zero bytes of a contract address."""
    return bytes(address[:SC_ADDRESS_NUM_LEADING_ZEROS]) == bytes(SC_ADDRESS_NUM_LEADING_ZEROS)


def generate_mock_address(creator_address: bytes, creator_nonce: int, vm_type: Optional[bytes]) -> bytes:
    """A simple, realistic-looking address for a contract created by ``creator_address``."""
    if vm_type is None:
        raise ValueError("GenerateMockAddress: VM Type not set!")
    creator = bytes(creator_address)
    result = bytearray(ADDRESS_LENGTH)
    result[10:14] = b"\x11" * 4
    head = creator[:15]
    result[14:14 + len(head)] = head
    result[29] = creator_nonce & 0xFF
    tail = creator[30:ADDRESS_LENGTH]
    result[30:30 + len(tail)] = tail
    start = NUM_INIT_CHARACTERS_FOR_SC_ADDRESS - VM_TYPE_LEN
    vm = bytes(vm_type)[: ADDRESS_LENGTH - start]
    result[start:start + len(vm)] = vm
    return bytes(result)


@dataclass
class CodeMetadata:
    """Flags attached to deployed contract code."""

    upgradeable: bool = False
    readable: bool = False
    guarded: bool = False
    payable: bool = False
    payable_by_sc: bool = False

    @classmethod
    def from_bytes(cls, data: bytes) -> "CodeMetadata":
        """Decode the two-byte form; anything else yields no flags."""
        if data is None or len(data) != _CODE_METADATA_LENGTH:
            return cls()
        first, second = data[0], data[1]
        return cls(
            upgradeable=bool(first & _METADATA_UPGRADEABLE),
            readable=bool(first & _METADATA_READABLE),
            guarded=bool(first & _METADATA_GUARDED),
            payable=bool(second & _METADATA_PAYABLE),
            payable_by_sc=bool(second & _METADATA_PAYABLE_BY_SC),
        )

    def to_bytes(self) -> bytes:
        """The two-byte form of the flags."""
        first = 0
        if self.upgradeable:
            first |= _METADATA_UPGRADEABLE
        if self.readable:
            first |= _METADATA_READABLE
        if self.guarded:
            first |= _METADATA_GUARDED
        second = 0
        if self.payable:
            second |= _METADATA_PAYABLE
        if self.payable_by_sc:
            second |= _METADATA_PAYABLE_BY_SC
        return bytes([first, second])


@dataclass
class Account:
    """An account held by the mock world."""

    exists: bool = False
    address: bytes = b""
    nonce: int = 0
    balance: int = 0
    balance_delta: int = 0
    storage: dict[bytes, bytes] = field(default_factory=dict)
    root_hash: Optional[bytes] = None
    code: Optional[bytes] = None
    code_hash: Optional[bytes] = None
    code_metadata: Optional[bytes] = None
    owner_address: Optional[bytes] = None
    async_call_data: str = ""
    username: Optional[bytes] = None
    developer_reward: int = 0
    shard_id: int = 0
    is_smart_contract: bool = False
    mock_world: Any = field(default=None, repr=False, compare=False)

    def storage_value(self, key: bytes) -> bytes:
        """The stored value for ``key``, empty if missing."""
        return self.storage.get(bytes(key), b"")

    def set_code_and_metadata(self, code: bytes, code_metadata: CodeMetadata) -> None:
        """Set the code together with its hash, contract flag and metadata."""
        self.code = code
        self.code_hash = compute_hash(code or b"")
        self.is_smart_contract = True
        self.code_metadata = code_metadata.to_bytes()

    def set_code(self, code: bytes) -> None:
        """Set the code, its hash and the contract flag."""
        self.code = code
        self.code_hash = compute_hash(code or b"")
        self.is_smart_contract = True

    def add_to_balance(self, value: int) -> None:
        """Add to the balance; the result may not go negative."""
        new_balance = self.balance + value
        if new_balance < 0:
            raise InsufficientFundsError()
        self.balance = new_balance

    def sub_from_balance(self, value: int) -> None:
        """Subtract from the balance; the result may not go negative."""
        new_balance = self.balance - value
        if new_balance < 0:
            raise InsufficientFundsError()
        self.balance = new_balance

    def claim_developer_rewards(self, sender: bytes) -> int:
        """Hand the accumulated rewards to the owner and reset them."""
        if sender != self.owner_address:
            raise OperationNotPermittedError()
        old_value = self.developer_reward
        self.developer_reward = 0
        return old_value

    def add_to_developer_reward(self, value: int) -> None:
        """Accumulate developer rewards."""
        self.developer_reward += value

    def change_owner_address(self, sender: bytes, new_address: bytes) -> None:
        """Transfer ownership; only the owner may, to an address of equal length."""
        if sender != self.owner_address:
            raise OperationNotPermittedError()
        if len(new_address) != len(self.address):
            raise InvalidAddressLengthError()
        self.owner_address = new_address

    def set_user_name(self, user_name: bytes) -> None:
        """Set the user name to a copy of ``user_name``."""
        self.username = bytes(user_name)

    def increase_nonce(self, nonce: int) -> None:
        """Increase the nonce by ``nonce``."""
        self.nonce += nonce

    def retrieve_value(self, key: bytes) -> tuple[bytes, int]:
        """The stored value for ``key`` and the trie depth, always 0 here."""
        return self.storage.get(bytes(key), b""), 0

    def save_key_value(self, key: bytes, value: bytes) -> None:
        """Store a value and back up the world state."""
        self.storage[bytes(key)] = value
        if self.mock_world is None:
            raise NilWorldMockError()
        self.mock_world.create_state_backup()

    def clone(self) -> "Account":
        """A deep copy sharing only the mock world."""
        return Account(
            exists=self.exists,
            address=self.address,
            nonce=self.nonce,
            balance=self.balance,
            balance_delta=self.balance_delta,
            storage={key: bytes(value or b"") for key, value in self.storage.items()},
            root_hash=bytes(self.root_hash or b""),
            code=bytes(self.code or b""),
            code_hash=bytes(self.code_hash or b""),
            code_metadata=bytes(self.code_metadata or b""),
            owner_address=bytes(self.owner_address or b""),
            async_call_data=self.async_call_data,
            username=bytes(self.username or b""),
            developer_reward=self.developer_reward,
            shard_id=self.shard_id,
            is_smart_contract=self.is_smart_contract,
            mock_world=self.mock_world,
        )

    def validate(self) -> None:
        """Check the address length and that code matches the address kind."""
        address = bytes(self.address or b"")
        if len(address) != ADDRESS_LENGTH:
            raise ValueError(
                f"account address should be 32 bytes long: 0x{address.hex()}"
            )
        sc_address = is_smart_contract_address(address)
        if self.code:
            if not sc_address:
                raise ValueError(
                    f"account has a smart contract address, but has no code: 0x{address.hex()}"
                )
        elif sc_address:
            raise ValueError(
                f"account has code but not a smart contract address: {address.hex()}"
            )