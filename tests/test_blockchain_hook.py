import pytest

from drtscen.worldmock.account import CodeMetadata, WorldMockError, generate_mock_address
from drtscen.worldmock.world import BlockInfo, MockWorld, NewAddressMock

USER_A = b"\xaa" * 32
USER_B = b"\xbb" * 32
SC_ADDR = bytes(8) + b"\xcc" * 24


@pytest.fixture
def world():
    return MockWorld()


def test_new_address_uses_registered_mock(world):
    world.new_address_mocks = [NewAddressMock(USER_A, 3, SC_ADDR)]
    assert world.new_address(USER_A, 3, b"\x05\x00") == SC_ADDR
    assert world.last_created_contract_address == SC_ADDR


def test_new_address_generated_when_no_mock_matches(world):
    world.new_address_mocks = [NewAddressMock(USER_A, 3, SC_ADDR)]
    result = world.new_address(USER_A, 4, b"\x05\x00")
    assert result == generate_mock_address(USER_A, 4, b"\x05\x00")
    assert len(result) == 32
    assert result[10:14] == b"\x11" * 4
    assert world.last_created_contract_address == result


def test_custom_error_is_raised(world):
    boom = RuntimeError("boom")
    world.err = boom
    with pytest.raises(RuntimeError) as info:
        world.new_address(USER_A, 0, b"\x05\x00")
    assert info.value is boom
    with pytest.raises(RuntimeError):
        world.get_storage_data(USER_A, b"k")
    with pytest.raises(RuntimeError):
        world.get_blockhash(0)


def test_get_storage_data(world):
    assert world.get_storage_data(USER_A, b"key") == (b"", 0)
    acct = world.acct_map.create_account(USER_A, world)
    acct.storage[b"key"] = b"value"
    assert world.get_storage_data(USER_A, b"key") == (b"value", 0)
    assert world.get_storage_data(USER_A, b"other") == (b"", 0)


def test_get_storage_data_falls_back_to_provided_hook(world):
    class Hook:
        def get_storage_data(self, address, key):
            return b"from-hook:" + key, 0

    world.acct_map.create_account(USER_A, world)
    world.set_provided_blockchain_hook(Hook())
    assert world.get_storage_data(USER_A, b"k") == (b"from-hook:k", 0)


def test_get_storage_data_ignores_failing_hook(world):
    class Hook:
        def get_storage_data(self, address, key):
            raise RuntimeError("unavailable")

    world.acct_map.create_account(USER_A, world)
    world.set_provided_blockchain_hook(Hook())
    assert world.get_storage_data(USER_A, b"k") == (b"", 0)


def test_get_blockhash(world):
    world.current_block_info = BlockInfo(block_nonce=5)
    world.blockhashes = [b"h5", b"h4"]
    assert world.get_blockhash(5) == b"h5"
    assert world.get_blockhash(4) == b"h4"
    with pytest.raises(WorldMockError, match="greater than current nonce"):
        world.get_blockhash(6)
    with pytest.raises(WorldMockError, match="older than the oldest"):
        world.get_blockhash(3)


def test_block_info_defaults_without_blocks(world):
    assert world.last_nonce() == 0
    assert world.last_round() == 0
    assert world.last_time_stamp() == 0
    assert world.last_epoch() == 0
    assert world.last_random_seed() is None
    assert world.current_nonce() == 0
    assert world.current_round() == 0
    assert world.current_time_stamp() == 0
    assert world.current_epoch() == 0
    assert world.current_random_seed() is None


def test_block_info_values(world):
    world.previous_block_info = BlockInfo(block_timestamp=10, block_nonce=1, block_round=2, block_epoch=3)
    world.current_block_info = BlockInfo(
        block_timestamp=20, block_nonce=4, block_round=5, block_epoch=6, random_seed=b"\x07" * 48
    )
    assert (world.last_time_stamp(), world.last_nonce(), world.last_round(), world.last_epoch()) == (10, 1, 2, 3)
    assert (world.current_time_stamp(), world.current_nonce(), world.current_round(), world.current_epoch()) == (
        20,
        4,
        5,
        6,
    )
    assert world.current_random_seed() == b"\x07" * 48
    assert world.last_random_seed() == bytes(48)


def test_state_root_hash(world):
    world.state_root_hash = b"root"
    assert world.get_state_root_hash() == b"root"


def test_get_all_state(world):
    with pytest.raises(WorldMockError, match="account not found"):
        world.get_all_state(USER_A)
    acct = world.acct_map.create_account(USER_A, world)
    acct.storage[b"a"] = b"b"
    assert world.get_all_state(USER_A) is acct.storage


def test_get_user_account_checks_shard(world):
    acct = world.acct_map.create_account(USER_A, world)
    assert world.get_user_account(USER_A) is acct
    acct.shard_id = 1
    with pytest.raises(WorldMockError, match="account not found"):
        world.get_user_account(USER_A)
    with pytest.raises(WorldMockError):
        world.get_user_account(USER_B)


def test_get_code(world):
    acct = world.acct_map.create_smart_contract_account(USER_A, SC_ADDR, b"code", world)
    assert world.get_code(acct) == b"code"
    acct.shard_id = 2
    assert world.get_code(acct) is None
    assert world.get_shard_of_address(SC_ADDR) == 2
    assert world.get_shard_of_address(USER_B) == 0


def test_is_smart_contract(world):
    assert world.is_smart_contract(SC_ADDR) is True
    assert world.is_smart_contract(USER_A) is False
    world.acct_map.create_account(SC_ADDR, world)
    assert world.is_smart_contract(SC_ADDR) is False


def test_is_payable(world):
    assert world.is_payable(USER_A, USER_B) is True
    world.acct_map.create_account(USER_B, world)
    assert world.is_payable(USER_A, USER_B) is True
    sc = world.acct_map.create_smart_contract_account(USER_A, SC_ADDR, b"code", world)
    assert world.is_payable(USER_A, SC_ADDR) is True
    sc.code_metadata = CodeMetadata(payable_by_sc=True).to_bytes()
    assert world.is_payable(USER_A, SC_ADDR) is False
    assert world.is_payable(bytes(8) + b"\x01" * 24, SC_ADDR) is True
    sc.code_metadata = CodeMetadata().to_bytes()
    assert world.is_payable(bytes(8) + b"\x01" * 24, SC_ADDR) is False


def test_compiled_code(world):
    assert world.get_compiled_code(b"hash") == (False, None)
    world.save_compiled_code(b"hash", b"compiled")
    assert world.get_compiled_code(b"hash") == (True, b"compiled")
    world.clear_compiled_codes()
    assert world.get_compiled_code(b"hash") == (False, None)


def test_paused_and_limited_flags(world):
    assert world.is_paused(b"TOK") is False
    assert world.is_limited_transfer(b"TOK") is False
    world.is_paused_value = True
    world.is_limited_transfer_value = True
    assert world.is_paused(b"TOK") is True
    assert world.is_limited_transfer(b"TOK") is True