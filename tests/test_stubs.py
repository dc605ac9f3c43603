import pytest

from drtscen.worldmock.stubs import (
    EnableEpochsHandlerStub,
    GuardedAccountHandlerStub,
    MockGuardedAccountHandler,
    enable_epochs_handler_all_flags,
    enable_epochs_handler_no_flags,
)


def test_no_flags_defaults():
    stub = enable_epochs_handler_no_flags()
    assert stub.is_flag_enabled("f") is False
    assert stub.is_flag_enabled_in_epoch("f", 3) is False
    assert stub.is_flag_defined("f") is True
    assert stub.get_activation_epoch("f") == 0
    assert stub.get_current_epoch() == 0


def test_all_flags_enabled():
    stub = enable_epochs_handler_all_flags()
    assert stub.is_flag_enabled("f") is True
    assert stub.is_flag_enabled_in_epoch("f", 3) is True
    assert stub.is_flag_defined("f") is True
    assert stub.get_activation_epoch("f") == 0
    assert stub.get_current_epoch() == 0


def test_custom_callbacks_receive_arguments():
    seen = []

    def enabled_in_epoch(flag, epoch):
        seen.append((flag, epoch))
        return epoch > 2

    stub = EnableEpochsHandlerStub(
        is_flag_enabled_in_epoch_called=enabled_in_epoch,
        get_current_epoch_called=lambda: 4,
        is_flag_enabled_called=lambda flag: flag == "on",
    )
    assert stub.is_flag_enabled_in_epoch("x", 3) is True
    assert stub.is_flag_enabled_in_epoch("x", 1) is False
    assert seen == [("x", 3), ("x", 1)]
    assert stub.get_current_epoch() == 4
    assert stub.is_flag_enabled("on") is True
    assert stub.is_flag_enabled("off") is False


def test_guarded_stub_defaults():
    stub = GuardedAccountHandlerStub()
    assert stub.get_active_guardian(object()) is None
    assert stub.set_guardian(object(), b"g", b"t", b"uid") is None


def test_guarded_stub_callbacks():
    calls = []
    stub = GuardedAccountHandlerStub(
        get_active_guardian_called=lambda acct: b"guardian",
        set_guardian_called=lambda *args: calls.append(args),
        clean_other_than_active_called=lambda acct: calls.append(("clean", acct)),
    )
    assert stub.get_active_guardian("acct") == b"guardian"
    stub.set_guardian("acct", b"g", b"t", b"uid")
    stub.clean_other_than_active("acct")
    assert calls == [("acct", b"g", b"t", b"uid"), ("clean", "acct")]


def test_guarded_stub_propagates_errors():
    def fail(*args):
        raise RuntimeError("denied")

    stub = GuardedAccountHandlerStub(set_guardian_called=fail)
    with pytest.raises(RuntimeError, match="denied"):
        stub.set_guardian("acct", b"g", b"t", b"uid")


def test_mock_guarded_handler_is_inert():
    handler = MockGuardedAccountHandler()
    assert handler.get_active_guardian("acct") is None
    assert handler.set_guardian("acct", b"g", b"t", b"uid") is None
    assert handler.clean_other_than_active("acct") is None