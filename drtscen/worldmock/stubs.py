"""Configurable stand-ins for epoch flags and guarded-account handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass
class EnableEpochsHandlerStub:
    """Answers epoch-flag questions through optional callbacks."""

    get_current_epoch_called: Optional[Callable[[], int]] = None
    is_flag_defined_called: Optional[Callable[[Any], bool]] = None
    is_flag_enabled_called: Optional[Callable[[Any], bool]] = None
    is_flag_enabled_in_epoch_called: Optional[Callable[[Any, int], bool]] = None
    get_activation_epoch_called: Optional[Callable[[Any], int]] = None

    def get_activation_epoch(self, flag: Any) -> int:
        """The activation epoch of ``flag``; 0 by default."""
        if self.get_activation_epoch_called is not None:
            return self.get_activation_epoch_called(flag)
        return 0

    def is_flag_defined(self, flag: Any) -> bool:
        """Whether ``flag`` is known; true by default."""
        if self.is_flag_defined_called is not None:
            return self.is_flag_defined_called(flag)
        return True

    def is_flag_enabled(self, flag: Any) -> bool:
        """Whether ``flag`` is enabled; false by default."""
        if self.is_flag_enabled_called is not None:
            return self.is_flag_enabled_called(flag)
        return False

    def is_flag_enabled_in_epoch(self, flag: Any, epoch: int) -> bool:
        """Whether ``flag`` is enabled in ``epoch``; false by default."""
        if self.is_flag_enabled_in_epoch_called is not None:
            return self.is_flag_enabled_in_epoch_called(flag, epoch)
        return False

    def get_current_epoch(self) -> int:
        """The current epoch; 0 by default."""
        if self.get_current_epoch_called is not None:
            return self.get_current_epoch_called()
        return 0


def enable_epochs_handler_all_flags() -> EnableEpochsHandlerStub:
    """A handler with every flag defined and enabled."""
    return EnableEpochsHandlerStub(
        get_current_epoch_called=lambda: 0,
        is_flag_defined_called=lambda flag: True,
        is_flag_enabled_called=lambda flag: True,
        is_flag_enabled_in_epoch_called=lambda flag, epoch: True,
        get_activation_epoch_called=lambda flag: 0,
    )


def enable_epochs_handler_no_flags() -> EnableEpochsHandlerStub:
    """A handler with every flag disabled."""
    return EnableEpochsHandlerStub()


@dataclass
class GuardedAccountHandlerStub:
    """Guarded-account handling through optional callbacks."""

    get_active_guardian_called: Optional[Callable[[Any], Optional[bytes]]] = None
    set_guardian_called: Optional[Callable[[Any, bytes, bytes, bytes], None]] = None
    clean_other_than_active_called: Optional[Callable[[Any], None]] = None

    def get_active_guardian(self, account: Any) -> Optional[bytes]:
        """The active guardian of ``account``; None by default."""
        if self.get_active_guardian_called is not None:
            return self.get_active_guardian_called(account)
        return None

    def set_guardian(
        self,
        account: Any,
        guardian_address: bytes,
        tx_guardian_address: bytes,
        guardian_service_uid: bytes,
    ) -> None:
        """Set a guardian; does nothing by default."""
        if self.set_guardian_called is not None:
            self.set_guardian_called(
                account, guardian_address, tx_guardian_address, guardian_service_uid
            )

    def clean_other_than_active(self, account: Any) -> None:
        """Drop all but the active guardian; does nothing by default."""
        if self.clean_other_than_active_called is not None:
            self.clean_other_than_active_called(account)


class MockGuardedAccountHandler:
    """A guarded-account handler that knows no guardians and ignores changes."""

    def __init__(self) -> None:
        self._defaults = GuardedAccountHandlerStub()

    def get_active_guardian(self, account: Any) -> Optional[bytes]:
        """Always None: no account has a guardian."""
        return self._defaults.get_active_guardian(account)

    def set_guardian(
        self,
        account: Any,
        guardian_address: bytes,
        tx_guardian_address: bytes,
        guardian_service_uid: bytes,
    ) -> None:
        """Accept the request without recording it."""
        self._defaults.set_guardian(
            account, guardian_address, tx_guardian_address, guardian_service_uid
        )

    def clean_other_than_active(self, account: Any) -> None:
        """Accept the request without changing anything."""
        self._defaults.clean_other_than_active(account)