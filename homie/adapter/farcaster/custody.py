"""App custody account signing."""

from typing import Any

from eth_account import Account
from eth_account.messages import encode_typed_data
from eth_account.signers.local import LocalAccount

from homie.domain.service.signer_service import TypedDataSigner
from homie.util.error import ConfigurationError

Account.enable_unaudited_hdwallet_features()


class CustodySigner(TypedDataSigner):
    """Base class for custody signers.

    Provides type distinction for dependency injection.
    """

    pass


class MnemonicCustodySigner(CustodySigner):
    """Signs EIP-712 typed data with an account derived from a BIP-39 mnemonic."""

    def __init__(self, mnemonic: str | None) -> None:
        self.mnemonic = mnemonic
        self._account: LocalAccount | None = None

    @property
    def account(self) -> LocalAccount:
        """Custody account, derived on first use.

        Raises:
            ConfigurationError: If no mnemonic is configured
        """
        if self._account is None:
            if not self.mnemonic:
                raise ConfigurationError("FARCASTER__APP_MNEMONIC not configured")
            self._account = Account.from_mnemonic(self.mnemonic)
        return self._account

    @property
    def address(self) -> str:
        return self.account.address

    def sign_typed_data(
        self,
        domain: dict[str, Any],
        types: dict[str, list[dict[str, str]]],
        message: dict[str, Any],
    ) -> str:
        signable = encode_typed_data(
            domain_data=domain, message_types=types, message_data=message
        )
        signed = self.account.sign_message(signable)
        return f"0x{bytes(signed.signature).hex()}"


class MockCustodySigner(CustodySigner):
    """Mock custody signer that records requests and returns a fixed signature."""

    SIGNATURE = "0x" + "ab" * 65

    def __init__(self):
        self.requests: list[dict[str, Any]] = []

    def sign_typed_data(
        self,
        domain: dict[str, Any],
        types: dict[str, list[dict[str, str]]],
        message: dict[str, Any],
    ) -> str:
        self.requests.append(message)
        return self.SIGNATURE
