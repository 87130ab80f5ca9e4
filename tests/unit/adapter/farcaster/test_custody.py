"""Unit tests for custody signing."""

import pytest
from eth_account import Account
from eth_account.messages import encode_typed_data

from homie.adapter.farcaster import MnemonicCustodySigner
from homie.domain.service.signer_service import (
    SIGNED_KEY_REQUEST_DOMAIN,
    SIGNED_KEY_REQUEST_TYPES,
    build_signed_key_request,
)
from homie.util.error import ConfigurationError

MNEMONIC = "test test test test test test test test test test test junk"


def test_address_derived_from_mnemonic():
    signer = MnemonicCustodySigner(MNEMONIC)
    assert signer.address == "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


def test_signature_recovers_to_custody_address():
    signer = MnemonicCustodySigner(MNEMONIC)
    message = build_signed_key_request(99, "0x" + "cd" * 32, 1_700_000_000)

    signature = signer.sign_typed_data(
        SIGNED_KEY_REQUEST_DOMAIN, SIGNED_KEY_REQUEST_TYPES, message
    )

    assert signature.startswith("0x")
    assert len(signature) == 2 + 65 * 2
    signable = encode_typed_data(
        domain_data=SIGNED_KEY_REQUEST_DOMAIN,
        message_types=SIGNED_KEY_REQUEST_TYPES,
        message_data=message,
    )
    assert Account.recover_message(signable, signature=signature) == signer.address


def test_missing_mnemonic_fails_on_use():
    signer = MnemonicCustodySigner(None)

    with pytest.raises(ConfigurationError, match="FARCASTER__APP_MNEMONIC"):
        signer.sign_typed_data(SIGNED_KEY_REQUEST_DOMAIN, SIGNED_KEY_REQUEST_TYPES, {})
