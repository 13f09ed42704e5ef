import asyncio

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from ntt_registry import Capability, InvalidSignatureError, NotFoundError, PullableRegistry, UnauthorizedError
from ntt_registry.exporters import InMemoryExporter
from ntt_registry.registry import Ed25519KeyRing, pull_message, sign_pull

ISSUER = "issuer"
OLD_WALLET = "0x77aabF4893DDEA4f0AD14e26D9151c2940463bbF"
NEW_WALLET = "0xbD9baE0E5a75361e3D8F47Ec7C38271Ae5650BC2"


def _setup(exporter=None):
    key = Ed25519PrivateKey.generate()
    keyring = Ed25519KeyRing()
    keyring.register(OLD_WALLET, key.public_key())
    registry = PullableRegistry(ISSUER, signature_verifier=keyring, exporter=exporter)
    return registry, key


def test_pull_moves_token_between_holder_wallets() -> None:
    async def run() -> None:
        exporter = InMemoryExporter()
        registry, key = _setup(exporter)
        await registry.mint(ISSUER, OLD_WALLET)
        token_id = await registry.mint(ISSUER, OLD_WALLET)
        await registry.revoke(ISSUER, token_id)

        signature = sign_pull(key, token_id=token_id, owner=OLD_WALLET, recipient=NEW_WALLET)
        await registry.pull(NEW_WALLET, token_id, OLD_WALLET, signature)

        assert registry.owner_of(token_id) == NEW_WALLET.lower()
        assert registry.is_valid(token_id) is False
        assert registry.token(token_id).issuer == ISSUER
        assert registry.balance_of(OLD_WALLET) == 1
        assert registry.tokens_of_owner(NEW_WALLET) == (token_id,)
        assert registry.emitted_count() == 2
        assert registry.holders_count() == 2

        pulled = exporter.named("Pulled")
        assert len(pulled) == 1
        assert pulled[0].recipient == NEW_WALLET.lower()

    asyncio.run(run())


def test_pull_rejects_bad_signatures() -> None:
    async def run() -> None:
        registry, key = _setup()
        token_id = await registry.mint(ISSUER, OLD_WALLET)

        wrong_recipient = sign_pull(key, token_id=token_id, owner=OLD_WALLET, recipient="someone-else")
        with pytest.raises(InvalidSignatureError):
            await registry.pull(NEW_WALLET, token_id, OLD_WALLET, wrong_recipient)

        stranger = Ed25519PrivateKey.generate()
        forged = sign_pull(stranger, token_id=token_id, owner=OLD_WALLET, recipient=NEW_WALLET)
        with pytest.raises(UnauthorizedError):
            await registry.pull(NEW_WALLET, token_id, OLD_WALLET, forged)
        with pytest.raises(InvalidSignatureError):
            await registry.pull(NEW_WALLET, token_id, OLD_WALLET, "not base64 !!")

        assert registry.owner_of(token_id) == OLD_WALLET.lower()

    asyncio.run(run())


def test_pull_checks_owner_and_existence() -> None:
    async def run() -> None:
        registry, key = _setup()
        token_id = await registry.mint(ISSUER, OLD_WALLET)
        signature = sign_pull(key, token_id=token_id, owner=OLD_WALLET, recipient=NEW_WALLET)

        with pytest.raises(NotFoundError):
            await registry.pull(NEW_WALLET, 99, OLD_WALLET, signature)
        with pytest.raises(UnauthorizedError):
            await registry.pull(NEW_WALLET, token_id, "someone-else", signature)
        with pytest.raises(ValueError):
            await registry.pull(OLD_WALLET, token_id, OLD_WALLET, signature)

    asyncio.run(run())


def test_keyring_accepts_raw_public_key_bytes() -> None:
    key = Ed25519PrivateKey.generate()
    raw = key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
    keyring = Ed25519KeyRing()
    keyring.register(OLD_WALLET, raw)

    message = pull_message(1, OLD_WALLET, NEW_WALLET)
    signature = sign_pull(key, token_id=1, owner=OLD_WALLET, recipient=NEW_WALLET)
    assert keyring.verify(OLD_WALLET.lower(), message, signature) is True
    assert keyring.verify(NEW_WALLET, message, signature) is False

    with pytest.raises(ValueError):
        keyring.register(NEW_WALLET, b"short")


def test_pull_message_is_canonical() -> None:
    assert pull_message(7, OLD_WALLET, NEW_WALLET) == pull_message(7, OLD_WALLET.lower(), NEW_WALLET.upper().replace("0X", "0x"))
    assert pull_message(7, OLD_WALLET, NEW_WALLET) != pull_message(8, OLD_WALLET, NEW_WALLET)


def test_pullable_registry_capabilities() -> None:
    registry, _ = _setup()
    assert registry.supports(Capability.PULL) is True
    assert registry.supports(Capability.METADATA) is True
