import asyncio

import pytest

from ntt_registry import Capability, DelegatedRegistry, InvalidAddressError, UnauthorizedError
from ntt_registry.utils.address import ZERO_ADDRESS

ISSUER = "issuer"
OPERATOR = "operator"
ALICE = "alice"
BOB = "bob"


def test_delegated_grant_is_single_use() -> None:
    async def run() -> None:
        registry = DelegatedRegistry(ISSUER)
        await registry.delegate(ISSUER, OPERATOR, ALICE)
        assert registry.has_mint_approval(OPERATOR, ALICE) is True

        token_id = await registry.mint(OPERATOR, ALICE)
        assert registry.owner_of(token_id) == ALICE
        assert registry.issuer_of(token_id) == OPERATOR
        assert registry.has_mint_approval(OPERATOR, ALICE) is False

        with pytest.raises(UnauthorizedError):
            await registry.mint(OPERATOR, ALICE)
        assert registry.balance_of(ALICE) == 1

        await registry.delegate(ISSUER, OPERATOR, ALICE)
        second = await registry.mint(OPERATOR, ALICE)
        assert second != token_id

    asyncio.run(run())


def test_grant_is_scoped_to_owner() -> None:
    async def run() -> None:
        registry = DelegatedRegistry(ISSUER)
        await registry.delegate(ISSUER, OPERATOR, ALICE)
        with pytest.raises(UnauthorizedError):
            await registry.mint(OPERATOR, BOB)
        assert registry.has_mint_approval(OPERATOR, ALICE) is True

    asyncio.run(run())


def test_redelegation_does_not_stack() -> None:
    async def run() -> None:
        registry = DelegatedRegistry(ISSUER)
        await registry.delegate(ISSUER, OPERATOR, ALICE)
        await registry.delegate(ISSUER, OPERATOR, ALICE)
        await registry.mint(OPERATOR, ALICE)
        with pytest.raises(UnauthorizedError):
            await registry.mint(OPERATOR, ALICE)

    asyncio.run(run())


def test_issuer_mints_without_consuming_grants() -> None:
    async def run() -> None:
        registry = DelegatedRegistry(ISSUER)
        await registry.delegate(ISSUER, OPERATOR, ALICE)
        token_id = await registry.mint(ISSUER, ALICE)
        assert registry.issuer_of(token_id) == ISSUER
        assert registry.has_mint_approval(OPERATOR, ALICE) is True

    asyncio.run(run())


def test_only_issuer_can_delegate() -> None:
    async def run() -> None:
        registry = DelegatedRegistry(ISSUER)
        with pytest.raises(UnauthorizedError):
            await registry.delegate(OPERATOR, OPERATOR, ALICE)
        assert registry.has_mint_approval(OPERATOR, ALICE) is False

    asyncio.run(run())


def test_delegate_batch_is_all_or_nothing() -> None:
    async def run() -> None:
        registry = DelegatedRegistry(ISSUER)
        await registry.delegate_batch(ISSUER, ["op-1", "op-2"], [ALICE, BOB])
        assert registry.has_mint_approval("op-1", ALICE) is True
        assert registry.has_mint_approval("op-2", BOB) is True

        with pytest.raises(ValueError):
            await registry.delegate_batch(ISSUER, ["op-3"], [ALICE, BOB])
        with pytest.raises(InvalidAddressError):
            await registry.delegate_batch(ISSUER, ["op-3", "op-4"], [ALICE, ZERO_ADDRESS])
        assert registry.has_mint_approval("op-3", ALICE) is False

        await registry.mint("op-2", BOB)
        assert registry.has_mint_approval("op-1", ALICE) is True

    asyncio.run(run())


def test_delegated_registry_capabilities() -> None:
    registry = DelegatedRegistry(ISSUER)
    assert registry.supports(Capability.DELEGATE) is True
    assert registry.supports(Capability.ENUMERABLE) is True
    assert registry.supports(Capability.CONSENSUS) is False


def test_concurrent_mints_consume_one_grant_once() -> None:
    async def run() -> None:
        registry = DelegatedRegistry(ISSUER)
        await registry.delegate(ISSUER, OPERATOR, ALICE)

        results = await asyncio.gather(
            registry.mint(OPERATOR, ALICE),
            registry.mint(OPERATOR, ALICE),
            return_exceptions=True,
        )

        minted = [r for r in results if isinstance(r, int)]
        rejected = [r for r in results if isinstance(r, UnauthorizedError)]
        assert minted == [1]
        assert len(rejected) == 1
        assert registry.balance_of(ALICE) == 1
        assert registry.has_mint_approval(OPERATOR, ALICE) is False

    asyncio.run(run())
