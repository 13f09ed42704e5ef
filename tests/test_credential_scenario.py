import asyncio

from ntt_registry import DiscoveryStore, StandardRegistry
from ntt_registry.demo.run_demo import main

ISSUER = "0x44222526B4aCfDaf979367C1Dbe148035F1403FF"
HOLDER = "0x77aabF4893DDEA4f0AD14e26D9151c2940463bbF"


def test_verifier_sees_revoked_credential_through_discovery() -> None:
    async def run() -> None:
        registry = StandardRegistry(ISSUER)
        store = DiscoveryStore()

        token_id = await registry.mint(ISSUER, HOLDER)
        assert token_id == 1
        assert registry.emitted_count() == 1
        assert registry.balance_of(HOLDER) == 1
        assert registry.is_valid(token_id) is True

        await registry.revoke(ISSUER, token_id)
        assert registry.is_valid(token_id) is False
        assert registry.balance_of(HOLDER) == 1
        assert registry.owner_of(token_id) == HOLDER.lower()

        await store.add(HOLDER, registry.address)
        registries = {registry.address: registry}
        published = store.get(HOLDER)
        assert published == (registry.address,)
        assert [registries[address].has_valid(HOLDER) for address in published] == [False]

    asyncio.run(run())


def test_demo_runs_with_in_memory_exporter(monkeypatch, capsys) -> None:
    monkeypatch.delenv("NTT_REGISTRY_PG_DSN", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    asyncio.run(main())
    out = capsys.readouterr().out
    assert "MINTED: 1" in out
    assert "DELEGATED MINT: 2" in out
    assert "has valid: True" in out
