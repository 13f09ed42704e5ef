"""Run the issue -> revoke -> discover -> verify scenario end to end."""

from __future__ import annotations

import asyncio
import logging

from ..config import RegistryConfig
from ..discovery import DiscoveryStore
from ..exporters.postgres import create_exporter_from_env
from ..registry import DelegatedRegistry

ISSUER = "0x44222526b4acfdaf979367c1dbe148035f1403ff"
HOLDER = "0x77aabf4893ddea4f0ad14e26d9151c2940463bbf"
OPERATOR = "0xbd9bae0e5a75361e3d8f47ec7c38271ae5650bc2"


async def main() -> None:
    exporter = create_exporter_from_env()
    config = RegistryConfig.from_env()
    registry = DelegatedRegistry(ISSUER, config=config, exporter=exporter)
    store = DiscoveryStore(exporter=exporter)
    try:
        print("REGISTRY:", registry.name(), registry.symbol(), registry.address)

        token_id = await registry.mint(ISSUER, HOLDER)
        print("MINTED:", token_id, "valid:", registry.is_valid(token_id), "balance:", registry.balance_of(HOLDER))

        await registry.revoke(ISSUER, token_id)
        print("REVOKED:", token_id, "valid:", registry.is_valid(token_id), "owner:", registry.owner_of(token_id))

        await registry.delegate(ISSUER, OPERATOR, HOLDER)
        delegated_id = await registry.mint(OPERATOR, HOLDER)
        print("DELEGATED MINT:", delegated_id, "issuer:", registry.issuer_of(delegated_id))

        await store.add(HOLDER, registry.address)
        for address in store.get(HOLDER):
            print("DISCOVERED:", address, "has valid:", registry.has_valid(HOLDER), "uri:", registry.token_uri(token_id))
        print("TOTAL:", registry.emitted_count(), "holders:", registry.holders_count())
    finally:
        await exporter.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
