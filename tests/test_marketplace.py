from __future__ import annotations

import pytest

from nft_marketplace.errors import HarnessError
from nft_marketplace.marketplace import BasicNftClient, Listing, MarketplaceClient
from tests.conftest import DummyChainClient, mint_receipt

MARKETPLACE = "KT1NftMarketplace1"
NFT = "KT1BasicNft2"
PRICE = 100_000


@pytest.fixture
def client():
    return DummyChainClient("http://localhost:20000", "edsk-deployer")


def test_entrypoint_calls(client) -> None:
    marketplace = MarketplaceClient(client, MARKETPLACE)
    marketplace.list_item(NFT, 0, PRICE)
    marketplace.update_listing(NFT, 0, 250_000)
    marketplace.buy_item(NFT, 0, PRICE)
    marketplace.cancel_listing(NFT, 0)
    marketplace.withdraw_proceeds()

    assert [(address, entrypoint) for address, entrypoint, _ in client.calls] == [
        (MARKETPLACE, "list_item"),
        (MARKETPLACE, "update_listing"),
        (MARKETPLACE, "buy_item"),
        (MARKETPLACE, "cancel_listing"),
        (MARKETPLACE, "withdraw_proceeds"),
    ]
    assert client.calls[0][2] == {"nft_address": NFT, "token_id": 0, "price": PRICE, "amount": 0}
    assert client.calls[1][2]["new_price"] == 250_000
    assert client.calls[2][2]["amount"] == PRICE


def test_get_listing(client) -> None:
    marketplace = MarketplaceClient(client, MARKETPLACE)
    assert marketplace.get_listing(NFT, 0) is None

    key = tuple(sorted({"nft_address": NFT, "token_id": 0}.items()))
    client.big_maps[(MARKETPLACE, "listings")] = {key: {"price": PRICE, "seller": "tz1seller"}}
    assert marketplace.get_listing(NFT, 0) == Listing(price=PRICE, seller="tz1seller")


def test_get_proceeds_defaults_to_zero(client) -> None:
    marketplace = MarketplaceClient(client, MARKETPLACE)
    assert marketplace.get_proceeds("tz1seller") == 0
    client.big_maps[(MARKETPLACE, "proceeds")] = {"tz1seller": PRICE}
    assert marketplace.get_proceeds("tz1seller") == PRICE


def test_mint_nft_returns_token_id(client) -> None:
    client.receipts["mint_nft"] = mint_receipt(4, source=NFT)
    assert BasicNftClient(client, NFT).mint_nft() == 4


def test_mint_nft_without_event(client) -> None:
    with pytest.raises(HarnessError):
        BasicNftClient(client, NFT).mint_nft()


def test_approve_and_revoke(client) -> None:
    nft = BasicNftClient(client, NFT)
    nft.approve(MARKETPLACE, 0)
    nft.approve(None, 0)
    assert client.calls[0][2]["approved"] == MARKETPLACE
    assert client.calls[1][2]["approved"] is None
