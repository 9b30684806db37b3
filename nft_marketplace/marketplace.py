"""Client for a deployed NftMarketplace and its BasicNft collections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from nft_marketplace.chain import ChainClient, micheline_int, parse_events
from nft_marketplace.errors import HarnessError


@dataclass
class Listing:
    price: int
    seller: str


class MarketplaceClient:
    """Calls NftMarketplace entrypoints as the client's account.

    Amounts are in mutez. Failed calls raise ``ContractRevert`` with the
    contract's failwith string.
    """

    def __init__(self, client: ChainClient, address: str) -> None:
        self.client = client
        self.address = address

    def list_item(self, nft_address: str, token_id: int, price: int) -> dict:
        return self.client.call(
            self.address, "list_item", nft_address=nft_address, token_id=token_id, price=price
        )

    def buy_item(self, nft_address: str, token_id: int, value: int) -> dict:
        return self.client.call(
            self.address, "buy_item", nft_address=nft_address, token_id=token_id, amount=value
        )

    def cancel_listing(self, nft_address: str, token_id: int) -> dict:
        return self.client.call(
            self.address, "cancel_listing", nft_address=nft_address, token_id=token_id
        )

    def update_listing(self, nft_address: str, token_id: int, new_price: int) -> dict:
        return self.client.call(
            self.address,
            "update_listing",
            nft_address=nft_address,
            token_id=token_id,
            new_price=new_price,
        )

    def withdraw_proceeds(self) -> dict:
        return self.client.call(self.address, "withdraw_proceeds")

    def get_listing(self, nft_address: str, token_id: int) -> Optional[Listing]:
        value = self.client.big_map_get(
            self.address, "listings", {"nft_address": nft_address, "token_id": token_id}
        )
        if value is None:
            return None
        return Listing(price=int(value["price"]), seller=value["seller"])

    def get_proceeds(self, seller: str) -> int:
        value = self.client.big_map_get(self.address, "proceeds", seller)
        return int(value) if value is not None else 0


class BasicNftClient:
    """Calls BasicNft entrypoints as the client's account."""

    def __init__(self, client: ChainClient, address: str) -> None:
        self.client = client
        self.address = address

    def mint_nft(self) -> int:
        """Mint a token and return its id, read from the ``NftMinted`` event."""
        receipt = self.client.call(self.address, "mint_nft")
        events = parse_events(receipt, tag="NftMinted")
        if not events:
            raise HarnessError(f"No NftMinted event in {receipt.get('hash', 'receipt')}")
        return micheline_int(events[0].payload)

    def approve(self, operator: Optional[str], token_id: int) -> dict:
        """Approve ``operator`` for ``token_id``; ``None`` clears the approval."""
        return self.client.call(self.address, "approve", approved=operator, token_id=token_id)

    def owner_of(self, token_id: int) -> Optional[str]:
        return self.client.big_map_get(self.address, "owners", token_id)
