"""
NFT Marketplace - Smart Contract SmartPy
=========================================
Marketplace for NFTs held in any contract exposing the BasicNft views
(`owner_of`, `get_approved`) and the `transfer_from` entrypoint.

Features:
- Listing of an approved NFT at a seller-chosen price
- Purchase, with the NFT moved to the buyer by the NFT contract
- Cancellation and price update by the owner
- Proceeds accumulated per seller, withdrawn on demand (pull pattern)
"""

import smartpy as sp


@sp.module
def marketplace_main():

    # Custom types
    listing_key: type = sp.record(
        nft_address=sp.address,
        token_id=sp.nat
    )

    listing_type: type = sp.record(
        price=sp.mutez,
        seller=sp.address
    )

    transfer_type: type = sp.record(
        from_=sp.address,
        to_=sp.address,
        token_id=sp.nat
    )

    class NftMarketplace(sp.Contract):
        """
        Marketplace contract. Holds no NFT itself: the seller keeps the token
        until a sale and the marketplace only needs to be its approved operator.
        """

        def __init__(self):
            self.data.listings = sp.cast(
                sp.big_map(),
                sp.big_map[listing_key, listing_type]
            )
            self.data.proceeds = sp.cast(
                sp.big_map(),
                sp.big_map[sp.address, sp.mutez]
            )

        # ============== ENTRYPOINTS ==============

        @sp.entrypoint
        def list_item(self, nft_address, token_id, price):
            """List an NFT the sender owns."""
            sp.cast(nft_address, sp.address)
            sp.cast(token_id, sp.nat)
            sp.cast(price, sp.mutez)

            assert sp.amount == sp.mutez(0), "NftMarketplace__NoTezExpected"

            key = sp.record(nft_address=nft_address, token_id=token_id)
            assert not self.data.listings.contains(key), "NftMarketplace__AlreadyListed"

            owner = sp.view(
                "owner_of", nft_address, token_id, sp.address
            ).unwrap_some(error="NftMarketplace__InvalidNftContract")
            assert owner == sp.sender, "NftMarketplace__NotOwner"
            assert price > sp.mutez(0), "NftMarketplace__PriceBelowZero"

            approved = sp.view(
                "get_approved", nft_address, token_id, sp.option[sp.address]
            ).unwrap_some(error="NftMarketplace__InvalidNftContract")
            assert approved == sp.Some(sp.self_address), "NftMarketplace__NotApprovedForMarketplace"

            self.data.listings[key] = sp.record(price=price, seller=sp.sender)

            sp.emit(sp.record(
                seller=sp.sender,
                nft_address=nft_address,
                token_id=token_id,
                price=price
            ), tag="NftListed")

        @sp.entrypoint
        def buy_item(self, nft_address, token_id):
            """Buy a listed NFT. Any amount above the price goes to the seller."""
            sp.cast(nft_address, sp.address)
            sp.cast(token_id, sp.nat)

            key = sp.record(nft_address=nft_address, token_id=token_id)
            assert self.data.listings.contains(key), "NftMarketplace__NotListed"

            listing = self.data.listings[key]
            assert sp.amount >= listing.price, "NftMarketplace__PriceTooLow"

            if self.data.proceeds.contains(listing.seller):
                self.data.proceeds[listing.seller] += sp.amount
            else:
                self.data.proceeds[listing.seller] = sp.amount

            del self.data.listings[key]

            nft = sp.contract(
                transfer_type, nft_address, entrypoint="transfer_from"
            ).unwrap_some(error="NftMarketplace__InvalidNftContract")
            sp.transfer(
                sp.record(from_=listing.seller, to_=sp.sender, token_id=token_id),
                sp.mutez(0),
                nft
            )

            sp.emit(sp.record(
                buyer=sp.sender,
                nft_address=nft_address,
                token_id=token_id,
                price=listing.price
            ), tag="ItemBought")

        @sp.entrypoint
        def cancel_listing(self, nft_address, token_id):
            """Remove a listing."""
            sp.cast(nft_address, sp.address)
            sp.cast(token_id, sp.nat)

            assert sp.amount == sp.mutez(0), "NftMarketplace__NoTezExpected"

            owner = sp.view(
                "owner_of", nft_address, token_id, sp.address
            ).unwrap_some(error="NftMarketplace__InvalidNftContract")
            assert owner == sp.sender, "NftMarketplace__NotOwner"

            key = sp.record(nft_address=nft_address, token_id=token_id)
            assert self.data.listings.contains(key), "NftMarketplace__NotListed"

            del self.data.listings[key]

            sp.emit(sp.record(
                seller=sp.sender,
                nft_address=nft_address,
                token_id=token_id
            ), tag="ItemCancelled")

        @sp.entrypoint
        def update_listing(self, nft_address, token_id, new_price):
            """Change the price of a listing."""
            sp.cast(nft_address, sp.address)
            sp.cast(token_id, sp.nat)
            sp.cast(new_price, sp.mutez)

            assert sp.amount == sp.mutez(0), "NftMarketplace__NoTezExpected"

            key = sp.record(nft_address=nft_address, token_id=token_id)
            assert self.data.listings.contains(key), "NftMarketplace__NotListed"

            owner = sp.view(
                "owner_of", nft_address, token_id, sp.address
            ).unwrap_some(error="NftMarketplace__InvalidNftContract")
            assert owner == sp.sender, "NftMarketplace__NotOwner"
            assert new_price > sp.mutez(0), "NftMarketplace__PriceBelowZero"

            self.data.listings[key].price = new_price

            sp.emit(sp.record(
                seller=sp.sender,
                nft_address=nft_address,
                token_id=token_id,
                price=new_price
            ), tag="NftListed")

        @sp.entrypoint
        def withdraw_proceeds(self):
            """Send the sender's accumulated proceeds."""
            assert sp.amount == sp.mutez(0), "NftMarketplace__NoTezExpected"

            proceeds = sp.mutez(0)
            if self.data.proceeds.contains(sp.sender):
                proceeds = self.data.proceeds[sp.sender]
            assert proceeds > sp.mutez(0), "NftMarketplace__NoProceeds"

            # Balance is cleared before the transfer is queued
            del self.data.proceeds[sp.sender]
            sp.send(sp.sender, proceeds)

            sp.emit(sp.record(
                recipient=sp.sender,
                amount=proceeds
            ), tag="ProceedsWithdrawn")

        # ============== VIEWS ==============

        @sp.onchain_view
        def get_listing(self, key):
            """Listing for (nft_address, token_id), if any."""
            sp.cast(key, listing_key)
            result = sp.cast(None, sp.option[listing_type])
            if self.data.listings.contains(key):
                result = sp.Some(self.data.listings[key])
            return result

        @sp.onchain_view
        def get_proceeds(self, seller):
            sp.cast(seller, sp.address)
            result = sp.mutez(0)
            if self.data.proceeds.contains(seller):
                result = self.data.proceeds[seller]
            return result
