"""
Basic NFT - Smart Contract SmartPy
===================================
Minimal non-fungible token used to exercise the marketplace.

Every token shares the same metadata URI. Ownership, balances and single
token approvals follow the usual NFT semantics; the marketplace reads them
through the `owner_of` and `get_approved` views.
"""

import smartpy as sp


@sp.module
def basic_nft_main():

    class BasicNft(sp.Contract):
        def __init__(self, name, symbol, token_uri):
            sp.cast(name, sp.string)
            sp.cast(symbol, sp.string)
            sp.cast(token_uri, sp.string)

            self.data.name = name
            self.data.symbol = symbol
            self.data.token_uri = token_uri
            self.data.token_counter = sp.nat(0)
            self.data.owners = sp.cast(sp.big_map(), sp.big_map[sp.nat, sp.address])
            self.data.balances = sp.cast(sp.big_map(), sp.big_map[sp.address, sp.nat])
            self.data.token_approvals = sp.cast(
                sp.big_map(),
                sp.big_map[sp.nat, sp.address]
            )

        # ============== ENTRYPOINTS ==============

        @sp.entrypoint
        def mint_nft(self):
            """Mint the next token to the sender."""
            token_id = self.data.token_counter
            self.data.owners[token_id] = sp.sender
            if self.data.balances.contains(sp.sender):
                self.data.balances[sp.sender] += 1
            else:
                self.data.balances[sp.sender] = 1
            self.data.token_counter += 1

            sp.emit(token_id, tag="NftMinted")

        @sp.entrypoint
        def approve(self, approved, token_id):
            """Approve an operator for one token. `None` clears the approval."""
            sp.cast(approved, sp.option[sp.address])
            sp.cast(token_id, sp.nat)

            assert self.data.owners.contains(token_id), "BasicNft__InvalidTokenId"
            assert self.data.owners[token_id] == sp.sender, "BasicNft__NotOwner"

            if approved.is_some():
                self.data.token_approvals[token_id] = approved.unwrap_some()
            else:
                if self.data.token_approvals.contains(token_id):
                    del self.data.token_approvals[token_id]

            sp.emit(sp.record(
                owner=sp.sender,
                approved=approved,
                token_id=token_id
            ), tag="Approval")

        @sp.entrypoint
        def transfer_from(self, from_, to_, token_id):
            sp.cast(from_, sp.address)
            sp.cast(to_, sp.address)
            sp.cast(token_id, sp.nat)

            assert self.data.owners.contains(token_id), "BasicNft__InvalidTokenId"

            owner = self.data.owners[token_id]
            is_approved = False
            if self.data.token_approvals.contains(token_id):
                is_approved = self.data.token_approvals[token_id] == sp.sender
            assert (owner == sp.sender) or is_approved, "BasicNft__NotOwnerOrApproved"
            assert owner == from_, "BasicNft__WrongFrom"

            if self.data.token_approvals.contains(token_id):
                del self.data.token_approvals[token_id]

            self.data.balances[from_] = sp.as_nat(self.data.balances[from_] - 1)
            if self.data.balances.contains(to_):
                self.data.balances[to_] += 1
            else:
                self.data.balances[to_] = 1
            self.data.owners[token_id] = to_

            sp.emit(sp.record(
                from_=from_,
                to_=to_,
                token_id=token_id
            ), tag="Transfer")

        # ============== VIEWS ==============

        @sp.onchain_view
        def owner_of(self, token_id):
            sp.cast(token_id, sp.nat)
            assert self.data.owners.contains(token_id), "BasicNft__InvalidTokenId"
            return self.data.owners[token_id]

        @sp.onchain_view
        def get_approved(self, token_id):
            """Approved operator of a token, if any."""
            sp.cast(token_id, sp.nat)
            assert self.data.owners.contains(token_id), "BasicNft__InvalidTokenId"
            result = sp.cast(None, sp.option[sp.address])
            if self.data.token_approvals.contains(token_id):
                result = sp.Some(self.data.token_approvals[token_id])
            return result

        @sp.onchain_view
        def balance_of(self, owner):
            sp.cast(owner, sp.address)
            result = sp.nat(0)
            if self.data.balances.contains(owner):
                result = self.data.balances[owner]
            return result

        @sp.onchain_view
        def token_uri(self, token_id):
            sp.cast(token_id, sp.nat)
            assert self.data.owners.contains(token_id), "BasicNft__InvalidTokenId"
            return self.data.token_uri

        @sp.onchain_view
        def get_token_counter(self):
            return self.data.token_counter
