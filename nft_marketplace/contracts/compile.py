"""
Compilation targets
===================
Running this file with SmartPy writes the Michelson code and initial storage
of every deployable contract, one scenario directory per deployment name,
under the working directory. ``nft-marketplace compile`` runs it from inside
``ARTIFACTS_DIR``, where the deploy scripts look the artifacts up
(``*_contract.tz`` / ``*_storage.tz``).
"""

import smartpy as sp

from nft_marketplace.contracts import (
    NFT_NAME,
    NFT_SYMBOL,
    PUG_URI,
    SHIBA_INU_URI,
    basic_nft,
    nft_marketplace,
)


@sp.add_test()
def compile_nft_marketplace():
    scenario = sp.test_scenario("NftMarketplace", nft_marketplace.marketplace_main)
    scenario += nft_marketplace.marketplace_main.NftMarketplace()


@sp.add_test()
def compile_basic_nft():
    scenario = sp.test_scenario("BasicNft", basic_nft.basic_nft_main)
    scenario += basic_nft.basic_nft_main.BasicNft(
        name=NFT_NAME, symbol=NFT_SYMBOL, token_uri=PUG_URI
    )


@sp.add_test()
def compile_basic_nft_two():
    scenario = sp.test_scenario("BasicNftTwo", basic_nft.basic_nft_main)
    scenario += basic_nft.basic_nft_main.BasicNft(
        name=NFT_NAME, symbol=NFT_SYMBOL, token_uri=SHIBA_INU_URI
    )
