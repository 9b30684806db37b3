"""Mint a BasicNft token, approve the marketplace and list it."""

from __future__ import annotations

import sys
from typing import Optional

from loguru import logger

from nft_marketplace.config import config
from nft_marketplace.deployments import Deployments
from nft_marketplace.log import configure_logging
from nft_marketplace.marketplace import BasicNftClient, MarketplaceClient

PRICE = 100_000  # 0.1 tez


def mint_and_list(deployments: Deployments, price: int = PRICE, collection: str = "BasicNft") -> int:
    client = deployments.client("deployer")
    marketplace = MarketplaceClient(client, deployments.get("NftMarketplace").address)
    nft = BasicNftClient(client, deployments.get(collection).address)

    logger.info("Minting NFT...")
    token_id = nft.mint_nft()
    logger.info("Approving NFT...")
    nft.approve(marketplace.address, token_id)
    logger.info("Listing NFT...")
    marketplace.list_item(nft.address, token_id, price)
    logger.info(f"Listed tokenId {token_id} for {price} mutez")
    return token_id


def main(deployments: Optional[Deployments] = None, price: int = PRICE) -> int:
    try:
        mint_and_list(deployments or Deployments(), price)
    except Exception as e:
        logger.exception(f"Mint and list failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    configure_logging(config.log_level)
    sys.exit(main())
