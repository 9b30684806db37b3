"""Buy a listed BasicNft token as the ``player`` account."""

from __future__ import annotations

import sys
from typing import Optional

from loguru import logger

from nft_marketplace.config import config
from nft_marketplace.deployments import Deployments
from nft_marketplace.errors import HarnessError
from nft_marketplace.log import configure_logging
from nft_marketplace.marketplace import MarketplaceClient

TOKEN_ID = 0


def buy_item(deployments: Deployments, token_id: int = TOKEN_ID, collection: str = "BasicNft") -> None:
    marketplace = MarketplaceClient(
        deployments.client("player"), deployments.get("NftMarketplace").address
    )
    nft_address = deployments.get(collection).address

    listing = marketplace.get_listing(nft_address, token_id)
    if listing is None:
        raise HarnessError(f"tokenId {token_id} of {nft_address} is not listed")
    marketplace.buy_item(nft_address, token_id, listing.price)
    logger.info(f"Bought tokenId {token_id} for {listing.price} mutez")


def main(deployments: Optional[Deployments] = None, token_id: int = TOKEN_ID) -> int:
    try:
        buy_item(deployments or Deployments(), token_id)
    except Exception as e:
        logger.exception(f"Buy failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    configure_logging(config.log_level)
    sys.exit(main())
