"""Cancel a BasicNft listing as the ``deployer`` account."""

from __future__ import annotations

import sys
from typing import Optional

from loguru import logger

from nft_marketplace.config import config
from nft_marketplace.deployments import Deployments
from nft_marketplace.log import configure_logging
from nft_marketplace.marketplace import MarketplaceClient

TOKEN_ID = 0


def cancel_item(deployments: Deployments, token_id: int = TOKEN_ID, collection: str = "BasicNft") -> None:
    marketplace = MarketplaceClient(
        deployments.client("deployer"), deployments.get("NftMarketplace").address
    )
    marketplace.cancel_listing(deployments.get(collection).address, token_id)
    logger.info(f"Cancelled listing of tokenId {token_id}")


def main(deployments: Optional[Deployments] = None, token_id: int = TOKEN_ID) -> int:
    try:
        cancel_item(deployments or Deployments(), token_id)
    except Exception as e:
        logger.exception(f"Cancel failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    configure_logging(config.log_level)
    sys.exit(main())
