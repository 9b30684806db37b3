"""Mint one token from the BasicNftTwo collection."""

from __future__ import annotations

import sys
from typing import Optional

from loguru import logger

from nft_marketplace.config import config
from nft_marketplace.deployments import Deployments
from nft_marketplace.log import configure_logging
from nft_marketplace.marketplace import BasicNftClient

COLLECTION = "BasicNftTwo"


def mint(deployments: Deployments, collection: str = COLLECTION) -> int:
    basic_nft = deployments.get(collection)
    nft = BasicNftClient(deployments.client("deployer", confirmations=1), basic_nft.address)
    logger.info("Minting NFT...")
    token_id = nft.mint_nft()
    logger.info(f"Minted tokenId {token_id} from contract: {basic_nft.address}")
    return token_id


def main(deployments: Optional[Deployments] = None, collection: str = COLLECTION) -> int:
    try:
        mint(deployments or Deployments(), collection)
    except Exception as e:
        logger.exception(f"Mint failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    configure_logging(config.log_level)
    sys.exit(main())
