"""Deploys NftMarketplace and verifies it on public networks."""

from __future__ import annotations

from loguru import logger

from nft_marketplace.deployments import Deployment, Deployments
from nft_marketplace.verify import verify

TAGS = ("all", "nftmarketplace")


def deploy(deployments: Deployments) -> Deployment:
    network = deployments.network
    logger.info("---------------------------")
    logger.info("Deploying Contract...")
    args: list = []
    nft_marketplace = deployments.deploy("NftMarketplace", args=args)

    if not network.is_development and deployments.config.explorer_api_key:
        logger.info("Verifying...")
        verify(
            nft_marketplace.address,
            deployments.artifact("NftMarketplace").code,
            args,
            config=deployments.config,
        )
    logger.info("Contract Deployed!")
    logger.info("---------------------------")
    return nft_marketplace
