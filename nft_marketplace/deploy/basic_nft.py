"""Deploys the two BasicNft collections used by the tests and the mint script."""

from __future__ import annotations

from loguru import logger

from nft_marketplace.contracts import NFT_NAME, NFT_SYMBOL, PUG_URI, SHIBA_INU_URI
from nft_marketplace.deployments import Deployment, Deployments
from nft_marketplace.verify import verify

TAGS = ("all", "basicnft")

COLLECTIONS = {
    "BasicNft": PUG_URI,
    "BasicNftTwo": SHIBA_INU_URI,
}


def deploy(deployments: Deployments) -> list[Deployment]:
    network = deployments.network
    logger.info("---------------------------")
    deployed = []
    for name, token_uri in COLLECTIONS.items():
        logger.info(f"Deploying {name}...")
        args = [NFT_NAME, NFT_SYMBOL, token_uri]
        deployment = deployments.deploy(name, args=args)
        if not network.is_development and deployments.config.explorer_api_key:
            logger.info("Verifying...")
            verify(
                deployment.address,
                deployments.artifact(name).code,
                args,
                config=deployments.config,
            )
        deployed.append(deployment)
    logger.info("---------------------------")
    return deployed
