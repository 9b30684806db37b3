"""Block-explorer verification of originated contracts."""

from __future__ import annotations

import time
from typing import Any, Iterable, Optional

import httpx
from loguru import logger

from nft_marketplace.config import Config, config as default_config
from nft_marketplace.errors import ConfigError, VerificationError


def fetch_code(
    client: httpx.Client,
    address: str,
    attempts: int = 5,
    interval_seconds: float = 10.0,
) -> list:
    """On-chain code of ``address`` as Micheline, waiting for the explorer to index it."""
    url = f"/v1/contracts/{address}/code"
    for attempt in range(1, attempts + 1):
        response = client.get(url, params={"format": 1})
        # TzKT answers 204 until the origination is indexed
        if response.status_code in (204, 404) or not response.content:
            logger.debug(f"{address} not indexed yet (attempt {attempt}/{attempts})")
            if attempt < attempts:
                time.sleep(interval_seconds)
            continue
        response.raise_for_status()
        return response.json()
    raise VerificationError(f"Explorer never indexed {address}")


def verify(
    address: str,
    code: list,
    args: Iterable[Any] = (),
    config: Optional[Config] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> None:
    """Check that the code deployed at ``address`` is the compiled ``code``."""
    config = config or default_config
    network = config.network
    if not network.explorer_api_url:
        raise ConfigError(f"No explorer API configured for {network.name}")

    headers = {"User-Agent": "nft-marketplace-deployer/1.0"}
    if config.explorer_api_key:
        headers["apikey"] = config.explorer_api_key

    with httpx.Client(
        base_url=network.explorer_api_url,
        headers=headers,
        timeout=30,
        transport=transport,
    ) as client:
        onchain = fetch_code(
            client,
            address,
            attempts=config.verify_attempts,
            interval_seconds=config.verify_interval_seconds,
        )

    if onchain != code:
        raise VerificationError(f"Code at {address} does not match the compiled artifact")
    logger.info(f"Verified {address} (args: {list(args)})")
