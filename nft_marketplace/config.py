"""Network and account configuration for the marketplace harness."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from nft_marketplace.errors import ConfigError

load_dotenv()

# Networks where contracts are never verified and sandbox keys are allowed
DEVELOPMENT_CHAINS = ("sandbox", "localhost")

# Flextesa bootstrap accounts (alice, bob); public sandbox keys
SANDBOX_KEYS = {
    "deployer": "edsk3QoqBuvdamxouPhin7swCvkQNgq4jP5KZPbwWNnwdZpSpJiEbq",
    "player": "edsk3RFfvaFaxbHx8BMtEW1rKQcPtDML3LXjNqMNLCzC3wLC1bWbAt",
}


@dataclass(frozen=True)
class NetworkConfig:
    """Connection settings for one network."""

    name: str
    rpc_url: str
    explorer_api_url: Optional[str] = None
    block_confirmations: int = 1

    @property
    def is_development(self) -> bool:
        return self.name in DEVELOPMENT_CHAINS


NETWORKS = {
    "sandbox": NetworkConfig(
        name="sandbox",
        rpc_url=os.getenv("SANDBOX_RPC_URL", "http://localhost:20000"),
    ),
    "localhost": NetworkConfig(
        name="localhost",
        rpc_url=os.getenv("LOCALHOST_RPC_URL", "http://127.0.0.1:8732"),
    ),
    "ghostnet": NetworkConfig(
        name="ghostnet",
        rpc_url=os.getenv("GHOSTNET_RPC_URL", "https://ghostnet.ecadinfra.com"),
        explorer_api_url="https://api.ghostnet.tzkt.io",
        block_confirmations=int(os.getenv("GHOSTNET_BLOCK_CONFIRMATIONS", "2")),
    ),
    "mainnet": NetworkConfig(
        name="mainnet",
        rpc_url=os.getenv("MAINNET_RPC_URL", "https://mainnet.ecadinfra.com"),
        explorer_api_url="https://api.tzkt.io",
        block_confirmations=int(os.getenv("MAINNET_BLOCK_CONFIRMATIONS", "3")),
    ),
}


@dataclass
class Config:
    """Harness configuration."""

    network_name: str = field(default_factory=lambda: os.getenv("NETWORK", "sandbox"))

    # Named accounts
    deployer_key: str = field(
        default_factory=lambda: os.getenv("DEPLOYER_PRIVATE_KEY", "")
    )
    player_key: str = field(default_factory=lambda: os.getenv("PLAYER_PRIVATE_KEY", ""))

    # Block explorer
    explorer_api_key: str = field(
        default_factory=lambda: os.getenv("EXPLORER_API_KEY", "")
    )
    verify_attempts: int = field(
        default_factory=lambda: int(os.getenv("VERIFY_ATTEMPTS", "5"))
    )
    verify_interval_seconds: float = field(
        default_factory=lambda: float(os.getenv("VERIFY_INTERVAL_SECONDS", "10"))
    )

    # Paths
    artifacts_dir: Path = field(
        default_factory=lambda: Path(os.getenv("ARTIFACTS_DIR", "compile"))
    )
    deployments_dir: Path = field(
        default_factory=lambda: Path(os.getenv("DEPLOYMENTS_DIR", "deployments"))
    )

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    @property
    def network(self) -> NetworkConfig:
        try:
            return NETWORKS[self.network_name]
        except KeyError:
            raise ConfigError(f"Unknown network: {self.network_name}") from None

    def named_account(self, name: str) -> str:
        """Secret key for a named account on the active network."""
        key = {"deployer": self.deployer_key, "player": self.player_key}.get(name)
        if key is None:
            raise ConfigError(f"Unknown named account: {name}")
        if not key and self.network.is_development:
            return SANDBOX_KEYS[name]
        if not key:
            raise ConfigError(f"No key configured for account '{name}' on {self.network_name}")
        return key

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if self.network_name not in NETWORKS:
            errors.append(f"NETWORK must be one of {', '.join(NETWORKS)}")
            return errors
        if not self.network.is_development and not self.deployer_key:
            errors.append("DEPLOYER_PRIVATE_KEY is required outside development chains")
        if self.verify_attempts < 1:
            errors.append("VERIFY_ATTEMPTS must be at least 1")
        return errors


config = Config()
