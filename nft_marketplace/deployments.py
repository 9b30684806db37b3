"""Deployment records and the tag-filtered deploy runner."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Optional

from loguru import logger

from nft_marketplace.chain import Artifact, ChainClient, load_artifact, originated_contracts
from nft_marketplace.config import Config, config as default_config
from nft_marketplace.errors import DeploymentNotFound, HarnessError

ClientFactory = Callable[[str, str, int], ChainClient]


@dataclass
class Deployment:
    """Where a contract lives on one network."""

    name: str
    address: str
    network: str
    transaction_hash: str
    deployer: str
    args: list = field(default_factory=list)


class Deployments:
    """Originates contracts and keeps one JSON record per contract and network."""

    def __init__(
        self,
        config: Optional[Config] = None,
        client_factory: ClientFactory = ChainClient,
    ) -> None:
        self.config = config or default_config
        self._client_factory = client_factory
        self._clients: dict[tuple[str, int], ChainClient] = {}

    @property
    def network(self):
        return self.config.network

    @property
    def records_dir(self) -> Path:
        return self.config.deployments_dir / self.network.name

    def client(self, account: str = "deployer", confirmations: Optional[int] = None) -> ChainClient:
        """Client signing as a named account.

        Waits for the network's ``block_confirmations`` unless ``confirmations`` is given.
        """
        confirmations = confirmations or self.network.block_confirmations
        if (account, confirmations) not in self._clients:
            self._clients[(account, confirmations)] = self._client_factory(
                self.network.rpc_url,
                self.config.named_account(account),
                confirmations,
            )
        return self._clients[(account, confirmations)]

    def named_accounts(self) -> dict[str, str]:
        return {name: self.client(name).address for name in ("deployer", "player")}

    def artifact(self, name: str) -> Artifact:
        return load_artifact(self.config.artifacts_dir, name)

    def deploy(self, name: str, args: Iterable = (), from_: str = "deployer") -> Deployment:
        """Originate the compiled artifact ``name`` and record it."""
        artifact = self.artifact(name)
        client = self.client(from_)
        logger.info(f'deploying "{name}" from {client.address}')

        receipt = client.originate(artifact)
        addresses = originated_contracts(receipt)
        if not addresses:
            raise HarnessError(f"Origination of {name} returned no contract address")

        deployment = Deployment(
            name=name,
            address=addresses[0],
            network=self.network.name,
            transaction_hash=receipt.get("hash", ""),
            deployer=client.address,
            args=list(args),
        )
        self.save(deployment)
        logger.info(
            f'deployed "{name}" at {deployment.address} (tx: {deployment.transaction_hash})'
        )
        return deployment

    def save(self, deployment: Deployment) -> Path:
        self.records_dir.mkdir(parents=True, exist_ok=True)
        path = self.records_dir / f"{deployment.name}.json"
        path.write_text(json.dumps(asdict(deployment), indent=2))
        return path

    def get(self, name: str) -> Deployment:
        path = self.records_dir / f"{name}.json"
        if not path.exists():
            raise DeploymentNotFound(f"No deployment of {name} on {self.network.name}")
        return Deployment(**json.loads(path.read_text()))

    def run(self, tags: Iterable[str] = ("all",)) -> list[str]:
        """Run every deploy script sharing a tag with ``tags``; returns the script names run."""
        from nft_marketplace.deploy import SCRIPTS

        wanted = set(tags)
        ran = []
        for script in SCRIPTS:
            if wanted.isdisjoint(script.TAGS):
                continue
            script.deploy(self)
            ran.append(script.__name__.rsplit(".", 1)[-1])
        return ran

    def fixture(self, tags: Iterable[str] = ("all",)) -> "Deployments":
        """Redeploy from scratch: drop this network's records, then run the tagged scripts."""
        if not self.network.is_development:
            raise HarnessError(f"Fixtures only run on development chains, not {self.network.name}")
        if self.records_dir.exists():
            for record in self.records_dir.glob("*.json"):
                record.unlink()
        self.run(tags)
        return self
