from __future__ import annotations

from pathlib import Path

import pytest

from nft_marketplace.config import Config
from nft_marketplace.deployments import Deployments

CODE = "parameter unit;\nstorage unit;\ncode { CDR ; NIL operation ; PAIR };\n"
STORAGE = "Unit\n"


class DummyChainClient:
    """Records calls instead of talking to a node."""

    originated = 0

    def __init__(self, rpc_url: str, key: str, min_confirmations: int = 1) -> None:
        self.rpc_url = rpc_url
        self.key = key
        self.min_confirmations = min_confirmations
        self.address = f"tz1{key[-6:]}"
        self.calls: list[tuple[str, str, dict]] = []
        self.receipts: dict[str, dict] = {}
        self.big_maps: dict[tuple[str, str], dict] = {}
        self.errors: dict[str, Exception] = {}

    def originate(self, artifact) -> dict:
        DummyChainClient.originated += 1
        address = f"KT1{artifact.name}{DummyChainClient.originated}"
        return {
            "hash": f"oo{DummyChainClient.originated}",
            "contents": [
                {
                    "kind": "origination",
                    "metadata": {
                        "operation_result": {
                            "status": "applied",
                            "originated_contracts": [address],
                        }
                    },
                }
            ],
        }

    def call(self, address, entrypoint, *args, amount=0, **kwargs) -> dict:
        self.calls.append((address, entrypoint, {**kwargs, "amount": amount}))
        if entrypoint in self.errors:
            raise self.errors[entrypoint]
        return self.receipts.get(entrypoint, {"hash": f"op-{entrypoint}", "contents": []})

    def big_map_get(self, address, field, key):
        lookup = key if not isinstance(key, dict) else tuple(sorted(key.items()))
        return self.big_maps.get((address, field), {}).get(lookup)


def mint_receipt(token_id: int, source: str = "KT1BasicNftTwo") -> dict:
    return {
        "hash": "opMint",
        "contents": [
            {
                "kind": "transaction",
                "metadata": {
                    "operation_result": {"status": "applied"},
                    "internal_operation_results": [
                        {
                            "kind": "event",
                            "source": source,
                            "tag": "NftMinted",
                            "payload": {"int": str(token_id)},
                            "result": {"status": "applied"},
                        }
                    ],
                },
            }
        ],
    }


def write_artifact(artifacts_dir: Path, name: str, step: int = 1) -> Path:
    scenario_dir = artifacts_dir / name
    scenario_dir.mkdir(parents=True, exist_ok=True)
    code_path = scenario_dir / f"step_{step:03d}_cont_0_contract.tz"
    code_path.write_text(CODE)
    (scenario_dir / f"step_{step:03d}_cont_0_storage.tz").write_text(STORAGE)
    return code_path


@pytest.fixture
def make_config(tmp_path):
    def factory(network_name: str = "sandbox", **overrides) -> Config:
        values = dict(
            network_name=network_name,
            deployer_key="edsk-deployer",
            player_key="edsk-player",
            explorer_api_key="",
            verify_attempts=3,
            verify_interval_seconds=0,
            artifacts_dir=tmp_path / "compile",
            deployments_dir=tmp_path / "deployments",
            log_level="DEBUG",
        )
        values.update(overrides)
        return Config(**values)

    return factory


@pytest.fixture
def artifacts(tmp_path):
    artifacts_dir = tmp_path / "compile"
    for name in ("NftMarketplace", "BasicNft", "BasicNftTwo"):
        write_artifact(artifacts_dir, name)
    return artifacts_dir


@pytest.fixture
def deployments(make_config, artifacts):
    return Deployments(make_config(), client_factory=DummyChainClient)
