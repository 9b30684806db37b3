from __future__ import annotations

import pytest

from nft_marketplace.deploy import basic_nft, nft_marketplace
from nft_marketplace.deployments import Deployments
from tests.conftest import DummyChainClient


@pytest.fixture
def verify_calls(monkeypatch):
    calls = []

    def fake_verify(address, code, args, config=None):
        calls.append((address, code, args))

    monkeypatch.setattr(nft_marketplace, "verify", fake_verify)
    monkeypatch.setattr(basic_nft, "verify", fake_verify)
    return calls


def test_tags() -> None:
    assert nft_marketplace.TAGS == ("all", "nftmarketplace")
    assert basic_nft.TAGS == ("all", "basicnft")


def test_no_verification_on_development_chain(make_config, artifacts, verify_calls) -> None:
    config = make_config("sandbox", explorer_api_key="key")
    deployment = nft_marketplace.deploy(Deployments(config, client_factory=DummyChainClient))
    assert deployment.name == "NftMarketplace"
    assert verify_calls == []


def test_no_verification_without_api_key(make_config, artifacts, verify_calls) -> None:
    config = make_config("ghostnet", explorer_api_key="")
    nft_marketplace.deploy(Deployments(config, client_factory=DummyChainClient))
    assert verify_calls == []


def test_verification_on_public_network_with_api_key(make_config, artifacts, verify_calls) -> None:
    config = make_config("ghostnet", explorer_api_key="key")
    deployments = Deployments(config, client_factory=DummyChainClient)
    deployment = nft_marketplace.deploy(deployments)

    assert len(verify_calls) == 1
    address, code, args = verify_calls[0]
    assert address == deployment.address
    assert code == deployments.artifact("NftMarketplace").code
    assert args == []


def test_basic_nft_deploys_both_collections(make_config, artifacts, verify_calls) -> None:
    config = make_config("ghostnet", explorer_api_key="key")
    deployed = basic_nft.deploy(Deployments(config, client_factory=DummyChainClient))

    assert [d.name for d in deployed] == ["BasicNft", "BasicNftTwo"]
    assert deployed[0].args[2] != deployed[1].args[2]
    assert [call[0] for call in verify_calls] == [d.address for d in deployed]
