"""pytezos wrapper and helpers for reading operation receipts."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Optional

from loguru import logger
from pytezos import pytezos
from pytezos.michelson.parse import michelson_to_micheline
from pytezos.rpc.errors import RpcError

from nft_marketplace.errors import ArtifactNotFound, ContractRevert


@dataclass
class Artifact:
    """Compiled contract: Micheline code and initial storage."""

    name: str
    code: list
    storage: Any
    code_path: Path


@dataclass
class ContractEvent:
    source: str
    tag: str
    payload: Any


def load_artifact(artifacts_dir: Path, name: str) -> Artifact:
    """Load the latest ``*_contract.tz`` / ``*_storage.tz`` pair compiled for ``name``."""
    matches = sorted(Path(artifacts_dir).glob(f"**/{name}/*_contract.tz"))
    if not matches:
        raise ArtifactNotFound(
            f"No compiled code for {name} under {artifacts_dir}; "
            "run `nft-marketplace compile` first"
        )
    code_path = matches[-1]
    storage_path = code_path.with_name(code_path.name.replace("_contract.tz", "_storage.tz"))
    if not storage_path.exists():
        raise ArtifactNotFound(f"Missing initial storage next to {code_path}")
    return Artifact(
        name=name,
        code=michelson_to_micheline(code_path.read_text()),
        storage=michelson_to_micheline(storage_path.read_text()),
        code_path=code_path,
    )


def compile_contracts(artifacts_dir: Path) -> None:
    """Compile every deployable contract into ``artifacts_dir``.

    SmartPy writes one directory per scenario name under its working directory.
    """
    artifacts_dir = Path(artifacts_dir)
    artifacts_dir.mkdir(parents=True, exist_ok=True)
    source_root = str(Path(__file__).resolve().parents[1])
    python_path = os.pathsep.join(filter(None, [source_root, os.environ.get("PYTHONPATH")]))
    logger.info(f"Compiling contracts into {artifacts_dir}")
    subprocess.run(
        [sys.executable, "-m", "nft_marketplace.contracts.compile"],
        cwd=artifacts_dir,
        env={**os.environ, "PYTHONPATH": python_path},
        check=True,
    )


# ============== RECEIPTS ==============


def _iter_results(receipt: dict) -> Iterator[tuple[dict, dict]]:
    """Yield (operation, result) for every operation in a receipt, internal ones included."""
    for content in receipt.get("contents", []):
        metadata = content.get("metadata", {})
        yield content, metadata.get("operation_result", {})
        for internal in metadata.get("internal_operation_results", []):
            yield internal, internal.get("result", {})


def originated_contracts(receipt: dict) -> list[str]:
    addresses = []
    for _, result in _iter_results(receipt):
        addresses.extend(result.get("originated_contracts", []))
    return addresses


def parse_events(receipt: dict, tag: Optional[str] = None) -> list[ContractEvent]:
    """Contract events emitted in a receipt, optionally filtered by tag."""
    events = []
    for operation, _ in _iter_results(receipt):
        if operation.get("kind") != "event":
            continue
        if tag is not None and operation.get("tag") != tag:
            continue
        events.append(
            ContractEvent(
                source=operation.get("source", ""),
                tag=operation.get("tag", ""),
                payload=operation.get("payload"),
            )
        )
    return events


def micheline_int(value: Any) -> int:
    """Decode a Micheline ``{"int": "..."}`` literal."""
    try:
        return int(value["int"])
    except (KeyError, TypeError, ValueError):
        raise ValueError(f"Not a Micheline int: {value!r}") from None


def revert_reason(error: BaseException) -> Optional[str]:
    """Extract the failwith string carried by an RPC error, if any."""

    def search(node: Any) -> Optional[str]:
        if isinstance(node, dict):
            failed_with = node.get("with")
            if isinstance(failed_with, dict) and "string" in failed_with:
                return failed_with["string"]
            children = node.values()
        elif isinstance(node, (list, tuple)):
            children = node
        else:
            return None
        for child in children:
            found = search(child)
            if found is not None:
                return found
        return None

    return search(list(error.args))


# ============== CLIENT ==============


class ChainClient:
    """Signs and injects operations for one account on one node."""

    def __init__(self, rpc_url: str, key: str, min_confirmations: int = 1) -> None:
        self._client = pytezos.using(shell=rpc_url, key=key)
        self.min_confirmations = min_confirmations

    @property
    def address(self) -> str:
        return self._client.key.public_key_hash()

    def balance(self) -> int:
        """Account balance in mutez."""
        return int(self._client.balance() * 10**6)

    def originate(self, artifact: Artifact) -> dict:
        operation = self._client.origination(
            script={"code": artifact.code, "storage": artifact.storage}
        )
        return self._inject(operation, f"origination of {artifact.name}")

    def call(self, address: str, entrypoint: str, *args: Any, amount: int = 0, **kwargs: Any) -> dict:
        """Call ``entrypoint`` on ``address``; ``amount`` is in mutez."""
        call = getattr(self._client.contract(address), entrypoint)(*args, **kwargs)
        if amount:
            call = call.with_amount(amount)
        return self._inject(call.as_transaction(), entrypoint)

    def big_map_get(self, address: str, field: str, key: Any) -> Optional[Any]:
        """Value under ``key`` in the big_map ``field`` of a contract's storage, or None."""
        try:
            return self._client.contract(address).storage[field][key]()
        except KeyError:
            return None

    def _inject(self, operation: Any, label: str) -> dict:
        try:
            receipt = operation.autofill().sign().inject(
                min_confirmations=self.min_confirmations
            )
        except RpcError as e:
            reason = revert_reason(e)
            if reason is None:
                raise
            raise ContractRevert(reason, label) from e
        logger.debug(f"{label} included in {receipt.get('hash', '?')}")
        return receipt
