"""Command line entry point: ``nft-marketplace <command> [--network NAME]``."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from loguru import logger

from nft_marketplace.chain import compile_contracts
from nft_marketplace.config import NETWORKS, Config
from nft_marketplace.deployments import Deployments
from nft_marketplace.log import configure_logging
from nft_marketplace.scripts import buy_item, cancel_item, mint, mint_and_list


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nft-marketplace",
        description="Deploy and drive the SmartPy NFT marketplace",
    )
    parser.add_argument("--network", choices=sorted(NETWORKS), help="Overrides NETWORK")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("compile", help="Compile the contracts into ARTIFACTS_DIR")

    deploy = sub.add_parser("deploy", help="Run the deploy scripts")
    deploy.add_argument(
        "--tags",
        nargs="+",
        default=["all"],
        help="Only run scripts carrying one of these tags (default: all)",
    )
    deploy.add_argument(
        "--reset",
        action="store_true",
        help="Drop existing records first (development chains only)",
    )

    mint_cmd = sub.add_parser("mint", help="Mint a token from a collection")
    mint_cmd.add_argument("--collection", default=mint.COLLECTION)

    listing = sub.add_parser("mint-and-list", help="Mint, approve and list a token")
    listing.add_argument("--price", type=int, default=mint_and_list.PRICE, help="mutez")

    for name, module in (("buy-item", buy_item), ("cancel-item", cancel_item)):
        cmd = sub.add_parser(name)
        cmd.add_argument("--token-id", type=int, default=module.TOKEN_ID)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = Config(network_name=args.network) if args.network else Config()
    configure_logging(config.log_level)

    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(f"Config error: {error}")
        return 1

    deployments = Deployments(config)
    logger.info(f"Network: {config.network.name} ({config.network.rpc_url})")

    if args.command == "compile":
        try:
            compile_contracts(config.artifacts_dir)
        except Exception as e:
            logger.exception(f"Compilation failed: {e}")
            return 1
        return 0
    if args.command == "deploy":
        try:
            if args.reset:
                deployments.fixture(args.tags)
            else:
                deployments.run(args.tags)
        except Exception as e:
            logger.exception(f"Deployment failed: {e}")
            return 1
        return 0
    if args.command == "mint":
        return mint.main(deployments, args.collection)
    if args.command == "mint-and-list":
        return mint_and_list.main(deployments, args.price)
    if args.command == "buy-item":
        return buy_item.main(deployments, args.token_id)
    return cancel_item.main(deployments, args.token_id)


if __name__ == "__main__":
    sys.exit(main())
