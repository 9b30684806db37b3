"""Harness exceptions and the contracts' failwith strings."""

from __future__ import annotations


class NftMarketplaceErrorMessage:
    PREFIX = "NftMarketplace__"
    ALREADY_LISTED = "{}AlreadyListed".format(PREFIX)
    NOT_OWNER = "{}NotOwner".format(PREFIX)
    PRICE_BELOW_ZERO = "{}PriceBelowZero".format(PREFIX)
    NOT_APPROVED_FOR_MARKETPLACE = "{}NotApprovedForMarketplace".format(PREFIX)
    NOT_LISTED = "{}NotListed".format(PREFIX)
    PRICE_TOO_LOW = "{}PriceTooLow".format(PREFIX)
    NO_PROCEEDS = "{}NoProceeds".format(PREFIX)
    NO_TEZ_EXPECTED = "{}NoTezExpected".format(PREFIX)
    INVALID_NFT_CONTRACT = "{}InvalidNftContract".format(PREFIX)


class BasicNftErrorMessage:
    PREFIX = "BasicNft__"
    INVALID_TOKEN_ID = "{}InvalidTokenId".format(PREFIX)
    NOT_OWNER = "{}NotOwner".format(PREFIX)
    NOT_OWNER_OR_APPROVED = "{}NotOwnerOrApproved".format(PREFIX)
    WRONG_FROM = "{}WrongFrom".format(PREFIX)


class HarnessError(Exception):
    """Base class for harness errors."""


class ConfigError(HarnessError):
    """Invalid or incomplete configuration."""


class ArtifactNotFound(HarnessError):
    """Compiled Michelson for a contract is missing."""


class DeploymentNotFound(HarnessError):
    """No deployment record for a contract on the active network."""


class VerificationError(HarnessError):
    """On-chain code does not match the compiled artifact."""


class ContractRevert(HarnessError):
    """A contract call failed with a failwith value."""

    def __init__(self, reason: str, entrypoint: str = "") -> None:
        self.reason = reason
        self.entrypoint = entrypoint
        where = f" in {entrypoint}" if entrypoint else ""
        super().__init__(f"Contract reverted{where}: {reason}")
