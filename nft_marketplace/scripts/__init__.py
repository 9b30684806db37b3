"""One-shot scripts run against deployed contracts (``python -m nft_marketplace.scripts.<name>``)."""
