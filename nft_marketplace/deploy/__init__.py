"""Deploy scripts, run in this order by ``Deployments.run``.

Each script exposes ``TAGS`` and ``deploy(deployments)``.
"""

from nft_marketplace.deploy import basic_nft, nft_marketplace

SCRIPTS = (nft_marketplace, basic_nft)
