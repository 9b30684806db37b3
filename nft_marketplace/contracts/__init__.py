"""SmartPy contracts and the metadata their deployments are compiled with."""

NFT_NAME = "Doge"
NFT_SYMBOL = "Dog"

PUG_URI = "ipfs://bafybeig37ioir76s7mg5oobetncojcm3c3hxasyd4rvid4jqhy4gkaheg4/?filename=0-PUG.json"
SHIBA_INU_URI = "ipfs://QmYQC5aGZu2PTH8XzbJrbDnvhj3gVs7ya33H9mqUNvST3d/?filename=1-SHIBA_INU.json"
