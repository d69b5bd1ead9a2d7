"""
Basic usage example for the Picket Python client.

This example shows how to:
- Create a client from PICKET_API_KEY (or a .env file)
- List supported chains
- Check token ownership for a wallet
- Validate an access token issued to a frontend
"""

import sys

from picket import Picket, PicketApiError

client = Picket.from_env()

# List supported chains
print("=== Chains ===")
for chain in client.chains():
    gated = "yes" if chain.authorization_supported else "no"
    print(f"- {chain.chain_name} ({chain.chain_slug}, id {chain.chain_id}), token gating: {gated}")

# Check whether a wallet holds a Bored Ape
print("\n=== Token Ownership ===")
ownership = client.token_ownership(
    "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266",
    contract_address="0xBC4CA0EdA7647A8aB7C2061c2E118A18a936f13D",
)
print(f"Allowed: {ownership.allowed}")
print(f"Balance: {ownership.token_balance}")

# Validate an access token passed on the command line
if len(sys.argv) > 1:
    print("\n=== Validate ===")
    try:
        claims = client.validate(sys.argv[1])
        print(f"Subject: {claims.sub}")
        print(f"Expires: {claims.expires_at}")
    except PicketApiError as e:
        print(f"Invalid token: {e.code} - {e.msg}")

client.close()
