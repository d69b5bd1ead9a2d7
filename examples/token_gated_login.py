"""
Token gated login flow.

The backend issues a nonce, the wallet signs it (here with a local test key
via eth-account, normally in the user's browser wallet), and the backend
exchanges the signature for an access token gated on NFT ownership.
"""

from eth_account import Account
from eth_account.messages import encode_defunct

from picket import AuthRequirements, Picket, PicketApiError

# Test wallet private key (DO NOT use in production)
PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"

account = Account.from_key(PRIVATE_KEY)

with Picket.from_env() as picket:
    nonce = picket.nonce(account.address)
    message = f"{nonce.statement}\n\nNonce: {nonce.nonce}"
    signed = account.sign_message(encode_defunct(text=message))

    requirements = AuthRequirements(
        contract_address="0xBC4CA0EdA7647A8aB7C2061c2E118A18a936f13D",
        min_token_balance=1,
    )
    try:
        state = picket.auth(
            account.address,
            "0x" + bytes(signed.signature).hex(),
            requirements=requirements,
        )
    except PicketApiError as e:
        print(f"Login denied: {e.code} - {e.msg}")
    else:
        print(f"Access token: {state.access_token}")
        print(f"Welcome {state.user.display_address}")
        for requirement, balance in state.user.token_balances.items():
            print(f"  {requirement}: {balance}")

        # Later: re-check the gate without asking the user to sign again
        refreshed = picket.authz(state.access_token, requirements, revalidate=True)
        print(f"Still authorized: {refreshed.user.wallet_address}")
