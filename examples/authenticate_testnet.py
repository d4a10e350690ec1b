import logging
import os
import sys

from stellar_sdk import Keypair, Network

from web_auth_sdk import Settings, WebAuthClient, WebAuthError

logging.basicConfig(level=logging.DEBUG)


def main() -> int:
    endpoint = os.environ["WEB_AUTH_ENDPOINT"]
    service_account = os.environ["WEB_AUTH_SIGNING_KEY"]
    keypair = Keypair.from_secret(os.environ["WALLET_SECRET"])

    client = WebAuthClient(
        endpoint,
        service_account,
        Network(Network.TESTNET_NETWORK_PASSPHRASE),
        settings=Settings.from_env(),
    )
    try:
        token = client.authenticate(keypair)
    except WebAuthError as e:
        print(f"Authentication failed: {e}")
        return 1

    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
