"""
Service-account authentication for the Core Reporting API.

Keys are either the legacy PKCS#12 containers Google issues for service
accounts (protected by the fixed ``notasecret`` passphrase) or the JSON
key files of the current console. Both are turned into a google-auth
signer and exchanged for a bearer token through the signed-JWT flow.
"""
import json
import logging

from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    pkcs12,
)
from google.auth import crypt
from google.auth.transport.requests import Request
from google.oauth2 import service_account

logger = logging.getLogger(__name__)

TOKEN_URI = "https://accounts.google.com/o/oauth2/token"
SCOPE = "https://www.googleapis.com/auth/analytics.readonly"

# Default passphrase of Google-issued .p12 keys, not a real secret.
KEY_PASSPHRASE = "notasecret"


def load_signer(key_path: str) -> crypt.Signer:
    """Load the private key at ``key_path`` as a google-auth signer."""
    if key_path.lower().endswith(".json"):
        with open(key_path, "r") as key_file:
            info = json.load(key_file)
        return crypt.RSASigner.from_service_account_info(info)

    with open(key_path, "rb") as key_file:
        private_key, _, _ = pkcs12.load_key_and_certificates(
            key_file.read(), KEY_PASSPHRASE.encode()
        )
    if private_key is None:
        raise ValueError(f"No private key found in {key_path}")

    pem = private_key.private_bytes(
        Encoding.PEM, PrivateFormat.PKCS8, NoEncryption()
    )
    return crypt.RSASigner.from_string(pem)


def build_credentials(identity: str, key_path: str) -> service_account.Credentials:
    """Service-account credentials issuing JWTs as ``identity`` for the analytics scope."""
    return service_account.Credentials(
        load_signer(key_path),
        identity,
        TOKEN_URI,
        scopes=[SCOPE],
    )


def fetch_access_token(identity: str, key_path: str) -> str:
    """
    Exchange a signed assertion for a bearer token.

    Args:
        identity: Service-account email, used as the JWT issuer
        key_path: Path to a .p12 or .json private key

    Returns:
        str: The access token returned by the token endpoint
    """
    credentials = build_credentials(identity, key_path)
    credentials.refresh(Request())
    logger.info(f"Obtained access token for service account {identity}")
    return credentials.token
