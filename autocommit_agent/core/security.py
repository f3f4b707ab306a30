import hmac
import hashlib


def sign_payload(payload_body: bytes, secret_token: str) -> str:
    """Return the `sha256=<hex>` signature for a payload."""
    hash_object = hmac.new(
        secret_token.encode("utf-8"), msg=payload_body, digestmod=hashlib.sha256
    )
    return "sha256=" + hash_object.hexdigest()


def verify_signature(
    payload_body: bytes, secret_token: str, signature_header: str
) -> bool:
    """
    Verify that an inbound event was signed with the shared secret.

    Args:
        payload_body: raw request body bytes
        secret_token: the shared secret
        signature_header: the X-Hub-Signature-256 header value

    Returns:
        True if the signature is valid, False otherwise.
    """
    if not signature_header:
        return False

    return hmac.compare_digest(sign_payload(payload_body, secret_token), signature_header)
