import hashlib
import hmac


def sign(secret_key: bytes, message: bytes) -> str:
    """Returns the hex-encoded HMAC-SHA256 of `message` keyed by `secret_key`.

    Args:
        secret_key: The API secret. Any length is valid for HMAC.
        message: The canonical request string to authenticate.

    Returns:
        The lowercase hexadecimal digest.
    """
    return hmac.new(secret_key, message, hashlib.sha256).hexdigest()
