"""Access helpers for private album delivery."""
import secrets
import string
import logging

logger = logging.getLogger(__name__)

TOKEN_ALPHABET = string.ascii_lowercase + string.digits


def generate_access_token(length: int = 8) -> str:
    """Generate a short random alphanumeric access token."""
    return ''.join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))


def verify_passphrase(album, supplied: str) -> bool:
    """
    Check a supplied passphrase against an album.

    Public albums need no passphrase and always pass. A private album with
    no stored passphrase never passes.
    """
    if not album.is_private:
        return True
    if not album.passphrase:
        logger.warning("Private album %s has no passphrase configured", album.id)
        return False
    if supplied is None:
        return False
    # Passphrases are stored as entered; only the comparison is constant-time.
    return secrets.compare_digest(supplied.encode("utf-8"), album.passphrase.encode("utf-8"))
