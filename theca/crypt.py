"""Password based encryption for profile files.

Encrypted profiles are stored as raw bytes: AES-256-CBC ciphertext of the
pretty-printed JSON followed by a 32 byte HMAC-SHA256 tag. Key and IV are
derived from the password alone, the file carries no salt or header.
"""

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.hmac import HMAC
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from .errors import CryptoError

SALT = b"theca-profile-key"
ITERATIONS = 100_000

CIPHER_KEY_SIZE = 32
MAC_KEY_SIZE = 32
IV_SIZE = 16
TAG_SIZE = 32


def derive_key_iv(password: str) -> tuple[bytes, bytes]:
    """Derive key material and an IV from a password.

    Returns:
        ``(key, iv)`` where ``key`` is the AES key followed by the HMAC key.
    """
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=CIPHER_KEY_SIZE + MAC_KEY_SIZE + IV_SIZE,
        salt=SALT,
        iterations=ITERATIONS,
    )
    material = kdf.derive(password.encode("utf-8"))
    key = material[: CIPHER_KEY_SIZE + MAC_KEY_SIZE]
    iv = material[CIPHER_KEY_SIZE + MAC_KEY_SIZE :]
    return key, iv


def _split_key(key: bytes) -> tuple[bytes, bytes]:
    if len(key) != CIPHER_KEY_SIZE + MAC_KEY_SIZE:
        raise CryptoError()
    return key[:CIPHER_KEY_SIZE], key[CIPHER_KEY_SIZE:]


def _tag(mac_key: bytes, data: bytes) -> bytes:
    h = HMAC(mac_key, hashes.SHA256())
    h.update(data)
    return h.finalize()


def encrypt(plaintext: bytes, key: bytes, iv: bytes) -> bytes:
    """Encrypt plaintext, appending an authentication tag."""
    cipher_key, mac_key = _split_key(key)
    padder = padding.PKCS7(algorithms.AES.block_size).padder()
    padded = padder.update(plaintext) + padder.finalize()

    encryptor = Cipher(algorithms.AES(cipher_key), modes.CBC(iv)).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()
    return ciphertext + _tag(mac_key, ciphertext)


def decrypt(data: bytes, key: bytes, iv: bytes) -> bytes:
    """Verify and decrypt data produced by :func:`encrypt`.

    Raises:
        CryptoError: On a wrong key or corrupted data.
    """
    cipher_key, mac_key = _split_key(key)
    if len(data) < TAG_SIZE + algorithms.AES.block_size // 8:
        raise CryptoError()
    ciphertext, tag = data[:-TAG_SIZE], data[-TAG_SIZE:]

    h = HMAC(mac_key, hashes.SHA256())
    h.update(ciphertext)
    try:
        h.verify(tag)
    except InvalidSignature as e:
        raise CryptoError() from e

    try:
        decryptor = Cipher(algorithms.AES(cipher_key), modes.CBC(iv)).decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as e:
        raise CryptoError() from e
