"""Password encryption for Capital.com logins.

The API can accept the login password encrypted with a short-lived RSA key
it hands out on ``GET /session/encryptionKey``. The plaintext is
``"<password>|<key timestamp in epoch millis>"``, base64 encoded, then
encrypted with PKCS#1 v1.5 padding and base64 encoded again.
"""

from __future__ import annotations

import base64
import binascii

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from capitalcom.domain.models.session import EncryptionKey
from capitalcom.domain.models.timestamps import epoch_millis
from capitalcom.infrastructure.http.errors import (
    PasswordEncodingError,
    PublicKeyTypeError,
)


def _load_rsa_public_key(encoded_key: str) -> rsa.RSAPublicKey:
    key_bytes = base64.b64decode(encoded_key, validate=True)
    public_key = serialization.load_der_public_key(key_bytes)
    if not isinstance(public_key, rsa.RSAPublicKey):
        raise PublicKeyTypeError(
            f"public key is {type(public_key).__name__}, not an RSA public key"
        )
    return public_key


def encrypt_password(password: str, key: EncryptionKey) -> str:
    """Encrypt ``password`` with a server-issued :class:`EncryptionKey`.

    Raises:
        PasswordEncodingError: for any failure decoding, parsing or using the
            key. The cause is kept but the error kind is the same for all of
            them.
    """
    plaintext = f"{password}|{epoch_millis(key.time_stamp)}".encode("utf-8")
    encoded_plaintext = base64.b64encode(plaintext)

    try:
        public_key = _load_rsa_public_key(key.encryption_key)
        ciphertext = public_key.encrypt(encoded_plaintext, padding.PKCS1v15())
    except (
        binascii.Error,
        ValueError,
        TypeError,
        UnsupportedAlgorithm,
    ) as exc:
        raise PasswordEncodingError(exc) from exc

    return base64.b64encode(ciphertext).decode("ascii")


__all__ = ["encrypt_password"]
