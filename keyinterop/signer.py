"""RSA PKCS#1 v1.5 signing with decoded key parameters."""

import base64
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.exceptions import InvalidSignature
from .errors import KeyFileError
from .parser import KeyParameters


HASHES = {
    'sha1': hashes.SHA1,
    'sha256': hashes.SHA256,
    'sha512': hashes.SHA512,
}


def _int(value):
    return int.from_bytes(value, byteorder='big')


def _hash(hash_name):
    try:
        return HASHES[hash_name]()
    except KeyError:
        raise ValueError('Unsupported hash algorithm \'' + str(hash_name) + '\'') from None


def to_private_key(params: KeyParameters) -> rsa.RSAPrivateKey:
    """
    Build a cryptography RSA private key from decoded parameters.

    Raises:
        KeyFileError: If the components do not form a consistent RSA key
    """
    numbers = rsa.RSAPrivateNumbers(
        p = _int(params.prime1),
        q = _int(params.prime2),
        d = _int(params.privateExponent),
        dmp1 = _int(params.exponent1),
        dmq1 = _int(params.exponent2),
        iqmp = _int(params.coefficient),
        public_numbers = rsa.RSAPublicNumbers(
            e = _int(params.publicExponent),
            n = _int(params.modulus)))
    try:
        return numbers.private_key()
    except ValueError as e:
        raise KeyFileError('Inconsistent RSA key parameters: ' + str(e)) from e


def sign(params: KeyParameters, message: bytes, hash_name: str = 'sha1') -> bytes:
    return to_private_key(params).sign(message, padding.PKCS1v15(), _hash(hash_name))


def verify(params: KeyParameters, message: bytes, signature: bytes, hash_name: str = 'sha1') -> bool:
    public_key = to_private_key(params).public_key()
    try:
        public_key.verify(signature, message, padding.PKCS1v15(), _hash(hash_name))
        return True
    except InvalidSignature:
        return False


def oauth_signature(params: KeyParameters, base_string: str) -> str:
    """Base64 RSA-SHA1 signature of an OAuth 1.0a signature base string."""
    signature = sign(params, base_string.encode('utf-8'), 'sha1')
    return base64.b64encode(signature).decode('ASCII')
