from .errors import KeyInteropError, DecodeError, KeyFileError
from .cursor import ByteCursor
from .parser import KeyParameters, RSAKeyParser, parse_rsa_private_key, trim_leading_zero, equal_oid
from .encoder import encode_private_key, encode_rsa_private_key
from .keyfile import read_pem, load_key_bytes, load_key_file

__all__ = [
    'KeyInteropError', 'DecodeError', 'KeyFileError',
    'ByteCursor',
    'KeyParameters', 'RSAKeyParser', 'parse_rsa_private_key', 'trim_leading_zero', 'equal_oid',
    'encode_private_key', 'encode_rsa_private_key',
    'read_pem', 'load_key_bytes', 'load_key_file',
]
