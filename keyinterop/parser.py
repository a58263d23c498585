import logging
from typing import NamedTuple
from .cursor import ByteCursor
from .errors import DecodeError

log = logging.getLogger(__name__)


# rsaEncryption, 1.2.840.113549.1.1.1
RSA_ENCRYPTION_OID = b'\x2a\x86\x48\x86\xf7\x0d\x01\x01\x01'


class KeyParameters(NamedTuple):
    modulus: bytes
    publicExponent: bytes
    privateExponent: bytes
    prime1: bytes
    prime2: bytes
    exponent1: bytes
    exponent2: bytes
    coefficient: bytes


def trim_leading_zero(value):
    """Drop the DER sign padding byte, keeping a lone zero intact."""
    if(len(value) > 1 and value[0] == 0x00):
        return bytes(value[1:])
    return bytes(value)


def equal_oid(first, second):
    return bytes(first) == bytes(second)


def _size_error(name, length, remaining, position):
    return DecodeError('Incorrect ' + name + ' Size. Specified: ' + str(length) +
        ', Remaining: ' + str(remaining), position)


def _version_error(name, value, position):
    specified = str(int.from_bytes(value, byteorder='big', signed=True)) if value else 'empty'
    return DecodeError('Incorrect ' + name + ' Version. Expected: 0, Specified: ' + specified, position)


class RSAKeyParser:
    """Extracts RSA key parameters from a DER PrivateKeyInfo (PKCS#8) wrapping
    an RSAPrivateKey (PKCS#1).

    One parser decodes one buffer; create a new instance per key.
    """

    def __init__(self, contents):
        self._cursor = ByteCursor(contents)

    def parse(self):
        cursor = self._cursor

        # PrivateKeyInfo
        position = cursor.current_position()
        length = cursor.next_sequence()
        if(length != cursor.remaining_bytes()):
            raise _size_error('Sequence', length, cursor.remaining_bytes(), position)

        position = cursor.current_position()
        value = cursor.next_integer()
        if(len(value) == 0 or value[0] != 0x00):
            raise _version_error('PrivateKeyInfo', value, position)

        # AlgorithmIdentifier
        position = cursor.current_position()
        length = cursor.next_sequence()
        if(length > cursor.remaining_bytes()):
            raise _size_error('AlgorithmIdentifier', length, cursor.remaining_bytes(), position)
        end = cursor.current_position() + length

        position = cursor.current_position()
        if(not equal_oid(cursor.next_oid(), RSA_ENCRYPTION_OID)):
            raise DecodeError('Expected OID 1.2.840.113549.1.1.1', position)
        # Optional parameters, absent when the identifier ends after the OID
        if(cursor.current_position() < end):
            if(cursor.is_next_null()):
                cursor.next_null()
            else:
                skipped = cursor.skip_next()
                log.debug('Skipped %d bytes of algorithm parameters', len(skipped))

        # PrivateKey
        position = cursor.current_position()
        length = cursor.next_octet_string()
        if(length > cursor.remaining_bytes()):
            raise _size_error('PrivateKey', length, cursor.remaining_bytes(), position)

        # RSAPrivateKey
        position = cursor.current_position()
        length = cursor.next_sequence()
        if(length < cursor.remaining_bytes()):
            raise _size_error('RSAPrivateKey', length, cursor.remaining_bytes(), position)

        position = cursor.current_position()
        value = cursor.next_integer()
        if(len(value) == 0 or value[0] != 0x00):
            raise _version_error('RSAPrivateKey', value, position)

        params = KeyParameters(*[trim_leading_zero(cursor.next_integer()) for _ in KeyParameters._fields])
        log.debug('Decoded %d bit modulus', len(params.modulus) * 8)

        if(cursor.remaining_bytes() != 0):
            raise DecodeError('Unexpected trailing bytes. Remaining: ' + str(cursor.remaining_bytes()),
                cursor.current_position())
        return params


def parse_rsa_private_key(contents):
    return RSAKeyParser(contents).parse()
