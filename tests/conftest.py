import pytest
from cryptography.hazmat.primitives import serialization as ser
from cryptography.hazmat.primitives.asymmetric import rsa


RSA_OID = bytes.fromhex('2a864886f70d010101')


def der_length(length):
    if(length < 0x80):
        return bytes([length])
    octets = length.to_bytes((length.bit_length() + 7) // 8, byteorder='big')
    return bytes([0x80 | len(octets)]) + octets


def tlv(tag, content):
    return bytes([tag]) + der_length(len(content)) + content


# Small, cryptographically meaningless components; the decoder does not care
FAKE_INTEGERS = [
    b'\x00\xc3\x15', b'\x01\x00\x01', b'\x7f\x10', b'\x00\x81', b'\x61',
    b'\x00\xff\x01', b'\x02', b'\x00',
]


def rsa_private_key(version=b'\x00', integers=FAKE_INTEGERS, extra=b''):
    content = tlv(0x02, version) + b''.join(tlv(0x02, i) for i in integers) + extra
    return tlv(0x30, content)


def private_key_info(inner=None, version=b'\x00', oid=RSA_OID, params=b'\x05\x00',
        attributes=b'', octet_string=None):
    if(inner is None):
        inner = rsa_private_key()
    algorithm = tlv(0x30, tlv(0x06, oid) + params)
    if(octet_string is None):
        octet_string = tlv(0x04, inner)
    return tlv(0x30, tlv(0x02, version) + algorithm + octet_string + attributes)


@pytest.fixture(scope='session')
def private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope='session')
def pkcs8_der(private_key):
    return private_key.private_bytes(ser.Encoding.DER, ser.PrivateFormat.PKCS8, ser.NoEncryption())


@pytest.fixture(scope='session')
def pkcs8_pem(private_key):
    return private_key.private_bytes(ser.Encoding.PEM, ser.PrivateFormat.PKCS8, ser.NoEncryption())


@pytest.fixture(scope='session')
def pkcs1_pem(private_key):
    return private_key.private_bytes(ser.Encoding.PEM, ser.PrivateFormat.TraditionalOpenSSL, ser.NoEncryption())


@pytest.fixture(scope='session')
def encrypted_pem(private_key):
    return private_key.private_bytes(ser.Encoding.PEM, ser.PrivateFormat.PKCS8,
        ser.BestAvailableEncryption(b'correct horse'))


@pytest.fixture(scope='session')
def encrypted_pkcs1_pem(private_key):
    return private_key.private_bytes(ser.Encoding.PEM, ser.PrivateFormat.TraditionalOpenSSL,
        ser.BestAvailableEncryption(b'correct horse'))
