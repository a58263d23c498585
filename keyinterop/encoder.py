import asn1
from .parser import KeyParameters


RSA_ENCRYPTION = '1.2.840.113549.1.1.1'


def _write_integer(encoder, value):
    encoder.write(int.from_bytes(value, byteorder='big'), asn1.Numbers.Integer)


def encode_rsa_private_key(params: KeyParameters) -> bytes:
    """RSAPrivateKey (PKCS#1) DER for the given parameters."""
    encoder = asn1.Encoder()
    encoder.start()
    encoder.enter(asn1.Numbers.Sequence)
    encoder.write(0, asn1.Numbers.Integer) # version
    for value in params:
        _write_integer(encoder, value)
    encoder.leave()
    return encoder.output()


def encode_private_key(params: KeyParameters) -> bytes:
    """PrivateKeyInfo (PKCS#8) DER wrapping the RSAPrivateKey of params.

    Unsigned magnitudes are written as DER INTEGERs, so a zero byte is put
    back in front of any value whose high bit is set.
    """
    encoder = asn1.Encoder()
    encoder.start()
    encoder.enter(asn1.Numbers.Sequence)
    encoder.write(0, asn1.Numbers.Integer) # version
    encoder.enter(asn1.Numbers.Sequence) # AlgorithmIdentifier
    encoder.write(RSA_ENCRYPTION, asn1.Numbers.ObjectIdentifier)
    encoder.write(None, asn1.Numbers.Null)
    encoder.leave()
    encoder.write(encode_rsa_private_key(params), asn1.Numbers.OctetString)
    encoder.leave()
    return encoder.output()
