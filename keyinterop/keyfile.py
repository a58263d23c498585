import base64, binascii, logging, re
from cryptography.hazmat.primitives import serialization as ser
from .errors import DecodeError, KeyFileError
from .parser import parse_rsa_private_key

log = logging.getLogger(__name__)


_PEM_RE = re.compile(
    rb'-----BEGIN ([A-Z0-9 ]+)-----\s*(.*?)\s*-----END \1-----', re.DOTALL)

LABEL_PKCS8 = 'PRIVATE KEY'
LABEL_PKCS1 = 'RSA PRIVATE KEY'
LABEL_ENCRYPTED = 'ENCRYPTED PRIVATE KEY'


def is_pem(data):
    return data.lstrip().startswith(b'-----BEGIN ')


def _pem_block(data):
    if(isinstance(data, str)):
        data = data.encode('ASCII')
    match = _PEM_RE.search(data)
    if(match is None):
        raise DecodeError('Missing PEM armor', 0)
    return match


def pem_label(data):
    return _pem_block(data).group(1).decode('ASCII')


def read_pem(data):
    """Return (label, der) of the first PEM block in data (str or bytes)."""
    match = _pem_block(data)
    label = match.group(1).decode('ASCII')
    body = b''.join(match.group(2).split())
    try:
        der = base64.b64decode(body, validate=True)
    except binascii.Error as e:
        raise DecodeError('Invalid PEM body: ' + str(e), 0, e)
    return label, der


def _to_pkcs8(data, passphrase, pem):
    # Re-serialize PKCS#1 or encrypted containers to plain PKCS#8 DER
    password = passphrase.encode('utf-8') if passphrase is not None else None
    try:
        if(pem):
            key = ser.load_pem_private_key(data, password = password)
        else:
            key = ser.load_der_private_key(data, password = password)
    except (ValueError, TypeError) as e:
        raise KeyFileError('Cannot read private key: ' + str(e)) from e
    return key.private_bytes(ser.Encoding.DER, ser.PrivateFormat.PKCS8, ser.NoEncryption())


def load_key_bytes(data, passphrase=None, key_format='auto'):
    """PKCS#8 DER bytes for the key in data (PEM or DER)."""
    if(key_format == 'pem' or (key_format == 'auto' and is_pem(data))):
        label = pem_label(data)
        log.debug('Found PEM block %s', label)
        if(label == LABEL_PKCS8):
            return read_pem(data)[1]
        # Encrypted PKCS#1 blocks carry Proc-Type/DEK-Info headers; cryptography parses those
        if(label in (LABEL_PKCS1, LABEL_ENCRYPTED)):
            return _to_pkcs8(data, passphrase, True)
        raise KeyFileError('Unsupported PEM block \'' + label + '\'')
    if(passphrase is not None):
        return _to_pkcs8(data, passphrase, False)
    return bytes(data)


def load_key_file(path, passphrase=None, key_format='auto'):
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise KeyFileError('Cannot open key file \'' + str(path) + '\': ' + str(e)) from e
    return parse_rsa_private_key(load_key_bytes(data, passphrase, key_format))
