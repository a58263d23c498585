import base64, json
from cryptography.hazmat.primitives import hashes, serialization as ser
from .errors import KeyInteropError
from .encoder import encode_private_key
from .keyfile import load_key_file
from .parser import KeyParameters
from . import signer


def _load(conf):
    try:
        return load_key_file(conf.key.file, conf.key.passphrase, conf.key.format)
    except KeyInteropError as e:
        print('error: Cannot decode private key \'' + conf.key.file + '\': ' + str(e))
        exit(1)


def key_print_info(params: KeyParameters):
    modulus = int.from_bytes(params.modulus, byteorder='big')
    print('info: Modulus size: ' + str(modulus.bit_length()) + ' bits')
    print('info: Public exponent: ' + str(int.from_bytes(params.publicExponent, byteorder='big')))


def key_fingerprint(private_key):
    public_der = private_key.public_key().public_bytes(
        ser.Encoding.DER, ser.PublicFormat.SubjectPublicKeyInfo)
    digest = hashes.Hash(hashes.SHA256())
    digest.update(public_der)
    return digest.finalize().hex()


def show_key(args, conf):
    if(conf.output.format != 'json'):
        print('info: Showing an existing private key')
    params = _load(conf)
    if(conf.output.format == 'json'):
        js = {name: value.hex() for name, value in params._asdict().items()}
        print(json.dumps(js, sort_keys=False, indent=2))
        return
    key_print_info(params)
    for name, value in params._asdict().items():
        print('info: ' + name + ' (' + str(len(value)) + ' bytes): ' + value.hex())


def validate_key(args, conf):
    params = _load(conf)
    key_print_info(params)
    try:
        private_key = signer.to_private_key(params)
    except KeyInteropError as e:
        print('error: ' + str(e))
        exit(1)
    print('info: Public key SHA256 fingerprint: ' + key_fingerprint(private_key))
    print('success: The private key is a usable ' + str(private_key.key_size) + ' bit RSA key')


def sign_message(args, conf):
    params = _load(conf)
    if(args.inputfile is not None):
        with open(args.inputfile, 'rb') as f:
            message = f.read()
    else:
        message = args.message.encode('utf-8')
    try:
        signature = signer.sign(params, message, conf.signing.hash)
    except (KeyInteropError, ValueError) as e:
        print('error: ' + str(e))
        exit(1)
    print('info: Signed ' + str(len(message)) + ' bytes using RSA-' + conf.signing.hash.upper())
    print(base64.b64encode(signature).decode('ASCII'))


def export_key(args, conf):
    params = _load(conf)
    key_der = encode_private_key(params)
    with open(args.exportfile, 'wb') as f:
        f.write(key_der)
    print('success: Wrote PKCS#8 private key file \'' + args.exportfile + '\'')
