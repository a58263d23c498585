import os, configparser
from typing import NamedTuple, Optional
from .signer import HASHES


class KeyConfig(NamedTuple):
    file: str
    format: str
    passphrase: Optional[str]

class SigningConfig(NamedTuple):
    hash: str

class OutputConfig(NamedTuple):
    format: str

class KeyInteropConfig(NamedTuple):
    key: KeyConfig
    signing: SigningConfig
    output: OutputConfig


def _choice(value, choices, name):
    if(value not in choices):
        raise ValueError('Invalid ' + name + ' \'' + value + '\', expected one of: ' + ', '.join(choices))
    return value


def parse(args):
    config = configparser.ConfigParser()
    config.read(args.settings)

    def _override(value, section, option, fallback):
        if(value is not None):
            return value
        return config.get(section, option, fallback=fallback)

    conf = KeyInteropConfig(
        key = KeyConfig(
            file = _override(getattr(args, 'keyfile', None), 'key', 'file', 'private_key.pem'),
            format = _choice(_override(getattr(args, 'keyformat', None), 'key', 'format', 'auto'),
                ('auto', 'pem', 'der'), 'key format'),
            passphrase = _override(getattr(args, 'passphrase', None), 'key', 'passphrase', None),
        ),
        signing = SigningConfig(
            hash = _choice(_override(getattr(args, 'hash', None), 'signing', 'hash', 'sha1'),
                tuple(HASHES), 'hash algorithm'),
        ),
        output = OutputConfig(
            format = _choice(_override(getattr(args, 'format', None), 'output', 'format', 'human'),
                ('human', 'json'), 'output format'),
        )
    )

    if(conf.output.format != 'json'):
        if(os.path.isfile(args.settings)):
            print('info: Loading settings file ' + args.settings)
        else:
            print('info: Using default settings')
    return conf
