import os, argparse


def build():
    parser = argparse.ArgumentParser(description = 'Decode and use DER encoded RSA private keys')

    parser.add_argument('-s', '--settings', nargs='?', dest='settings', type=str,
        const='settings.ini', default='settings.ini',
        help='filename of the settings file (default: settings.ini)')
    parser.add_argument('-v', '--verbose', action='store_true', dest='verbose',
        help='print decoder debug output')

    actions = parser.add_subparsers(help='desired action to perform', dest='action')

    # Private key
    parser_handle_key = argparse.ArgumentParser(add_help=False)
    parser_handle_key.add_argument('-k', '--private-key', nargs='?', dest='keyfile', type=str,
        help='filename of the private key (default from settings: private_key.pem)')
    parser_handle_key.add_argument('-t', '--key-format', dest='keyformat', type=str,
        choices=['auto', 'pem', 'der'],
        help='encoding of the private key file (default: auto)')
    parser_handle_key.add_argument('-p', '--private-key-passphrase', nargs='?', dest='passphrase', type=str,
        help='passphrase to decrypt an encrypted private key')

    # Output options
    parser_handle_output = argparse.ArgumentParser(add_help=False)
    parser_handle_output.add_argument('-f', '--format', dest='format', type=str,
        choices=['human', 'json'],
        help='output format (default: human)')

    # Signing options
    parser_handle_sign = argparse.ArgumentParser(add_help=False)
    parser_handle_sign.add_argument('-a', '--hash', dest='hash', type=str,
        choices=['sha1', 'sha256', 'sha512'],
        help='hash algorithm for PKCS#1 v1.5 signatures (default: sha1)')
    group_message = parser_handle_sign.add_mutually_exclusive_group(required=True)
    group_message.add_argument('-m', '--message', dest='message', type=str,
        help='message or OAuth signature base string to sign')
    group_message.add_argument('-i', '--input', dest='inputfile', type=str,
        help='file containing the message to sign')

    # Export options
    parser_handle_export = argparse.ArgumentParser(add_help=False)
    parser_handle_export.add_argument('-e', '--export', nargs='?', dest='exportfile', type=str,
        const='private_key.p8', default='private_key.p8',
        help='filename of the exported PKCS#8 DER key (default: private_key.p8)')
    parser_handle_export.add_argument('-o', '--overwrite', dest='overwrite', type=bool,
        default=False, action = argparse.BooleanOptionalAction,
        help='allow overwriting existing files')

    # KEY action
    parser_key = actions.add_parser('key', help='inspect and use RSA private keys')
    subparsers_key = parser_key.add_subparsers(
        help='desired action to perform on a private key',
        dest='verb', required=True)

    subparsers_key.add_parser('show',
        parents=[parser_handle_key, parser_handle_output],
        help='show the decoded components of a private key')
    subparsers_key.add_parser('validate',
        parents=[parser_handle_key],
        help='decode a private key and check that it forms a usable RSA key')
    subparsers_key.add_parser('sign',
        parents=[parser_handle_key, parser_handle_sign],
        help='sign a message with a private key (OAuth RSA-SHA1 by default)')
    subparsers_key.add_parser('export',
        parents=[parser_handle_key, parser_handle_export],
        help='re-encode a private key as unencrypted PKCS#8 DER')

    return parser


def parse(argv=None):
    parser = build()
    args = parser.parse_args(argv)
    return (parser, args)


def validate(parser, args):
    if(args.action is None):
        parser.print_help()
        exit(1)

    if(args.action == 'key'):
        if(args.verb == 'validate'):
            print('info: Validating an existing private key')
        elif(args.verb == 'sign'):
            print('info: Signing a message with an existing private key')
        elif(args.verb == 'export'):
            print('info: Exporting an existing private key')

        if(args.verb == 'sign' and args.inputfile is not None and not os.path.isfile(args.inputfile)):
            print('error: Message file \'' + args.inputfile + '\' does not exist.')
            exit(1)
        if(args.verb == 'export'):
            if(os.path.isfile(args.exportfile) and (not args.overwrite)):
                print('error: Export file \'' + args.exportfile +
                    '\' already exists. Run with \'-o\' to enable overwriting files.')
                exit(1)
