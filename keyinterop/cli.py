import logging
from . import argparser as arg
from . import config
from . import show


def main(argv=None):
    parser, args = arg.parse(argv)
    arg.validate(parser, args)

    if(args.verbose):
        logging.basicConfig(level=logging.DEBUG, format='debug: %(name)s: %(message)s')

    try:
        conf = config.parse(args)
    except ValueError as e:
        print('error: ' + str(e))
        exit(1)

    if(args.action == 'key'):
        if(args.verb == 'show'):
            show.show_key(args, conf)
        elif(args.verb == 'validate'):
            show.validate_key(args, conf)
        elif(args.verb == 'sign'):
            show.sign_message(args, conf)
        elif(args.verb == 'export'):
            show.export_key(args, conf)
