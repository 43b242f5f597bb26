#!/usr/bin/env python3

import argparse
import asyncio
import logging
import sys

import flickrapi
from .config import Config
from .config import loadConfigStore
from .config import loadDeclarations
from .flickrwrapper import getFlickrAPI
from .general import SyncError
from .general import VERSION
from .status import setupStatus
from .syncer import sync


def getCmdlineArgs(argv=None):
    """Defines cmd-line arguments, parses them, and returns an object with each supplied arg name
    as a property.
    """
    parser = argparse.ArgumentParser(prog='flickrsetsyncr',
            description='Make Flickr photosets match a list of declared, tag-based photosets.')

    parser.add_argument('--api_key', default='', required=False, type=str,
            help='Flickr API Key associated with the account. Can alternatively be provided ' +
            'via the config file.')

    parser.add_argument('--api_secret', default='', required=False, type=str,
            help='Flickr API Secret associated with the account. Can alternatively be provided ' +
            'via the config file.')

    parser.add_argument('--config_dir', default='', type=str,
            help='Directory with the config file (with api_key and api_secret), the default ' +
            'photosets file, and the OAuth store.')

    parser.add_argument('--config_profile', default='', type=str,
            help='Profile name inside the config file to use.')

    parser.add_argument('--photosets', default='', type=str,
            help='JSON file declaring the photosets. Defaults to photosets.json in the ' +
            'config dir.')

    parser.add_argument('--workers', default=None, type=int,
            help='How many photosets to sync concurrently. Can alternatively be provided via ' +
            'the config file.')

    parser.add_argument('--dryrun', action='store_true',
            help='Make no photoset changes. Output & logs show what would have happened. ' +
            'Still obtains and stores OAuth credentials.')

    parser.add_argument('--loglevel', action='store', choices=['NOTSET', 'DEBUG', 'INFO',
            'WARNING', 'ERROR'], default='INFO',
            help='Verbosity for log output to --logfile. NOTSET produces no logs.')

    parser.add_argument('--logfile', action='store', type=str,
            help='File to append log output to. Also accepts "stderr" as an option..')

    parser.add_argument('--version', action='version', version='%(prog)s ' + VERSION)

    return parser.parse_args(argv)


def cli(argv=None):
    args = getCmdlineArgs(argv)

    # Setup log first. Set log levels for this script, main lib, and the flickrapi dependency.
    if args.logfile == 'stderr':
        logging.basicConfig(stream=sys.stderr)
    else:
        logging.basicConfig(filename=args.logfile)

    logger = logging.getLogger(__name__)
    logger.setLevel(args.loglevel)
    logging.getLogger('flickrsetsyncr').setLevel(args.loglevel)
    flickrapi.set_log_level(args.loglevel)

    logger.info('Cmd-line args: ' + str(args))

    setupStatus()

    try:
        # Store settings set from the args.
        config = Config(
            dir_=args.config_dir,
            profile=args.config_profile,
            api_key=args.api_key,
            api_secret=args.api_secret,
            workers=args.workers,
            photosets_path=args.photosets,
            dryrun=args.dryrun,
            store=loadConfigStore(config_dir=args.config_dir),
        )
        config.validate()
        declarations = loadDeclarations(config.photosets_path)

        # Do the actual syncing.
        flickrwrapper = getFlickrAPI(config)
        asyncio.run(sync(config, declarations, flickrwrapper))
    except (SyncError) as e:
        print(e, file=sys.stderr)
        logger.exception(e)
        sys.exit(2)


if __name__ == '__main__':
    cli()
