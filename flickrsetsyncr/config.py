"""Configuration store, retrieval, validation, and supporting functionality."""
import configparser
import json
import logging
import os

from .general import SyncError
from .models import Declaration

DEFAULT_CONFIG_DIR = '~/.config/flickrsetsyncr'
DEFAULT_SECTION_NAME = 'DEFAULT'
CONFIG_FILENAME = 'config'
DECLARATIONS_FILENAME = 'photosets.json'
DEFAULT_WORKERS = 4


__all__ = ['Config', 'loadConfigStore', 'loadDeclarations']
logger = logging.getLogger(__name__)


class Config():
    """Config for input to flickrsetsyncr.sync().

    Args:
        dir_: Dir with config file, declarations file, and local OAuth tokens.
        profile: Section of the config file to read settings from. (Optional)
        api_key: Flickr API key. (Required in Config() or in the config file.)
        api_secret: Flickr API secret. (Required in Config() or in the config file.)
        oauth_token: OAuth access token obtained beforehand. (Optional)
        oauth_token_secret: Secret for oauth_token. (Optional)
        user_nsid: Flickr user ID owning the photosets. Looked up from the token if not set.
        workers: How many photosets to process concurrently. (Optional)
        photosets_path: Path of the declarations file. Defaults to photosets.json in dir_.
        dryrun: Compute and report changes, but don't modify anything on Flickr. (Optional)
        store: Supports .get(section, setting_name) for reading config values.
    """
    def __init__(self, dir_='', profile='', api_key=None, api_secret=None, oauth_token=None,
            oauth_token_secret=None, user_nsid=None, workers=None, photosets_path=None,
            dryrun=False, store=None):
        # User-provided Config.
        self.dir_ = os.path.expanduser(dir_ if dir_ else DEFAULT_CONFIG_DIR)
        self.profile = profile if profile else DEFAULT_SECTION_NAME
        self.api_key = api_key
        self.api_secret = api_secret
        self.oauth_token = oauth_token
        self.oauth_token_secret = oauth_token_secret
        self.user_nsid = user_nsid
        self.workers = workers
        self.photosets_path = photosets_path
        self.dryrun = dryrun

        # Import from the data store.
        if store:
            self.fillFromStore(store)

        if self.workers is None:
            self.workers = DEFAULT_WORKERS
        if not self.photosets_path:
            self.photosets_path = os.path.join(self.dir_, DECLARATIONS_FILENAME)

    def __str__(self):
        # Keep secrets out of the logs.
        hidden = ('api_secret', 'oauth_token', 'oauth_token_secret')
        return str({k: ('***' if k in hidden and v else v) for k, v in vars(self).items()})

    def fillFromStore(self, store):
        """Adds config settings from the config store, eg. a file. Only imports settings from
        config store that are not explicitly provided. Throws a SyncError if a required
        parameter can't be found in config.

        Args:
            store: A config store obtained from loadConfigStore().
        """
        if not self.api_key:
            logger.info('Filling setting "api_key" from config store.')
            self.api_key = self._loadSetting(store, 'api_key')
        if not self.api_secret:
            logger.info('Filling setting "api_secret" from config store.')
            self.api_secret = self._loadSetting(store, 'api_secret')
        if not self.oauth_token:
            self.oauth_token = self._loadSetting(store, 'oauth_token', required=False)
        if not self.oauth_token_secret:
            self.oauth_token_secret = self._loadSetting(store, 'oauth_token_secret',
                    required=False)
        if not self.user_nsid:
            self.user_nsid = self._loadSetting(store, 'user_nsid', required=False)
        if self.workers is None:
            workers = self._loadSetting(store, 'workers', required=False)
            if workers:
                try:
                    self.workers = int(workers)
                except ValueError:
                    raise SyncError('Setting "workers" must be a number, got "{}"'.format(
                            workers))
        if not self.photosets_path:
            path = self._loadSetting(store, 'photosets', required=False)
            if path:
                self.photosets_path = os.path.expanduser(path)

    def _loadSetting(self, store, setting_name, required=True):
        """Load a setting from config store. Throws an exception if a required setting isn't
        found, returns None for a missing optional one.
        """
        try:
            return store.get(self.profile, setting_name)
        except configparser.NoSectionError as e:
            # The section doesn't exist at all.
            raise SyncError('No config section "{}": error={}'.format(self.profile, e))
        except (configparser.NoOptionError, KeyError) as e:
            # A setting with that name doesn't exist.
            if required:
                raise SyncError('Option {} not in config: {}'.format(setting_name, e))
            return None

    def validate(self):
        """Validates that the Config's existing combination of settings is valid."""
        # The Flickr API key and secret must be specified.
        if not self.api_key:
            raise SyncError('api_key must be provided, but it was not. Get one from ' +
                    'http://www.flickr.com/services/api/keys/ .')
        if not self.api_secret:
            raise SyncError('api_secret must be provided, but it was not. Get one from ' +
                    'http://www.flickr.com/services/api/keys/ .')

        # The config dir must be specified.
        if not self.dir_:
            raise SyncError('dir_ must be specified, but it was not.')

        # A token without its secret (or vice versa) can't sign requests.
        if bool(self.oauth_token) != bool(self.oauth_token_secret):
            raise SyncError('oauth_token and oauth_token_secret must be provided together.')

        if not isinstance(self.workers, int) or self.workers < 1:
            raise SyncError('workers must be a positive number, got {}'.format(self.workers))


def loadConfigStore(config_dir=''):
    """Provides a reader for config file. If config_dir is empty, uses a default."""
    dir_path = os.path.expanduser(config_dir if config_dir else DEFAULT_CONFIG_DIR)
    file_path = os.path.join(dir_path, CONFIG_FILENAME)
    if not os.path.exists(file_path):
        raise SyncError("Can't load config from path {}, file doesn't exist".format(file_path))
    logger.info('Reading config from path={}'.format(file_path))
    config = configparser.ConfigParser()
    config.read(file_path)
    return config


def loadDeclarations(path):
    """Reads the declarations file, a JSON array of photoset records, into a list of
    Declarations. Order in the file is the order photosets end up in on Flickr.
    """
    if not os.path.exists(path):
        raise SyncError("Can't load photosets from path {}, file doesn't exist".format(path))
    logger.info('Reading photosets from path={}'.format(path))
    try:
        with open(path, encoding='utf-8') as f:
            records = json.load(f)
    except json.JSONDecodeError as e:
        raise SyncError('Photosets file {} is not valid JSON: {}'.format(path, e))
    if not isinstance(records, list):
        raise SyncError('Photosets file {} must contain a JSON array'.format(path))

    declarations = [Declaration.fromDict(r) for r in records]

    # Titles are how declarations find their Flickr photoset, so duplicates fight each other.
    seen = set()
    for d in declarations:
        if d.title in seen:
            logger.warning('Photoset title "{}" is declared more than once'.format(d.title))
        seen.add(d.title)
    return declarations
