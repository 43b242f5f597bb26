"""flickrsetsyncr package initialization."""

# Each module defines what it exports via __all__.
from .config import Config, loadConfigStore, loadDeclarations
from .diagnostics import (AmbiguousPrimaryWarning, MissingPrimaryWarning, NoMatchWarning,
        OrphanWarning)
from .flickrwrapper import getFlickrAPI
from .general import SyncError, TransportError, VERSION
from .models import Declaration
from .syncer import sync
from .status import setupStatus, updateStatus
from .__main__ import cli


__doc__ = """FlickrSetSyncr makes the photosets of a Flickr account match a list of declared
photosets, each of which collects every photo carrying a keyword tag.

* flickrsetsyncr.Config - a class for specifying configuration settings.
* flickrsetsyncr.Declaration - one desired photoset: title, keyword, and search options.
* flickrsetsyncr.sync - a coroutine that performs the sync per config.
* flickrsetsyncr.SyncError - the exception raised on fatal errors.

ex: Sync the photosets declared in ~/.config/flickrsetsyncr/photosets.json.
config = flickrsetsyncr.Config(store=flickrsetsyncr.loadConfigStore())
declarations = flickrsetsyncr.loadDeclarations(config.photosets_path)
asyncio.run(flickrsetsyncr.sync(config, declarations, flickrsetsyncr.getFlickrAPI(config)))

ex: Declare a photoset of every photo tagged "trip2024", with the photo tagged
"trip2024-primary" as its cover, and see what would change.
config = flickrsetsyncr.Config(store=flickrsetsyncr.loadConfigStore(), dryrun=True)
declarations = [flickrsetsyncr.Declaration('Trip', 'trip2024')]
asyncio.run(flickrsetsyncr.sync(config, declarations, flickrsetsyncr.getFlickrAPI(config)))
"""

__author__ = 'Brad Conte'
