"""Loads the current state of the user's photosets from Flickr. Read-only."""
import logging

from .models import Photo
from .models import RemotePhotoset
from .status import updateStatus


__all__ = ['findRemote', 'loadCurrentPhotos', 'loadRemotePhotosets']
logger = logging.getLogger(__name__)


async def loadRemotePhotosets(flickrwrapper):
	"""Returns a list of RemotePhotoset for every photoset the user has, in account order."""
	listing = await flickrwrapper.listPhotosets()
	photosets = [RemotePhotoset.fromResponse(p) for p in listing]
	updateStatus('Found {} photosets on Flickr'.format(len(photosets)))
	logger.info('Remote photosets: ' + str(photosets))
	return photosets


async def loadCurrentPhotos(flickrwrapper, remote):
	"""Returns the list of Photos currently in the remote photoset."""
	listing = await flickrwrapper.listPhotosetPhotos(remote.photoset_id)
	photos = [Photo.fromResponse(p) for p in listing]
	updateStatus('{} current photos found in "{}"'.format(len(photos), remote.title))
	return photos


def findRemote(remote_photosets, title):
	"""The first remote photoset titled exactly title, or None."""
	for remote in remote_photosets:
		if remote.title == title:
			return remote
	return None
