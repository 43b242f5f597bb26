"""Wrapper for the Flickr API."""
import asyncio
import functools
import logging

import flickrapi
import flickrapi.auth
import requests

from .general import SyncError
from .general import TransportError
from .models import RemotePhotoset
from .pager import depaginate
from .status import updateStatus


__all__ = ['getFlickrAPI', 'FlickrWrapper']
logger = logging.getLogger(__name__)


# Creating photosets, editing their photos, and ordering them all need write access.
PERMS = 'write'


def getFlickrAPI(config):
	"""Obtains the Flickr API interface. Uses the OAuth token from config if there is one,
	otherwise the token cached in the config dir, asking the user to authorize if necessary.

	Args
		config: A Config object with the API key and credentials.

	Returns
		FlickrWrapper
	"""
	if config.oauth_token and config.oauth_token_secret:
		logger.info('Obtaining Flickr API with the configured OAuth token')
		token = flickrapi.auth.FlickrAccessToken(config.oauth_token, config.oauth_token_secret,
				PERMS, user_nsid=config.user_nsid or '')
		flickr = flickrapi.FlickrAPI(config.api_key, config.api_secret, token=token,
				format='parsed-json')
	else:
		logger.info('Obtaining Flickr API, checking credentials in: "{}"'.format(config.dir_))
		flickr = flickrapi.FlickrAPI(config.api_key, config.api_secret,
				token_cache_location=config.dir_, format='parsed-json')
		if not flickr.token_valid(perms=PERMS):
			logger.info('No OAuth token for user')
			updateStatus('No existing valid OAuth tokens in config path {}'.format(config.dir_))
			flickr.authenticate_console(perms=PERMS)

	user_id = config.user_nsid
	if not user_id:
		try:
			token = flickr.auth.oauth.checkToken()
		except (flickrapi.exceptions.FlickrError, requests.exceptions.RequestException) as e:
			raise TransportError("Couldn't check the OAuth token: {}".format(e)) from e
		if token['stat'] != 'ok':
			raise SyncError("Couldn't get an OAuth token")
		user_id = token['oauth']['user']['nsid']
	return FlickrWrapper(flickr, user_id)


class FlickrWrapper():
	"""Wraps the FlickrAPI for the calls the sync makes. Every call is a coroutine: the
	flickrapi client blocks, so calls run in a worker thread while the event loop interleaves
	other photosets' calls.
	"""
	def __init__(self, flickr, user_id):
		self.flickr = flickr
		self.user_id = user_id

	async def _call(self, method, **params):
		"""Invoke one flickrapi method. Any failure becomes a TransportError."""
		name = getattr(method, '__name__', str(method))
		logger.debug('Calling {} with {}'.format(name, params))
		try:
			return await asyncio.to_thread(method, **params)
		except flickrapi.exceptions.FlickrError as e:
			raise TransportError('Flickr API error from {}: {}'.format(name, e)) from e
		except requests.exceptions.RequestException as e:
			raise TransportError('HTTP error calling {}: {}'.format(name, e)) from e

	def _pager(self, method):
		return functools.partial(self._call, method)

	async def whoami(self):
		"""Returns the user's display name, used for album links. Falls back to the user ID.
		"""
		resp = await self._call(self.flickr.test.login)
		username = (resp.get('user') or {}).get('username')
		if isinstance(username, dict):
			username = username.get('_content')
		return username or self.user_id

	async def listPhotosets(self):
		"""List all of the user's photosets, with the tags of each primary photo. Returns raw
		JSON entries.
		"""
		return await depaginate(self._pager(self.flickr.photosets.getList), {
			'user_id': self.user_id,
			'primary_photo_extras': 'tags',
		}, 'photosets', 'photoset')

	async def listPhotosetPhotos(self, photoset_id):
		"""List the photos in a photoset, with their tags. Returns raw JSON entries.
		"""
		return await depaginate(self._pager(self.flickr.photosets.getPhotos), {
			'photoset_id': photoset_id,
			'user_id': self.user_id,
			'extras': 'tags',
		}, 'photoset', 'photo')

	async def searchPhotos(self, tags, tag_mode='any', sort='date-taken-asc',
			min_taken_date=None, max_taken_date=None):
		"""Search the user's photos by tag. Returns raw JSON entries in the order of sort.
		"""
		params = {
			'user_id': self.user_id,
			'tags': tags,
			'tag_mode': tag_mode,
			'extras': 'tags',
			'sort': sort,
		}
		# Unset bounds are left out, not sent empty.
		if min_taken_date:
			params['min_taken_date'] = min_taken_date
		if max_taken_date:
			params['max_taken_date'] = max_taken_date
		return await depaginate(self._pager(self.flickr.photos.search), params, 'photos',
				'photo')

	async def createPhotoset(self, title, description, primary_photo_id):
		"""Create a Flickr photoset. A primary photo is required, and becomes its only member.
		"""
		resp = await self._call(self.flickr.photosets.create, title=title,
				description=description, primary_photo_id=primary_photo_id)
		logger.info('Created photoset: ' + str(resp))
		if resp.get('stat') != 'ok':
			raise SyncError('Could not create photoset "{}", err={}'.format(title,
					resp.get('stat')))
		created = resp['photoset']
		return RemotePhotoset(created['id'], title, description=description,
				primary=created.get('primary', primary_photo_id), count=1)

	async def editPhotos(self, photoset_id, photo_ids, primary_photo_id):
		"""Replace the photoset's photos with photo_ids, in that order, and set its primary.
		"""
		await self._call(self.flickr.photosets.editPhotos, photoset_id=photoset_id,
				photo_ids=','.join(photo_ids), primary_photo_id=primary_photo_id)

	async def orderPhotosets(self, photoset_ids):
		"""Order the user's photosets. Photosets not listed follow the listed ones.
		"""
		await self._call(self.flickr.photosets.orderSets, photoset_ids=','.join(photoset_ids))
