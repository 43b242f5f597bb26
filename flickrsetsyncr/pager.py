"""Walks Flickr's paged listing methods into complete lists."""
import logging

from .general import PAGE_SIZE
from .general import TransportError


__all__ = ['depaginate']
logger = logging.getLogger(__name__)


async def depaginate(call, params, root, branch):
	"""Fetch every page of a Flickr listing and return the concatenated results.

	Args:
		call: Coroutine function performing one API call, invoked as call(**params).
		params: Query parameters for the call, minus the paging parameters.
		root: Key of the response object holding paging info, eg. 'photosets'.
		branch: Key under root holding the list of results, eg. 'photoset'.

	Returns:
		A list of the raw result entries, in the order Flickr returned them. Empty if the
		first response has no root object.

	Errors raised by call propagate, and anything gathered so far is dropped. A later page
	without a root object raises a TransportError.
	"""
	# Pages are indexed from 1. Every page reports its own total, which may change while
	# paging, so the latest page decides when to stop.
	results = []
	page_num = 1
	while True:
		resp = await call(**params, page=page_num, per_page=PAGE_SIZE)
		listing = resp.get(root)
		if listing is None:
			# A listing cut short would be taken as complete membership, so only an absent
			# first page means "no results".
			if page_num > 1:
				raise TransportError('No "{}" in response for page {}'.format(root, page_num))
			logger.debug('No "{}" in response, treating as empty'.format(root))
			break
		results += listing.get(branch) or []

		current = int(listing.get('page') or page_num)
		total = int(listing.get('pages') or 0)
		logger.debug('Fetched "{}" page {} of {}'.format(root, current, total))
		if current >= total:
			break
		page_num = current + 1
	return results
