"""Finds the photos that belong in a declared photoset and picks its cover photo."""
import logging

from .diagnostics import AmbiguousPrimaryWarning
from .diagnostics import MissingPrimaryWarning
from .models import Photo
from .status import updateStatus


__all__ = ['resolveTargets', 'selectPrimary']
logger = logging.getLogger(__name__)


async def resolveTargets(flickrwrapper, declaration):
	"""Returns the list of Photos matching the declaration, in its sort order."""
	listing = await flickrwrapper.searchPhotos(declaration.keyword,
			tag_mode=declaration.tag_mode,
			sort=declaration.sort,
			min_taken_date=declaration.min_date,
			max_taken_date=declaration.max_date)
	photos = [Photo.fromResponse(p) for p in listing]
	if photos:
		updateStatus('{} photos matched for "{}" by {}'.format(len(photos), declaration.title,
				declaration.describeFilter()))
	return photos


def selectPrimary(declaration, target_photos, diagnostics):
	"""Returns the ID of the photo to use as the photoset's cover, or None if there are no
	photos at all.

	The cover is the photo tagged with the declaration's primary tag. Without one, the first
	photo is used. With several, the first tagged one in search order is used. Both cases are
	reported to diagnostics.
	"""
	tagged = [p for p in target_photos if p.hasTag(declaration.primary_tag)]
	if len(tagged) == 1:
		return tagged[0].photo_id

	if not tagged:
		diagnostics.warn(MissingPrimaryWarning(declaration))
		return target_photos[0].photo_id if target_photos else None

	diagnostics.warn(AmbiguousPrimaryWarning(declaration, [p.photo_id for p in tagged]))
	logger.debug('Using first tagged photo {} for "{}"'.format(tagged[0].photo_id,
			declaration.title))
	return tagged[0].photo_id
