"""Decides what has to change on Flickr for a declared photoset."""
import logging


__all__ = ['Plan', 'canonicalIds', 'planPhotoset']
logger = logging.getLogger(__name__)


class Plan():
	"""What to do to one photoset.

	create - The photoset doesn't exist on Flickr and must be created first.
	replace - The photoset's membership and primary photo must be set. Always true after a
	          create, since a new photoset only holds its primary photo.
	"""
	def __init__(self, create=False, replace=False):
		self.create = create
		self.replace = replace

	@property
	def noop(self):
		return not self.create and not self.replace

	def __eq__(self, other):
		if not isinstance(other, Plan):
			return NotImplemented
		return self.create == other.create and self.replace == other.replace

	def __repr__(self):
		return 'Plan(create={}, replace={})'.format(self.create, self.replace)


def canonicalIds(photos):
	"""Order-independent form of a photo list, for comparing membership."""
	return ','.join(sorted(p.photo_id for p in photos))


def planPhotoset(result):
	"""Compares a resolved PhotosetResult to its remote photoset and returns a Plan. Only
	meaningful when the result has target photos.
	"""
	if result.remote is None:
		return Plan(create=True, replace=True)

	# Membership is replaced wholesale rather than patched, so any drift, including photos
	# added on Flickr by hand, is undone.
	current = canonicalIds(result.current_photos) if result.current_photos is not None else None
	members_differ = current != canonicalIds(result.target_photos)
	primary_differs = result.primary_photo_id != result.remote.primary
	logger.debug('Plan for "{}": members_differ={}, primary_differs={}'.format(
			result.declaration.title, members_differ, primary_differs))
	return Plan(replace=members_differ or primary_differs)
