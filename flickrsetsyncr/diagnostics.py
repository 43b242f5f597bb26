"""Non-fatal problems noticed during a sync. They are reported to the user but never change
what the sync does.
"""
import logging

from .general import ALBUM_URL
from .status import warnStatus


__all__ = ['AmbiguousPrimaryWarning', 'Diagnostics', 'MissingPrimaryWarning',
		'NoMatchWarning', 'OrphanWarning', 'findOrphans']
logger = logging.getLogger(__name__)


class SyncWarning():
	def __init__(self, title):
		self.title = title

	def __repr__(self):
		return '{}({!r})'.format(type(self).__name__, self.title)


class OrphanWarning(SyncWarning):
	"""A photoset on Flickr that no declaration refers to."""
	def __init__(self, remote, username=None):
		super().__init__(remote.title)
		self.remote = remote
		self.username = username

	def __str__(self):
		msg = 'Photoset "{}" is orphaned'.format(self.title)
		if self.username:
			msg += ' ({})'.format(ALBUM_URL.format(self.username, self.remote.photoset_id))
		return msg


class NoMatchWarning(SyncWarning):
	"""A declaration whose search found no photos."""
	def __init__(self, declaration):
		super().__init__(declaration.title)
		self.declaration = declaration

	def __str__(self):
		return 'No matched photos for "{}" by {}'.format(self.title,
				self.declaration.describeFilter())


class MissingPrimaryWarning(SyncWarning):
	"""No matched photo carries the primary tag, so the first photo becomes the cover."""
	def __init__(self, declaration):
		super().__init__(declaration.title)
		self.declaration = declaration

	def __str__(self):
		return 'No primary photo for "{}" by keyword "{}"'.format(self.title,
				self.declaration.primary_keyword)


class AmbiguousPrimaryWarning(SyncWarning):
	"""More than one matched photo carries the primary tag."""
	def __init__(self, declaration, photo_ids):
		super().__init__(declaration.title)
		self.declaration = declaration
		self.photo_ids = photo_ids

	def __str__(self):
		return 'Multiple photos for "{}" keyworded with "{}": {}'.format(self.title,
				self.declaration.primary_keyword, ', '.join(self.photo_ids))


class Diagnostics():
	"""Collects warnings in the order they happen and reports each one as it arrives."""
	def __init__(self):
		self.warnings = []

	def warn(self, warning):
		self.warnings.append(warning)
		logger.warning(str(warning))
		warnStatus(str(warning))

	def ofType(self, warning_type):
		return [w for w in self.warnings if isinstance(w, warning_type)]


def findOrphans(remote_photosets, declarations):
	"""Remote photosets whose title matches no declaration."""
	titles = {d.title for d in declarations}
	return [r for r in remote_photosets if r.title not in titles]
