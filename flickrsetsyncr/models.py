"""Data model for declared and remote photosets, and the translation from Flickr's JSON."""
import logging

from .general import PRIMARY_KEYWORD_SUFFIX
from .general import SyncError
from .general import normalizeTag


__all__ = ['Declaration', 'Photo', 'PhotosetResult', 'RemotePhotoset', 'SORT_ORDERS',
		'TAG_MODES']
logger = logging.getLogger(__name__)


TAG_MODES = ('any', 'all')
SORT_ORDERS = ('date-posted-asc', 'date-posted-desc', 'date-taken-asc', 'date-taken-desc',
		'interestingness-asc', 'interestingness-desc', 'relevance')
DEFAULT_TAG_MODE = 'any'
DEFAULT_SORT = 'date-taken-asc'


def _content(value):
	"""Flickr wraps localized text like titles in {"_content": ...}. Unwrap it."""
	if isinstance(value, dict):
		return value.get('_content', '')
	return value or ''


def _splitTags(tags):
	"""Flickr returns tags as one space-delimited string."""
	return set(tags.split()) if tags else set()


class Declaration():
	"""A photoset the user wants to exist on Flickr. Built once from the declarations file and
	never modified afterward.

	Args:
		title: Photoset title, matched exactly against Flickr photoset titles.
		keyword: Tag that photos must carry to be members.
		tag_mode: 'any' or 'all', how Flickr matches multiple comma-separated tags.
		sort: Flickr search sort order, which is also the membership order.
		min_date: Earliest date taken, inclusive. (Optional)
		max_date: Latest date taken, inclusive. (Optional)
		description: Description given to the photoset when it is created. (Optional)
		primary_keyword: Keyword marking the cover photo. Defaults to "<keyword>-primary".
	"""
	__slots__ = ('_title', '_keyword', '_tag_mode', '_sort', '_min_date', '_max_date',
			'_description', '_primary_keyword')

	def __init__(self, title, keyword, tag_mode=DEFAULT_TAG_MODE, sort=DEFAULT_SORT,
			min_date=None, max_date=None, description='', primary_keyword=None):
		if not title:
			raise SyncError('Declared photoset has no title.')
		if not keyword:
			raise SyncError('Declared photoset "{}" has no keyword.'.format(title))
		for name, value in (('title', title), ('keyword', keyword),
				('primary keyword', primary_keyword)):
			if value is not None and not isinstance(value, str):
				raise SyncError('Declared photoset "{}" has {} {!r}, must be a string.'.format(
						title, name, value))
		if tag_mode not in TAG_MODES:
			raise SyncError('Declared photoset "{}" has tag mode "{}", must be one of {}.'.format(
					title, tag_mode, TAG_MODES))
		if sort not in SORT_ORDERS:
			raise SyncError('Declared photoset "{}" has sort "{}", must be one of {}.'.format(
					title, sort, SORT_ORDERS))
		self._title = title
		self._keyword = keyword
		self._tag_mode = tag_mode
		self._sort = sort
		self._min_date = min_date
		self._max_date = max_date
		self._description = description or ''
		self._primary_keyword = primary_keyword or keyword + PRIMARY_KEYWORD_SUFFIX

	@classmethod
	def fromDict(cls, record):
		"""Builds a Declaration from one record of the declarations file."""
		if not isinstance(record, dict):
			raise SyncError('Declared photoset must be an object, got: {}'.format(record))
		return cls(record.get('title'), record.get('keyword'),
				tag_mode=record.get('tagMode') or DEFAULT_TAG_MODE,
				sort=record.get('sort') or DEFAULT_SORT,
				min_date=record.get('minDate'),
				max_date=record.get('maxDate'),
				description=record.get('description'),
				primary_keyword=record.get('primaryKeyword'))

	title = property(lambda self: self._title)
	keyword = property(lambda self: self._keyword)
	tag_mode = property(lambda self: self._tag_mode)
	sort = property(lambda self: self._sort)
	min_date = property(lambda self: self._min_date)
	max_date = property(lambda self: self._max_date)
	description = property(lambda self: self._description)
	primary_keyword = property(lambda self: self._primary_keyword)

	@property
	def tag(self):
		return normalizeTag(self._keyword)

	@property
	def primary_tag(self):
		return normalizeTag(self._primary_keyword)

	def __repr__(self):
		return 'Declaration({!r}, keyword={!r})'.format(self._title, self._keyword)

	def describeFilter(self):
		"""Human-readable search criteria, for status output."""
		desc = 'keyword "{}"'.format(self._keyword)
		if self._min_date:
			desc += ', after {}'.format(self._min_date)
		if self._max_date:
			desc += ', before {}'.format(self._max_date)
		return desc


class Photo():
	"""A photo on Flickr. tags is a set, not Flickr's space-delimited string."""
	def __init__(self, photo_id, tags=None):
		self.photo_id = str(photo_id)
		self.tags = set(tags) if tags else set()

	@classmethod
	def fromResponse(cls, raw):
		return cls(raw['id'], _splitTags(raw.get('tags')))

	def __eq__(self, other):
		if not isinstance(other, Photo):
			return NotImplemented
		return self.photo_id == other.photo_id

	def __hash__(self):
		return hash(self.photo_id)

	def __repr__(self):
		return self.photo_id

	def hasTag(self, tag):
		"""Flickr lowercases raw tags, so compare without case."""
		tag = tag.lower()
		return any(t.lower() == tag for t in self.tags)


class RemotePhotoset():
	"""A photoset as it currently exists on Flickr."""
	def __init__(self, photoset_id, title, description='', primary=None, count=0,
			primary_tags=None):
		self.photoset_id = str(photoset_id)
		self.title = title
		self.description = description
		self.primary = str(primary) if primary is not None else None
		self.count = count
		self.primary_tags = set(primary_tags) if primary_tags else set()

	@classmethod
	def fromResponse(cls, raw):
		"""Converts one entry of a photosets.getList response."""
		extras = raw.get('primary_photo_extras') or {}
		return cls(raw['id'], _content(raw.get('title')),
				description=_content(raw.get('description')),
				primary=raw.get('primary'),
				count=int(raw.get('photos', 0) or 0),
				primary_tags=_splitTags(extras.get('tags')))

	def __repr__(self):
		return '{}({})'.format(self.title, self.photoset_id)


class PhotosetResult():
	"""Everything learned and done for one Declaration during one run. Each result is owned by
	exactly one pipeline task, so no locking is needed.
	"""
	def __init__(self, declaration):
		self.declaration = declaration
		self.remote = None
		# None means there is no remote photoset to list, which differs from an empty one.
		self.current_photos = None
		self.target_photos = []
		self.primary_photo_id = None
		self.created = False
		self.updated = False

	@property
	def photoset_id(self):
		return self.remote.photoset_id if self.remote else None

	def __repr__(self):
		return 'PhotosetResult({!r}, remote={}, targets={}, primary={})'.format(
				self.declaration.title, self.remote, len(self.target_photos),
				self.primary_photo_id)
