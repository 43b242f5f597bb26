"""Common definitions."""
import re


__all__ = ['PAGE_SIZE', 'SyncError', 'TransportError', 'VERSION', 'normalizeTag']


VERSION = '0.1.0'  # The canonical version definition.


# Listing calls always ask for the largest page Flickr serves, to minimize round-trips.
PAGE_SIZE = 500

# Suffix appended to a keyword to name the tag marking a photoset's cover photo.
PRIMARY_KEYWORD_SUFFIX = '-primary'

ALBUM_URL = 'https://www.flickr.com/photos/{}/albums/{}'


# Custom exception class used to terminate execution.
class SyncError(Exception):
	pass


class TransportError(SyncError):
	"""A Flickr API call failed, either at the HTTP level or with an error response."""
	pass


# Flickr drops punctuation and whitespace when it turns a keyword into the "raw" tag form it
# returns in listings.
_NON_ALNUM = re.compile(r'[^a-zA-Z0-9]+')


def normalizeTag(keyword):
	return _NON_ALNUM.sub('', keyword)
