import unittest

from flickrsetsyncr import Declaration
from flickrsetsyncr import SyncError
from flickrsetsyncr.models import Photo
from flickrsetsyncr.models import RemotePhotoset


class TestDeclaration(unittest.TestCase):
	def testDefaults(self):
		d = Declaration('Trip', 'trip2024')
		self.assertEqual(d.tag_mode, 'any')
		self.assertEqual(d.sort, 'date-taken-asc')
		self.assertEqual(d.description, '')
		self.assertIsNone(d.min_date)
		self.assertIsNone(d.max_date)

	def testDerivedTags(self):
		d = Declaration('Trip', 'trip-2024')
		self.assertEqual(d.tag, 'trip2024')
		self.assertEqual(d.primary_keyword, 'trip-2024-primary')
		self.assertEqual(d.primary_tag, 'trip2024primary')

	def testPrimaryKeywordOverride(self):
		d = Declaration('Trip', 'trip2024', primary_keyword='best of trip')
		self.assertEqual(d.primary_keyword, 'best of trip')
		self.assertEqual(d.primary_tag, 'bestoftrip')

	def testFromDict(self):
		d = Declaration.fromDict({
			'title': 'Garden',
			'keyword': 'garden',
			'tagMode': 'all',
			'sort': 'date-taken-desc',
			'minDate': '2023-01-01',
			'maxDate': 1704067199,
			'description': 'The garden',
			'primaryKeyword': 'garden-cover',
		})
		self.assertEqual(d.title, 'Garden')
		self.assertEqual(d.tag_mode, 'all')
		self.assertEqual(d.sort, 'date-taken-desc')
		self.assertEqual(d.min_date, '2023-01-01')
		self.assertEqual(d.max_date, 1704067199)
		self.assertEqual(d.description, 'The garden')
		self.assertEqual(d.primary_tag, 'gardencover')

	def testImmutable(self):
		d = Declaration('Trip', 'trip2024')
		with self.assertRaises(AttributeError):
			d.title = 'Other'

	def testInvalid(self):
		testCases = [
			{'keyword': 'trip'},
			{'title': 'Trip'},
			{'title': 'Trip', 'keyword': 'trip', 'tagMode': 'some'},
			{'title': 'Trip', 'keyword': 'trip', 'sort': 'random'},
			{'title': 'Y', 'keyword': 2024},
			{'title': 2024, 'keyword': 'y'},
			{'title': 'Y', 'keyword': 'y', 'primaryKeyword': ['cover']},
			'not a record',
		]
		for t in testCases:
			self.assertRaises(SyncError, Declaration.fromDict, t)


class TestFromResponse(unittest.TestCase):
	def testPhoto(self):
		photo = Photo.fromResponse({'id': 42, 'tags': 'a b  c'})
		self.assertEqual(photo.photo_id, '42')
		self.assertEqual(photo.tags, {'a', 'b', 'c'})

	def testPhotoWithoutTags(self):
		self.assertEqual(Photo.fromResponse({'id': '1', 'tags': ''}).tags, set())
		self.assertEqual(Photo.fromResponse({'id': '1'}).tags, set())

	def testHasTagIgnoresCase(self):
		self.assertTrue(Photo('1', ['trip2024primary']).hasTag('Trip2024Primary'))
		self.assertFalse(Photo('1', ['trip2024']).hasTag('trip2024primary'))

	def testRemotePhotoset(self):
		remote = RemotePhotoset.fromResponse({
			'id': '72157',
			'primary': '2',
			'photos': 12,
			'title': {'_content': 'Trip'},
			'description': {'_content': 'A trip'},
			'primary_photo_extras': {'tags': 'trip2024 trip2024primary'},
		})
		self.assertEqual(remote.photoset_id, '72157')
		self.assertEqual(remote.title, 'Trip')
		self.assertEqual(remote.description, 'A trip')
		self.assertEqual(remote.primary, '2')
		self.assertEqual(remote.count, 12)
		self.assertEqual(remote.primary_tags, {'trip2024', 'trip2024primary'})

	def testRemotePhotosetPlainTitle(self):
		remote = RemotePhotoset.fromResponse({'id': '1', 'title': 'Trip'})
		self.assertEqual(remote.title, 'Trip')
		self.assertEqual(remote.description, '')
		self.assertIsNone(remote.primary)


if __name__ == '__main__':
	unittest.main()
