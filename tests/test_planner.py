import unittest

from flickrsetsyncr import Declaration
from flickrsetsyncr.models import Photo
from flickrsetsyncr.models import PhotosetResult
from flickrsetsyncr.models import RemotePhotoset
from flickrsetsyncr.planner import Plan
from flickrsetsyncr.planner import canonicalIds
from flickrsetsyncr.planner import planPhotoset


def photos(*ids):
	return [Photo(i) for i in ids]


class TestPlanPhotoset(unittest.TestCase):
	def setUp(self):
		self.result = PhotosetResult(Declaration('Trip', 'trip2024'))
		self.result.target_photos = photos('1', '2', '3')
		self.result.primary_photo_id = '2'

	def testCreateWhenNoRemote(self):
		self.assertEqual(planPhotoset(self.result), Plan(create=True, replace=True))

	def testNoop(self):
		"""Order doesn't matter, only the set of photos and the primary."""
		self.result.remote = RemotePhotoset('100', 'Trip', primary='2')
		self.result.current_photos = photos('3', '1', '2')
		plan = planPhotoset(self.result)
		self.assertTrue(plan.noop)
		self.assertEqual(plan, Plan())

	def testMembershipDiffers(self):
		self.result.remote = RemotePhotoset('100', 'Trip', primary='2')
		testCases = [photos('1', '2'), photos('1', '2', '3', '4'), photos(), None]
		for current in testCases:
			self.result.current_photos = current
			self.assertEqual(planPhotoset(self.result), Plan(replace=True))

	def testPrimaryDiffers(self):
		self.result.remote = RemotePhotoset('100', 'Trip', primary='1')
		self.result.current_photos = photos('1', '2', '3')
		self.assertEqual(planPhotoset(self.result), Plan(replace=True))


class TestCanonicalIds(unittest.TestCase):
	def testSortedAndJoined(self):
		self.assertEqual(canonicalIds(photos('3', '10', '2')), '10,2,3')
		self.assertEqual(canonicalIds([]), '')


if __name__ == '__main__':
	unittest.main()
