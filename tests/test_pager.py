import unittest

from flickrsetsyncr import TransportError
from flickrsetsyncr.general import PAGE_SIZE
from flickrsetsyncr.pager import depaginate


class ScriptedCall():
	"""Async stand-in for an API call that serves canned responses in order and records the
	params of each call.
	"""
	def __init__(self, responses):
		self.responses = list(responses)
		self.calls = []

	async def __call__(self, **params):
		self.calls.append(params)
		resp = self.responses[len(self.calls) - 1]
		if isinstance(resp, Exception):
			raise resp
		return resp


def page(num, total, items):
	return {'photos': {'page': num, 'pages': total, 'photo': items}}


class TestDepaginate(unittest.IsolatedAsyncioTestCase):
	async def testConcatenatesAllPagesInOrder(self):
		items = [{'id': str(i)} for i in range(7)]
		for size in (1, 2, 3, 7):
			chunks = [items[i:i + size] for i in range(0, len(items), size)]
			call = ScriptedCall(page(n + 1, len(chunks), c) for n, c in enumerate(chunks))
			got = await depaginate(call, {'tags': 'x'}, 'photos', 'photo')
			self.assertEqual(got, items)
			self.assertEqual(len(call.calls), len(chunks))

	async def testSinglePageStopsAfterOneCall(self):
		call = ScriptedCall([page(1, 1, [{'id': '1'}]), page(2, 1, [{'id': '2'}])])
		got = await depaginate(call, {}, 'photos', 'photo')
		self.assertEqual(got, [{'id': '1'}])
		self.assertEqual(len(call.calls), 1)

	async def testPagingParams(self):
		call = ScriptedCall([page(1, 2, []), page(2, 2, [])])
		await depaginate(call, {'user_id': 'userid'}, 'photos', 'photo')
		self.assertEqual(call.calls, [
			{'user_id': 'userid', 'page': 1, 'per_page': PAGE_SIZE},
			{'user_id': 'userid', 'page': 2, 'per_page': PAGE_SIZE},
		])

	async def testStringPageNumbers(self):
		call = ScriptedCall([
			{'photoset': {'page': '1', 'pages': '2', 'photo': [{'id': 'a'}]}},
			{'photoset': {'page': '2', 'pages': '2', 'photo': [{'id': 'b'}]}},
		])
		got = await depaginate(call, {}, 'photoset', 'photo')
		self.assertEqual(got, [{'id': 'a'}, {'id': 'b'}])

	async def testTotalShrinksMidway(self):
		"""Each page's own total decides, not the first page's."""
		call = ScriptedCall([page(1, 3, [{'id': '1'}]), page(2, 2, [{'id': '2'}]),
				page(3, 3, [{'id': '3'}])])
		got = await depaginate(call, {}, 'photos', 'photo')
		self.assertEqual(got, [{'id': '1'}, {'id': '2'}])
		self.assertEqual(len(call.calls), 2)

	async def testEmptyListing(self):
		"""Flickr reports zero pages for an empty result."""
		call = ScriptedCall([page(1, 0, [])])
		self.assertEqual(await depaginate(call, {}, 'photos', 'photo'), [])
		self.assertEqual(len(call.calls), 1)

	async def testMissingRoot(self):
		call = ScriptedCall([{'stat': 'ok'}])
		self.assertEqual(await depaginate(call, {}, 'photos', 'photo'), [])

	async def testMissingRootOnLaterPage(self):
		"""A listing cut short must not pass for a complete one."""
		call = ScriptedCall([page(1, 2, [{'id': '1'}]), {'stat': 'ok'}])
		with self.assertRaises(TransportError):
			await depaginate(call, {}, 'photos', 'photo')

	async def testErrorDiscardsPartialResults(self):
		call = ScriptedCall([page(1, 2, [{'id': '1'}]), TransportError('boom')])
		with self.assertRaises(TransportError):
			await depaginate(call, {}, 'photos', 'photo')
		self.assertEqual(len(call.calls), 2)


if __name__ == '__main__':
	unittest.main()
