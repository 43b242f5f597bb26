"""Logic for reconciling the declared photosets with the photosets on Flickr."""
import asyncio
import logging

from .diagnostics import Diagnostics
from .diagnostics import NoMatchWarning
from .diagnostics import OrphanWarning
from .diagnostics import findOrphans
from .general import ALBUM_URL
from .models import PhotosetResult
from .planner import planPhotoset
from .resolver import resolveTargets
from .resolver import selectPrimary
from .snapshot import findRemote
from .snapshot import loadCurrentPhotos
from .snapshot import loadRemotePhotosets
from .status import updateStatus


__all__ = ['sync', 'SyncReport']
logger = logging.getLogger(__name__)


class SyncReport():
	"""The outcome of a completed sync.

	results - a PhotosetResult per declaration, in declaration order.
	warnings - every warning raised during the sync, in the order they happened.
	ordered_ids - photoset IDs in the order they were (or in dryrun, would have been) sorted.
	"""
	def __init__(self, results, warnings, ordered_ids):
		self.results = results
		self.warnings = warnings
		self.ordered_ids = ordered_ids


def chunk(items, size):
	"""Split items into consecutive lists of at most size items."""
	return [items[i:i + size] for i in range(0, len(items), size)]


async def applyPlan(config, flickrwrapper, result, plan, username):
	"""Carry out a Plan for one photoset. Returns nothing."""
	declaration = result.declaration
	photo_ids = [p.photo_id for p in result.target_photos]

	if plan.noop:
		updateStatus('No update necessary for "{}"'.format(declaration.title))
		return

	if plan.create:
		if config.dryrun:
			updateStatus('Would create "{}" with {} photos'.format(declaration.title,
					len(photo_ids)))
			return
		logger.info('Creating photoset "{}" with primary {}'.format(declaration.title,
				result.primary_photo_id))
		result.remote = await flickrwrapper.createPhotoset(declaration.title,
				declaration.description, result.primary_photo_id)
		result.created = True
		updateStatus('Created "{}" at {}'.format(declaration.title,
				ALBUM_URL.format(username, result.remote.photoset_id)))

	if config.dryrun:
		updateStatus('Would update "{}" with {} photos (previously contained {})'.format(
				declaration.title, len(photo_ids), len(result.current_photos or [])))
		return
	await flickrwrapper.editPhotos(result.remote.photoset_id, photo_ids,
			result.primary_photo_id)
	result.updated = True
	if result.created:
		updateStatus('Added {} photos to new photoset "{}"'.format(len(photo_ids),
				declaration.title))
	else:
		updateStatus('Updated "{}" with {} photos (previously contained {})'.format(
				declaration.title, len(photo_ids), len(result.current_photos or [])))


async def syncPhotoset(config, flickrwrapper, declaration, remote_photosets, diagnostics,
		username):
	"""The whole pipeline for one declaration: find its remote photoset and current photos,
	resolve the target photos and primary, then plan and apply. Returns a PhotosetResult.
	"""
	result = PhotosetResult(declaration)
	result.remote = findRemote(remote_photosets, declaration.title)
	if result.remote:
		result.current_photos = await loadCurrentPhotos(flickrwrapper, result.remote)

	result.target_photos = await resolveTargets(flickrwrapper, declaration)
	# Nothing to put in the photoset. Leave any existing one alone.
	if not result.target_photos:
		diagnostics.warn(NoMatchWarning(declaration))
		return result

	result.primary_photo_id = selectPrimary(declaration, result.target_photos, diagnostics)
	plan = planPhotoset(result)
	logger.info('Plan for "{}": {}'.format(declaration.title, plan))
	await applyPlan(config, flickrwrapper, result, plan, username)
	return result


async def sync(config, declarations, flickrwrapper):
	"""Makes the photosets on Flickr match the declarations: creates missing photosets, sets
	the photos and primary photo of each, then orders all of them as declared.

	Declarations are handled config.workers at a time. A group must finish entirely before the
	next one starts, so at most config.workers photosets are in flight.

	Returns a SyncReport. Raises a SyncError (usually a TransportError) on failure, after the
	current group has finished. Photosets changed before the failure stay changed.
	"""
	logger.info(str(config))
	# Validate the config first before acting on data.
	config.validate()
	if config.dryrun:
		updateStatus('NOTE: Dryrun mode, no changes will be made to Flickr photosets.')

	diagnostics = Diagnostics()
	username = await flickrwrapper.whoami()
	remote_photosets = await loadRemotePhotosets(flickrwrapper)

	for orphan in findOrphans(remote_photosets, declarations):
		diagnostics.warn(OrphanWarning(orphan, username))

	results = []
	for group in chunk(list(declarations), config.workers):
		# Let every task in the group settle before reporting a failure, so no request is
		# still running when the error propagates.
		outcomes = await asyncio.gather(*[
				syncPhotoset(config, flickrwrapper, d, remote_photosets, diagnostics, username)
				for d in group], return_exceptions=True)
		for outcome in outcomes:
			if isinstance(outcome, BaseException):
				logger.error('Photoset sync failed: {!r}'.format(outcome))
				raise outcome
		results += outcomes

	ordered_ids = [r.photoset_id for r in results if r.remote]
	if config.dryrun:
		updateStatus('Would sort {} sets on Flickr'.format(len(ordered_ids)))
	elif ordered_ids:
		updateStatus('Sorting {} sets on Flickr'.format(len(ordered_ids)))
		await flickrwrapper.orderPhotosets(ordered_ids)

	updateStatus('DONE!')
	return SyncReport(results, diagnostics.warnings, ordered_ids)
