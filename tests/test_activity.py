"""Tests for the Activity lifecycle and id allocation."""

import gc
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from activity_log import (
	Activity,
	ActivityIdAllocator,
	ActivityType,
	Field,
	RecordingLogger,
	ResultType,
	next_activity_id,
)
from activity_log.core.types import MAX_UINT64


def kinds(events):
	return [event.kind for event in events]


class TestActivityIdAllocator:
	"""Test id allocation."""

	def test_ids_increase(self):
		allocator = ActivityIdAllocator(10)
		assert [allocator.allocate() for _ in range(3)] == [10, 11, 12]

	def test_start_is_masked_to_uint64(self):
		allocator = ActivityIdAllocator(MAX_UINT64 + 5)
		assert allocator.allocate() == 4

	def test_ids_stay_in_uint64_range(self):
		allocator = ActivityIdAllocator(MAX_UINT64)
		assert allocator.allocate() == MAX_UINT64
		assert allocator.allocate() == 0

	def test_process_allocator_is_monotonic(self):
		first = next_activity_id()
		second = next_activity_id()
		assert 0 <= first < second <= MAX_UINT64

	def test_concurrent_allocation_yields_distinct_ids(self):
		allocator = ActivityIdAllocator()
		num_threads = 16
		per_thread = 500

		def allocate_many():
			return [allocator.allocate() for _ in range(per_thread)]

		with ThreadPoolExecutor(max_workers=num_threads) as executor:
			batches = list(executor.map(lambda _: allocate_many(), range(num_threads)))

		ids = [act for batch in batches for act in batch]
		assert len(set(ids)) == num_threads * per_thread
		# each thread saw its own ids in increasing order
		for batch in batches:
			assert batch == sorted(batch)


class TestActivityLifecycle:
	"""Test that every activity is started once and stopped once."""

	def test_start_on_creation(self):
		sink = RecordingLogger()
		act = Activity(sink, ActivityType.BUILD, "build foo")

		assert kinds(sink.events) == ["start"]
		start = sink.events[0]
		assert (start.act, start.type, start.message) == (act.id, ActivityType.BUILD, "build foo")
		assert sink.running == {act.id}
		act.close()

	def test_description_is_optional(self):
		sink = RecordingLogger()
		with Activity(sink, ActivityType.OPTIMISE_STORE):
			pass
		assert sink.events[0].message == ""

	def test_stop_on_normal_exit(self):
		sink = RecordingLogger()
		with Activity(sink, ActivityType.COPY_PATH, "copy") as act:
			pass

		assert kinds(sink.events) == ["start", "stop"]
		assert sink.events[1].act == act.id
		assert act.stopped
		assert sink.running == set()

	def test_stop_on_early_return(self):
		sink = RecordingLogger()

		def work():
			with Activity(sink, ActivityType.REALISE, "realise") as act:
				return act.id

		act_id = work()
		assert kinds(sink.events) == ["start", "stop"]
		assert sink.events[1].act == act_id

	def test_stop_on_exception_without_suppressing_it(self):
		sink = RecordingLogger()

		with pytest.raises(ValueError, match="fetch failed"):
			with Activity(sink, ActivityType.DOWNLOAD, "fetch") as act:
				raise ValueError("fetch failed")

		assert kinds(sink.events) == ["start", "stop"]
		assert sink.events[1].act == act.id

	def test_close_is_idempotent(self):
		sink = RecordingLogger()
		with Activity(sink, ActivityType.BUILD) as act:
			act.close()
			act.close()

		assert kinds(sink.events) == ["start", "stop"]
		assert not any(event.unmatched for event in sink.events)

	def test_unclosed_activity_stops_when_collected(self):
		sink = RecordingLogger()
		act = Activity(sink, ActivityType.VERIFY_PATHS, "verify")
		act_id = act.id
		del act
		gc.collect()

		assert kinds(sink.events) == ["start", "stop"]
		assert sink.events[1].act == act_id

	def test_nested_activities_stop_inside_out(self):
		sink = RecordingLogger()
		with Activity(sink, ActivityType.BUILDS, "2 builds") as outer:
			with Activity(sink, ActivityType.BUILD, "build a") as inner:
				pass

		assert [(event.kind, event.act) for event in sink.events] == [
			("start", outer.id),
			("start", inner.id),
			("stop", inner.id),
			("stop", outer.id),
		]

	def test_uses_process_logger_by_default(self, recorder):
		with Activity(type=ActivityType.COPY_PATHS, description="copy paths") as act:
			pass

		assert [(event.kind, event.act) for event in recorder.events] == [
			("start", act.id),
			("stop", act.id),
		]

	def test_custom_allocator(self):
		sink = RecordingLogger()
		with Activity(sink, ActivityType.BUILD, allocator=ActivityIdAllocator(7)) as act:
			assert act.id == 7

	def test_open_activity_type_accepts_plain_int(self):
		sink = RecordingLogger()
		with Activity(sink, 250, "custom kind"):
			pass
		assert sink.events[0].type == 250


class TestActivityEvents:
	"""Test forwarding of progress, expected counts and results."""

	def test_download_scenario(self):
		sink = RecordingLogger()
		with Activity(sink, ActivityType.DOWNLOAD, "fetch foo") as act:
			act.progress(3, 10, 1, 0)

		events = sink.events_for(act.id)
		assert kinds(events) == ["start", "progress", "stop"]
		assert events[0].type == ActivityType.DOWNLOAD
		assert events[0].message == "fetch foo"
		assert events[1].counters == (3, 10, 1, 0)
		assert kinds(sink.events).count("stop") == 1

	def test_progress_defaults_to_zero(self):
		sink = RecordingLogger()
		with Activity(sink, ActivityType.COPY_PATHS) as act:
			act.progress()
			act.progress(done=2)

		assert [event.counters for event in sink.events if event.kind == "progress"] == [
			(0, 0, 0, 0),
			(2, 0, 0, 0),
		]

	def test_set_expected(self):
		sink = RecordingLogger()
		with Activity(sink, ActivityType.BUILDS) as act:
			act.set_expected(ActivityType.BUILD, 12)

		event = sink.events[1]
		assert (event.kind, event.act, event.type, event.counters) == (
			"set_expected",
			act.id,
			ActivityType.BUILD,
			(12,),
		)

	def test_result_builds_ordered_fields(self):
		sink = RecordingLogger()
		with Activity(sink, ActivityType.OPTIMISE_STORE) as act:
			act.result(ResultType.FILE_LINKED, 42, "path/to/file")

		event = sink.events[1]
		assert event.kind == "result"
		assert event.act == act.id
		assert event.type == ResultType.FILE_LINKED
		assert event.fields == [Field(42), Field("path/to/file")]
		assert event.fields[0].as_int() == 42
		assert event.fields[1].as_str() == "path/to/file"

	def test_result_with_no_values(self):
		sink = RecordingLogger()
		with Activity(sink, ActivityType.VERIFY_PATHS) as act:
			act.result(ResultType.CORRUPTED_PATH)

		assert sink.events[1].fields == []

	def test_result_rejects_bad_value_before_reaching_sink(self):
		sink = RecordingLogger()
		with Activity(sink, ActivityType.VERIFY_PATHS) as act:
			with pytest.raises(TypeError):
				act.result(ResultType.UNTRUSTED_PATH, 1.5)

		assert kinds(sink.events) == ["start", "stop"]


class TestConcurrentActivities:
	"""Test activities created from several threads."""

	def test_two_threads_do_not_cross(self):
		sink = RecordingLogger()
		barrier = threading.Barrier(2)
		ids = {}

		def work(name, done):
			with Activity(sink, ActivityType.DOWNLOAD, name) as act:
				ids[name] = act.id
				barrier.wait(timeout=5)
				act.progress(done, 10)
				act.result(ResultType.FILE_LINKED, done, name)

		threads = [
			threading.Thread(target=work, args=("a", 1)),
			threading.Thread(target=work, args=("b", 2)),
		]
		for thread in threads:
			thread.start()
		for thread in threads:
			thread.join()

		assert ids["a"] != ids["b"]
		for name, done in (("a", 1), ("b", 2)):
			events = sink.events_for(ids[name])
			assert kinds(events) == ["start", "progress", "result", "stop"]
			assert events[0].message == name
			assert events[1].counters == (done, 10, 0, 0)
			assert events[2].fields == [Field(done), Field(name)]
		assert sink.running == set()

	def test_many_threads_each_get_one_start_and_stop(self):
		sink = RecordingLogger()
		num_tasks = 50

		def work(index):
			with Activity(sink, ActivityType.BUILD, f"build {index}") as act:
				act.progress(index)
				return act.id

		with ThreadPoolExecutor(max_workers=8) as executor:
			ids = list(executor.map(work, range(num_tasks)))

		assert len(set(ids)) == num_tasks
		for act_id in ids:
			assert kinds(sink.events_for(act_id)) == ["start", "progress", "stop"]
		assert not any(event.unmatched for event in sink.events)
