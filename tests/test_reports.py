"""
Tests for the report engine.
"""

from datetime import timedelta

from django.test import SimpleTestCase, TestCase
from django.utils import timezone

from apps.reports.services import GroupBy, ReportEngine, parse_group_by
from apps.tasks.exceptions import InvalidArgument
from apps.tasks.models import Task
from apps.tasks.services import update_task
from apps.tasks.store import TaskStore
from tests.helpers import FakeTask, RecordingStore, SampleData, make_task, set_updated_at

NOW = timezone.now().replace(microsecond=0)


def fixed_clock():
    return NOW


class CompletedSinceTests(TestCase):

    def setUp(self):
        self.data = SampleData()
        self.engine = ReportEngine(TaskStore(), clock=fixed_clock)
        set_updated_at(self.data.t1, NOW - timedelta(days=3))
        set_updated_at(self.data.t4, NOW - timedelta(days=10))
        set_updated_at(self.data.t5, NOW - timedelta(days=7))
        # Recent but not completed
        set_updated_at(self.data.t2, NOW - timedelta(days=1))

    def test_includes_recent_and_excludes_old_completions(self):
        tasks = self.engine.completed_since(7)
        self.assertIn(self.data.t1, tasks)
        self.assertNotIn(self.data.t4, tasks)
        self.assertNotIn(self.data.t2, tasks)

    def test_lower_bound_is_inclusive(self):
        self.assertIn(self.data.t5, self.engine.completed_since(7))
        self.assertNotIn(self.data.t5, self.engine.completed_since(6))

    def test_wider_window(self):
        self.assertEqual(
            self.engine.completed_since(30),
            [self.data.t1, self.data.t4, self.data.t5],
        )

    def test_edit_of_old_completed_task_brings_it_back(self):
        update_task(self.data.t4, {'description': 'Release notes'})
        engine = ReportEngine(TaskStore())
        self.assertIn(self.data.t4, engine.completed_since(7))

    def test_negative_window_is_invalid(self):
        with self.assertRaises(InvalidArgument):
            self.engine.completed_since(-1)

    def test_window_past_earliest_datetime_returns_every_completion(self):
        expected = [self.data.t1, self.data.t4, self.data.t5]
        self.assertEqual(self.engine.completed_since(1_000_000), expected)
        self.assertEqual(self.engine.completed_since(10 ** 10), expected)


class PendingWorkloadTests(TestCase):

    def test_sums_unfinished_tasks(self):
        data = SampleData()
        workload = ReportEngine(TaskStore()).pending_workload()
        # t2 (5) + t3 (1.5) + t6 (no estimate)
        self.assertEqual(workload.task_count, 3)
        self.assertEqual(workload.total_days, 6.5)
        pending = [task for task in data.tasks if task.status != Task.Status.COMPLETED]
        self.assertEqual(workload.task_count, len(pending))
        self.assertEqual(workload.as_dict(), {'totalDays': 6.5, 'taskCount': 3})

    def test_no_tasks_gives_zeros(self):
        workload = ReportEngine(TaskStore()).pending_workload()
        self.assertEqual(workload.as_dict(), {'totalDays': 0, 'taskCount': 0})

    def test_only_completed_tasks_gives_zeros(self):
        make_task('Done', Task.Status.COMPLETED, time_to_complete=4)
        workload = ReportEngine(TaskStore()).pending_workload()
        self.assertEqual(workload.as_dict(), {'totalDays': 0, 'taskCount': 0})


class GroupedCompletionsTests(TestCase):

    def setUp(self):
        self.data = SampleData()
        self.engine = ReportEngine(TaskStore())
        self.completed = [t for t in self.data.tasks if t.status == Task.Status.COMPLETED]

    def test_totals_match_completed_count_for_every_dimension(self):
        for group_by in GroupBy:
            report = self.engine.grouped_completions(group_by)
            self.assertEqual(report.grouped_by, group_by)
            self.assertEqual(
                sum(group.completed_task_count for group in report.results),
                report.total_completed,
            )
            self.assertEqual(report.total_completed, len(self.completed))

    def test_group_by_team_sorted_by_descending_count(self):
        report = self.engine.grouped_completions('team')
        self.assertEqual(
            [(group.key, group.completed_task_count) for group in report.results],
            [(self.data.beta.pk, 2), (self.data.alpha.pk, 1)],
        )
        self.assertEqual(report.results[0].tasks, [self.data.t4, self.data.t5])

    def test_ties_keep_first_seen_order_across_calls(self):
        # Owners: jane has t1, t5; john has t4 -> add one for john to tie
        make_task('Hotfix', Task.Status.COMPLETED, owner=self.data.john)
        orders = [
            [group.key for group in self.engine.grouped_completions('owner').results]
            for _ in range(3)
        ]
        self.assertEqual(orders[0], [self.data.jane.pk, self.data.john.pk])
        self.assertEqual(orders[0], orders[1])
        self.assertEqual(orders[1], orders[2])

    def test_tasks_without_the_dimension_group_under_none(self):
        make_task('Orphan', Task.Status.COMPLETED)
        report = self.engine.grouped_completions(GroupBy.PROJECT)
        keys = {group.key: group.completed_task_count for group in report.results}
        self.assertEqual(keys, {self.data.apollo.pk: 2, self.data.gemini.pk: 1, None: 1})

    def test_invalid_group_by_runs_no_query(self):
        with self.assertNumQueries(0):
            with self.assertRaises(InvalidArgument) as ctx:
                self.engine.grouped_completions('category')
        self.assertEqual(ctx.exception.argument, 'groupBy')
        self.assertEqual(ctx.exception.valid_values, ['team', 'owner', 'project'])


class ReportEngineUnitTests(SimpleTestCase):

    def test_parse_group_by(self):
        self.assertEqual(parse_group_by('owner'), GroupBy.OWNER)
        with self.assertRaises(InvalidArgument):
            parse_group_by(None)

    def test_invalid_group_by_never_touches_store(self):
        store = RecordingStore(tasks=[FakeTask(1, Task.Status.COMPLETED)])
        with self.assertRaises(InvalidArgument):
            ReportEngine(store).grouped_completions('category')
        self.assertEqual(store.task_queries, [])

    def test_empty_store_yields_empty_groups(self):
        report = ReportEngine(RecordingStore()).grouped_completions('team')
        self.assertEqual(report.results, [])
        self.assertEqual(report.total_completed, 0)

    def test_window_uses_clock(self):
        store = RecordingStore(tasks=[
            FakeTask(1, Task.Status.COMPLETED, updated_at=NOW - timedelta(days=2)),
            FakeTask(2, Task.Status.COMPLETED, updated_at=NOW - timedelta(days=9)),
            FakeTask(3, Task.Status.BLOCKED, updated_at=NOW),
        ])
        tasks = ReportEngine(store, clock=fixed_clock).completed_since(7)
        self.assertEqual([task.pk for task in tasks], [1])

    def test_missing_estimates_count_as_zero(self):
        store = RecordingStore(tasks=[
            FakeTask(1, Task.Status.TO_DO, time_to_complete=None),
            FakeTask(2, Task.Status.BLOCKED, time_to_complete=2),
            FakeTask(3, Task.Status.COMPLETED, time_to_complete=8),
        ])
        workload = ReportEngine(store).pending_workload()
        self.assertEqual((workload.total_days, workload.task_count), (2, 2))
