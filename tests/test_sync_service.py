# tests/test_sync_service.py
import unittest

from core.models import empty_bundle
from services.sync_service import DebouncedSaver, SyncSession
from tests.fakes import TimerFactory


def bundle_with_notes(*notes):
    b = empty_bundle()
    b["notes"] = list(notes)
    return b


class TestDebouncedSaver(unittest.TestCase):
    def setUp(self):
        self.timers = TimerFactory()
        self.saved = []
        self.saver = DebouncedSaver(self.saved.append, 0.4, timer_factory=self.timers)

    def test_burst_collapses_into_last_write(self):
        for i in range(3):
            self.saver.schedule(bundle_with_notes(str(i)))
        self.assertEqual(len(self.timers.live), 1)
        self.assertEqual(self.timers.timers[0].interval, 0.4)
        for t in self.timers.timers:
            t.fire()
        self.assertEqual(self.saved, [bundle_with_notes("2")])
        self.assertFalse(self.saver.pending)

    def test_replaced_timer_does_not_write_if_it_fires_late(self):
        self.saver.schedule(bundle_with_notes("old"))
        first = self.timers.timers[0]
        self.saver.schedule(bundle_with_notes("new"))
        # simulate a timer thread that was already running when cancelled
        first.cancelled = False
        first.fire()
        self.assertEqual(self.saved, [])

    def test_cancel(self):
        self.saver.schedule(bundle_with_notes("x"))
        self.saver.cancel()
        self.timers.timers[0].fire()
        self.assertEqual(self.saved, [])
        self.assertFalse(self.saver.pending)

    def test_failures_are_swallowed(self):
        def boom(_):
            raise RuntimeError("network down")
        saver = DebouncedSaver(boom, 0.4, timer_factory=self.timers)
        saver.schedule(bundle_with_notes("x"))
        self.timers.timers[-1].fire()
        saver.schedule(bundle_with_notes("y"))
        self.assertTrue(saver.pending)


class TestSyncSession(unittest.TestCase):
    def setUp(self):
        self.timers = TimerFactory()
        self.saved = []
        self.remote = {"yasmin": {"notes": ["remoto"]}}

    def make(self, loader=None):
        return SyncSession(
            "yasmin",
            loader=loader or (lambda u: self.remote.get(u)),
            saver=lambda u, b: self.saved.append((u, b)),
            delay=0.4,
            timer_factory=self.timers,
        )

    def test_no_save_before_load(self):
        sync = self.make()
        self.assertFalse(sync.notify_mutation(bundle_with_notes("local")))
        self.assertEqual(self.timers.timers, [])

    def test_load_does_not_schedule_a_save(self):
        sync = self.make()
        data = sync.load()
        self.assertEqual(data["notes"], ["remoto"])
        self.assertEqual(self.timers.timers, [])
        self.assertTrue(sync.loaded and sync.can_save)

    def test_mutation_after_load_saves_snapshot(self):
        sync = self.make()
        data = sync.load()
        data["notes"].append("local")
        self.assertTrue(sync.notify_mutation(data))
        data["notes"].append("later, unsaved")
        self.timers.timers[-1].fire()
        self.assertEqual(self.saved, [("yasmin", bundle_with_notes("remoto", "local"))])

    def test_missing_document_loads_empty(self):
        self.remote = {}
        self.assertEqual(self.make().load(), empty_bundle())

    def test_failed_load_falls_back_and_blocks_saves(self):
        def broken(_):
            raise ConnectionError("timeout")
        sync = self.make(loader=broken)
        self.assertEqual(sync.load(), empty_bundle())
        self.assertTrue(sync.loaded)
        self.assertFalse(sync.notify_mutation(bundle_with_notes("x")))

    def test_stale_load_is_dropped(self):
        sync = self.make()
        old = sync.begin_load()
        new = sync.begin_load()
        self.assertIsNone(sync.finish_load(old, {"notes": ["slow"]}))
        self.assertFalse(sync.loaded)
        self.assertEqual(sync.finish_load(new, {"notes": ["fresh"]})["notes"], ["fresh"])

    def test_close_cancels_pending_save_and_invalidates_load(self):
        sync = self.make()
        sync.load()
        sync.notify_mutation(bundle_with_notes("x"))
        token = sync.begin_load()
        sync.close()
        self.assertEqual(self.timers.live, [])
        self.assertIsNone(sync.finish_load(token, {"notes": ["late"]}))
        self.assertFalse(sync.notify_mutation(bundle_with_notes("y")))
        for t in self.timers.timers:
            t.fire()
        self.assertEqual(self.saved, [])


if __name__ == "__main__":
    unittest.main()
