# tests/test_session_service.py
import unittest

from services.session_service import AppSession
from services.strategy_service import add_funnel_template
from services.sync_service import SyncSession
from tests.fakes import TimerFactory

YASMIN = {"username": "yasmin", "name": "YASMIN", "theme": "feminine"}


class TestAppSession(unittest.TestCase):
    def setUp(self):
        self.timers = TimerFactory()
        self.saved = []
        self.remote = {"notes": ["remoto"], "goals": "legacy"}

    def make(self):
        sync = SyncSession("yasmin", loader=lambda u: self.remote,
                           saver=lambda u, b: self.saved.append(b), delay=0.4, timer_factory=self.timers)
        return AppSession(YASMIN, sync=sync)

    def test_start_populates_store(self):
        session = self.make()
        session.start()
        self.assertFalse(session.syncing)
        self.assertEqual(session.get("notes"), ["remoto"])
        self.assertEqual(session.get("goals"), [])

    def test_apply_before_load_is_local_only(self):
        session = self.make()
        self.assertFalse(session.apply(notes=["x"]))
        self.assertEqual(session.get("notes"), ["x"])
        self.assertEqual(self.timers.timers, [])

    def test_apply_many_schedules_one_save(self):
        session = self.make()
        session.start()
        blocks, edges = add_funnel_template(session.get("blocks"), session.get("edges"), "p1")
        self.assertTrue(session.apply(blocks=blocks, edges=edges))
        self.assertEqual(len(self.timers.timers), 1)
        self.timers.timers[0].fire()
        self.assertEqual(len(self.saved[0]["blocks"]), 4)
        self.assertEqual(len(self.saved[0]["edges"]), 3)

    def test_unknown_collection(self):
        with self.assertRaises(KeyError):
            self.make().apply(habits=[])

    def test_close_stops_saving(self):
        session = self.make()
        session.start()
        session.apply(notes=["a"])
        session.close()
        self.assertEqual(self.timers.live, [])
        self.assertFalse(session.apply(notes=["b"]))


if __name__ == "__main__":
    unittest.main()
