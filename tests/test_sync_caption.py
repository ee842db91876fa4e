# tests/test_sync_caption.py
import unittest

from services.sync_service import SyncSession
from tests.fakes import TimerFactory
from ui.session import sync_caption


class TestSyncCaption(unittest.TestCase):
    def setUp(self):
        self.timers = TimerFactory()

    def make(self, loader):
        return SyncSession("pascoto", loader=loader, saver=lambda u, b: None,
                           delay=0.4, timer_factory=self.timers)

    def test_pending_edit_until_the_timer_fires(self):
        sync = self.make(lambda u: None)
        data = sync.load()
        self.assertIsNone(sync_caption(sync))
        data["notes"].append("nova")
        sync.notify_mutation(data)
        self.assertEqual(sync_caption(sync), "Alterações pendentes")
        self.timers.timers[-1].fire()
        self.assertIsNone(sync_caption(sync))

    def test_failed_load_is_read_only(self):
        def broken(_):
            raise RuntimeError("offline")
        sync = self.make(broken)
        sync.load()
        self.assertIn("somente leitura", sync_caption(sync))


if __name__ == "__main__":
    unittest.main()
