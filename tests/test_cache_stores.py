import tempfile
import time
import unittest
from pathlib import Path

from domain.entities import Annotation
from infrastructure.cache.in_memory_cache_store import InMemoryCacheStore
from infrastructure.cache.sqlite_cache_store import SqliteCacheStore


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


VALUE = (Annotation("Apple", 0.9, "http://dbpedia.org/resource/Apple_Inc."), Annotation("iPhone", 0.75))


class TestInMemoryCacheStore(unittest.TestCase):
    def test_put_then_get_returns_value(self) -> None:
        store = InMemoryCacheStore()
        store.put("k", VALUE, 3600)

        self.assertEqual(store.get("k"), VALUE)

    def test_missing_key_returns_none(self) -> None:
        self.assertIsNone(InMemoryCacheStore().get("absent"))

    def test_entry_expires_after_ttl(self) -> None:
        clock = FakeClock()
        store = InMemoryCacheStore(clock=clock)
        store.put("k", VALUE, 60)

        clock.now += 60
        self.assertEqual(store.get("k"), VALUE)
        clock.now += 0.001
        self.assertIsNone(store.get("k"))
        self.assertEqual(len(store), 0)

    def test_tiny_ttl_expires_with_real_clock(self) -> None:
        store = InMemoryCacheStore()
        store.put("k", VALUE, 1e-9)
        time.sleep(0.01)

        self.assertIsNone(store.get("k"))

    def test_put_replaces_existing_entry(self) -> None:
        store = InMemoryCacheStore()
        store.put("k", VALUE, 3600)
        store.put("k", (Annotation("Pear"),), 3600)

        self.assertEqual(store.get("k"), (Annotation("Pear"),))

    def test_max_entries_drops_oldest_first(self) -> None:
        store = InMemoryCacheStore(max_entries=2)
        store.put("a", VALUE, 3600)
        store.put("b", VALUE, 3600)
        store.put("c", VALUE, 3600)

        self.assertIsNone(store.get("a"))
        self.assertEqual(store.get("b"), VALUE)
        self.assertEqual(store.get("c"), VALUE)

    def test_max_entries_drops_expired_before_live(self) -> None:
        clock = FakeClock()
        store = InMemoryCacheStore(max_entries=2, clock=clock)
        store.put("live", VALUE, 3600)
        store.put("short", VALUE, 1)
        clock.now += 5
        store.put("new", VALUE, 3600)

        self.assertEqual(store.get("live"), VALUE)
        self.assertEqual(store.get("new"), VALUE)
        self.assertEqual(len(store), 2)

    def test_rejects_non_positive_ttl(self) -> None:
        with self.assertRaises(ValueError):
            InMemoryCacheStore().put("k", VALUE, 0)


class TestSqliteCacheStore(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.db_path = Path(self._tmp.name) / "cache" / "keywordsuggest.db"
        self.clock = FakeClock()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_roundtrip_survives_new_instance(self) -> None:
        SqliteCacheStore(db_path=self.db_path, clock=self.clock).put("k", VALUE, 3600)

        reopened = SqliteCacheStore(db_path=self.db_path, clock=self.clock)

        self.assertEqual(reopened.get("k"), VALUE)

    def test_expired_row_is_not_served(self) -> None:
        store = SqliteCacheStore(db_path=self.db_path, clock=self.clock)
        store.put("k", VALUE, 10)
        self.clock.now += 11

        self.assertIsNone(store.get("k"))
        self.assertEqual(store.purge_expired(), 0)

    def test_purge_expired_removes_only_stale_rows(self) -> None:
        store = SqliteCacheStore(db_path=self.db_path, clock=self.clock)
        store.put("stale", VALUE, 10)
        store.put("fresh", VALUE, 3600)
        self.clock.now += 20

        self.assertEqual(store.purge_expired(), 1)
        self.assertEqual(store.get("fresh"), VALUE)

    def test_put_replaces_existing_row(self) -> None:
        store = SqliteCacheStore(db_path=self.db_path, clock=self.clock)
        store.put("k", VALUE, 3600)
        store.put("k", (Annotation("Pear", 0.5),), 3600)

        self.assertEqual(store.get("k"), (Annotation("Pear", 0.5),))


if __name__ == "__main__":
    unittest.main()
