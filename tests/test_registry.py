from __future__ import annotations

import threading

from botRouter.handlers.handler import HandlerType, MatchType
from botRouter.registry import HandlerRegistry
from botRouter.rwlock import RWLock


def test_register_unregister_handler() -> None:
    registry = HandlerRegistry()

    id1 = registry.register(HandlerType.CALLBACK_QUERY_DATA, "", MatchType.EXACT, None)
    id2 = registry.register(HandlerType.CALLBACK_QUERY_DATA, "", MatchType.EXACT, None)

    assert id1 != id2
    assert len(registry) == 2
    assert registry.find(id1) is not None
    assert registry.find(id2) is not None

    registry.unregister(id1)

    assert len(registry) == 1
    assert registry.find(id1) is None
    assert registry.find(id2) is not None


def test_unregister_unknown_id_is_noop() -> None:
    registry = HandlerRegistry()
    handler_id = registry.register(HandlerType.MESSAGE_TEXT, "x", MatchType.EXACT, None)

    registry.unregister("does-not-exist")
    registry.unregister(handler_id)
    registry.unregister(handler_id)

    assert len(registry) == 0


def test_snapshot_keeps_insertion_order_and_is_isolated() -> None:
    registry = HandlerRegistry()
    ids = [registry.register(HandlerType.MESSAGE_TEXT, str(i), MatchType.EXACT, None) for i in range(3)]

    snap = registry.snapshot()
    registry.unregister(ids[0])
    registry.register(HandlerType.MESSAGE_TEXT, "late", MatchType.EXACT, None)

    assert [h.id for h in snap] == ids
    assert [h.id for h in registry.snapshot()][:2] == ids[1:]


def test_ids_are_unique() -> None:
    registry = HandlerRegistry()
    ids = {registry.registerWithFunction(lambda u: True, None) for _ in range(500)}
    assert len(ids) == 500


def test_concurrent_register_and_unregister() -> None:
    registry = HandlerRegistry()
    keep: list[str] = []
    keep_lock = threading.Lock()

    def worker() -> None:
        for _ in range(100):
            tmp = registry.register(HandlerType.MESSAGE_TEXT, "tmp", MatchType.EXACT, None)
            stay = registry.register(HandlerType.MESSAGE_TEXT, "stay", MatchType.EXACT, None)
            registry.snapshot()
            registry.unregister(tmp)
            with keep_lock:
                keep.append(stay)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(registry) == 800
    assert {h.id for h in registry.snapshot()} == set(keep)


def test_rwlock_allows_parallel_readers() -> None:
    lock = RWLock()
    inside = threading.Barrier(2, timeout=5)

    def reader() -> None:
        with lock.reading():
            # both readers must be inside at once to pass the barrier
            inside.wait()

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert not inside.broken


def test_rwlock_writer_excludes_readers() -> None:
    lock = RWLock()
    events: list[str] = []
    writer_in = threading.Event()

    def reader() -> None:
        writer_in.wait()
        with lock.reading():
            events.append("read")

    t = threading.Thread(target=reader)
    t.start()
    with lock.writing():
        writer_in.set()
        # give the reader a chance to run; it must stay blocked
        t.join(timeout=0.1)
        events.append("write-done")
    t.join()

    assert events == ["write-done", "read"]
