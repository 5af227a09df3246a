"""Work split across threads: a chunked sum and a message relay between nodes."""

from __future__ import annotations

import os
import queue
import threading
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import partial

DEFAULT_REPEAT = 100
DEFAULT_NODES = 10


def _chunk_total(chunk: list[int], repeat: int) -> int:
    return sum(chunk) * max(repeat, 0)


def parallel_sum(
    values: Iterable[int], workers: int | None = None, repeat: int = DEFAULT_REPEAT
) -> int:
    """Sum ``values`` times ``repeat`` across ``workers`` threads.

    The values are cut into ``workers`` equal chunks of ``len(values) // workers``
    items; any remainder left after the last full chunk is not counted.
    """
    items = list(values)
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError("workers must be at least 1")
    size = len(items) // workers
    if size == 0:
        return 0
    chunks = [items[start:start + size] for start in range(0, size * workers, size)]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return sum(pool.map(partial(_chunk_total, repeat=repeat), chunks))


@dataclass
class _Node:
    port: int
    inbox: queue.Queue = field(default_factory=queue.Queue)
    done: queue.Queue = field(default_factory=queue.Queue)


def _relay(node: _Node, received: list[str]) -> None:
    message = node.inbox.get()
    received.append(message)
    node.port += 10
    node.done.put(True)


def relay_ports(base_port: int, count: int = DEFAULT_NODES) -> tuple[list[str], list[int]]:
    """Send each of ``count`` nodes a message naming its port and let it bump the port by 10.

    Returns the messages in the order they were received and the final ports.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    nodes = [_Node(base_port + offset) for offset in range(count)]
    received: list[str] = []
    threads = [threading.Thread(target=_relay, args=(node, received), daemon=True) for node in nodes]
    for thread in threads:
        thread.start()
    for node in nodes:
        node.inbox.put(f"msg:{node.port}")
        node.done.get()
    for thread in threads:
        thread.join()
    return received, [node.port for node in nodes]