"""Single-flight background builder for compressed dictionaries."""

import logging
import threading
from collections import deque
from collections.abc import Callable
from concurrent.futures import Executor, ThreadPoolExecutor
from enum import Enum

from spellcore.services.dictionary.base import Dictionary, Loader
from spellcore.services.dictionary.compressed import CompressedDictionary
from spellcore.services.transform import Transform

logger = logging.getLogger(__name__)

OnReady = Callable[[Dictionary], None]


class LoadState(Enum):
    """Whether a build pipeline is currently running."""

    IDLE = "idle"
    BUILDING = "building"


class LoadCoordinator:
    """
    Builds compressed dictionaries off the caller's thread, one at a time.

    The first request made while idle starts a pipeline on the executor.
    Requests arriving while it runs are queued and drained, oldest first, by
    that same pipeline. Once the queue is empty the coordinator returns to
    idle and notifies `on_finished` once for the whole batch.

    In synchronous mode every request is built immediately on the calling
    thread and no batch notification is sent.
    """

    def __init__(
        self,
        transform: Transform,
        on_finished: Callable[[], None] | None = None,
        synchronous: bool = False,
        executor: Executor | None = None,
    ) -> None:
        self.transform = transform
        self.synchronous = synchronous
        self._on_finished = on_finished
        self._executor = executor
        self._owns_executor = executor is None
        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)
        self._state = LoadState.IDLE
        self._pending: deque[tuple[Loader, OnReady]] = deque()
        self._closed = False

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def is_building(self) -> bool:
        return self._state is LoadState.BUILDING

    @property
    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)

    def request_load(self, loader: Loader, on_ready: OnReady) -> None:
        """
        Build a dictionary from `loader` and hand it to `on_ready`.

        Never raises for a bad loader: failures are logged and skipped.
        """
        if self._closed:
            logger.debug(f"Ignoring load of {loader.name}: coordinator is shut down")
            return

        if self.synchronous:
            self._build(loader, on_ready)
            return

        with self._lock:
            if self._state is LoadState.BUILDING:
                logger.debug(f"Queuing load for: {loader.name}")
                self._pending.append((loader, on_ready))
                return
            self._state = LoadState.BUILDING

        logger.debug(f"Loading {loader.name}")
        try:
            self._get_executor().submit(self._run, loader, on_ready)
        except RuntimeError:
            # Executor was shut down between the check above and submit
            logger.warning(f"Could not schedule load of {loader.name}")
            with self._lock:
                self._pending.clear()
                self._state = LoadState.IDLE
                self._idle.notify_all()

    def wait_until_idle(self, timeout: float | None = None) -> bool:
        """Block until no build is running. Returns False on timeout."""
        with self._idle:
            return self._idle.wait_for(lambda: self._state is LoadState.IDLE, timeout=timeout)

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting requests and release the worker thread."""
        self._closed = True
        if self._executor is not None and self._owns_executor:
            self._executor.shutdown(wait=wait)

    def _get_executor(self) -> Executor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="dictionary-loader"
            )
        return self._executor

    def _run(self, loader: Loader, on_ready: OnReady) -> None:
        """Pipeline body: build the first loader, then drain the queue."""
        try:
            self._build(loader, on_ready)
            while True:
                with self._lock:
                    if not self._pending:
                        self._state = LoadState.IDLE
                        self._idle.notify_all()
                        break
                    loader, on_ready = self._pending.popleft()
                self._build(loader, on_ready)
        except BaseException:
            with self._lock:
                self._state = LoadState.IDLE
                self._idle.notify_all()
            raise

        logger.debug("Loading finished, requesting reanalysis")
        if self._on_finished is not None:
            try:
                self._on_finished()
            except Exception as e:
                logger.warning(f"Reanalysis callback failed: {e}")

    def _build(self, loader: Loader, on_ready: OnReady) -> None:
        try:
            dictionary = CompressedDictionary.create(loader, self.transform)
        except Exception as e:
            logger.warning(f"Failed to load dictionary {loader.name}: {e}")
            return

        if dictionary is None:
            logger.warning(f"Dictionary {loader.name} is empty, skipping")
            return

        logger.debug(f"{loader.name} loaded!")
        try:
            on_ready(dictionary)
        except Exception as e:
            logger.warning(f"Failed to register dictionary {loader.name}: {e}")
