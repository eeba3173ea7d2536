# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Runtime Bridge - lazy, exactly-once access to the Keras runtime.

The bridge owns the process's handle on TensorFlow/Keras. The first
request for a root module checks (and if allowed, installs) the runtime
distribution, then imports the module; every later request returns the
cached module object.

Concurrent first requests are collapsed: one caller does the work, the
others block on the same future and receive the same module (or the same
InitializationError).

Example:
    bridge = RuntimeBridge()
    keras = bridge.keras
    layer = keras.layers.Dense(10)
"""

import functools
import logging
import threading
import time
from concurrent.futures import Future
from typing import Any, Callable, Dict, Hashable, Optional

from ..config import BridgeConfig
from ..errors import InitializationError
from ..observability import get_logger
from .installer import ensure_runtime_ready, import_module

logger = logging.getLogger("kerasproxy.runtime.bridge")

# Signature: (dependency, min_version) -> bool
EnsureReadyFunc = Callable[[str, str], bool]
# Signature: (dotted_path) -> module
ImportFunc = Callable[[str], Any]

_ENVIRONMENT = ("environment",)


class SingleFlight:
    """
    Runs a computation at most once per key.

    The first caller for a key runs it; callers arriving while it runs
    wait for its outcome; callers arriving afterwards get the stored
    outcome. Results are read without locking once stored. Failures are
    stored too and re-raised to every caller until forget() is called.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._results: Dict[Hashable, Any] = {}
        self._calls: Dict[Hashable, Future] = {}

    def do(self, key: Hashable, fn: Callable[[], Any]) -> Any:
        while True:
            try:
                return self._results[key]
            except KeyError:
                pass

            with self._lock:
                future = self._calls.get(key)
                owner = future is None
                if owner:
                    future = Future()
                    self._calls[key] = future

            if owner:
                return self._run(key, future, fn)

            try:
                return future.result()
            except BaseException as e:
                # An interrupted owner leaves the key free, so start over
                owner_interrupted = (
                    not isinstance(e, Exception)
                    and future.done()
                    and future.exception() is e
                )
                if not owner_interrupted:
                    raise

    def _run(self, key: Hashable, future: Future, fn: Callable[[], Any]) -> Any:
        try:
            result = fn()
        except Exception as e:
            future.set_exception(e)
            raise
        except BaseException as e:
            # Interrupted, not failed: let the next caller try again
            with self._lock:
                if self._calls.get(key) is future:
                    del self._calls[key]
            future.set_exception(e)
            raise

        with self._lock:
            # forget() during the run drops this outcome
            if self._calls.get(key) is future:
                self._results[key] = result
        future.set_result(result)
        return result

    def done(self, key: Hashable) -> bool:
        return key in self._results

    def forget(self, key: Optional[Hashable] = None) -> None:
        """Drop the stored outcome for one key, or for all keys."""
        with self._lock:
            if key is None:
                self._results.clear()
                self._calls.clear()
            else:
                self._results.pop(key, None)
                self._calls.pop(key, None)


class RuntimeBridge:
    """
    Context object holding the initialized Keras runtime.

    Construct one per process (see kerasproxy.runtime.get_bridge) and pass
    it to whatever needs the runtime. The collaborators can be replaced,
    which is how tests run without TensorFlow.

    Args:
        config: Bridge configuration. Defaults to BridgeConfig.from_env().
        ensure_ready: Called once as ensure_ready(dependency, min_version);
            must return True when the runtime is installed.
        importer: Called once per module path to import it.
    """

    def __init__(
        self,
        config: Optional[BridgeConfig] = None,
        ensure_ready: Optional[EnsureReadyFunc] = None,
        importer: Optional[ImportFunc] = None,
    ):
        self._config = config or BridgeConfig.from_env()
        self._ensure_ready = ensure_ready or functools.partial(
            ensure_runtime_ready, config=self._config
        )
        self._importer = importer or import_module
        self._flights = SingleFlight()

    @property
    def config(self) -> BridgeConfig:
        return self._config

    @property
    def keras(self) -> Any:
        """The Keras root module (tensorflow.keras by default)."""
        return self.get_root_module(self._config.keras_module)

    @property
    def tensorflow(self) -> Any:
        """The TensorFlow root module."""
        return self.get_root_module(self._config.tensorflow_module)

    def get_root_module(self, name: str) -> Any:
        """
        Return the module at a dotted path, initializing the runtime first.

        Args:
            name: Dotted module path, e.g. "tensorflow.keras".

        Returns:
            The imported module; the same object on every call.

        Raises:
            InitializationError: If setting up the runtime or importing the
                module failed, now or on an earlier call.
        """
        return self._flights.do(("module", name), lambda: self._load(name))

    def is_initialized(self, name: Optional[str] = None) -> bool:
        """Whether environment setup (or the given module) completed."""
        if name is None:
            return self._flights.done(_ENVIRONMENT)
        return self._flights.done(("module", name))

    def reset(self) -> None:
        """
        Forget cached modules and recorded failures.

        The next get_root_module() call repeats environment setup. Modules
        already imported stay in sys.modules.
        """
        self._flights.forget()

    def _load(self, name: str) -> Any:
        self._flights.do(_ENVIRONMENT, self._setup_environment)

        start = time.perf_counter()
        try:
            module = self._importer(name)
        except Exception as e:
            get_logger().error(
                f"Importing {name} failed: {e}", component="runtime", module=name
            )
            raise InitializationError(
                f"could not import '{name}': {e}",
                dependency=self._config.dependency,
                module=name,
                min_version=self._config.min_version,
            ) from e

        get_logger().info(
            "Module loaded",
            component="runtime",
            module=name,
            duration_ms=(time.perf_counter() - start) * 1000,
        )
        return module

    def _setup_environment(self) -> bool:
        dependency = self._config.dependency
        min_version = self._config.min_version
        logger.debug(f"Checking runtime dependency {dependency}>={min_version}")

        start = time.perf_counter()
        try:
            ready = self._ensure_ready(dependency, min_version)
        except Exception as e:
            raise InitializationError(
                f"environment setup raised {type(e).__name__}: {e}",
                dependency=dependency,
                min_version=min_version,
            ) from e

        if not ready:
            get_logger().error(
                f"{dependency}>={min_version} is not available",
                component="runtime",
                dependency=dependency,
            )
            raise InitializationError(
                f"{dependency}>={min_version} is not available",
                dependency=dependency,
                min_version=min_version,
            )

        get_logger().info(
            "Runtime environment ready",
            component="runtime",
            dependency=dependency,
            duration_ms=(time.perf_counter() - start) * 1000,
        )
        return True
