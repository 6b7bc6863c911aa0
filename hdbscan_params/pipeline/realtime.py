"""
Debounced real-time validation.

This module provides:
- RealtimeValidator: Owns the live validation state of one editing surface
  and coalesces rapid parameter edits into a single validation pass

Scheduling runs on the asyncio event loop of the caller. There is no
parallelism: ordering is guaranteed by the loop and by cancelling the
pending timer whenever a newer edit arrives.
"""

from typing import Any, Callable, Dict, Mapping, Optional, Union
import asyncio
import logging

from ..params.schema import Mode
from ..validation.messages import ValidationResult
from ..validation.orchestrator import validate_clustering_params


logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_MS = 300

ValidateFn = Callable[[Mapping[str, Any], Mode], ValidationResult]
ChangeCallback = Callable[[ValidationResult], None]


class RealtimeValidator:
    """Live validation state with trailing-edge debouncing.

    Lifecycle:
        mount()    -> first pass (immediate if validate_on_mount, else debounced)
        update()   -> each change reschedules the single pending pass
        validate() -> immediate pass, bypassing the debounce
        dispose()  -> cancels the pending pass; nothing fires afterwards

    Example:
        async def edit():
            with RealtimeValidator({'minClusterSize': 6}, mode='advanced') as live:
                live.mount()
                live.update({'minClusterSize': 7})
                live.update({'minClusterSize': 8})  # supersedes the previous edit
                await asyncio.sleep(0.5)
                print(live.result)
    """

    def __init__(
        self,
        params: Optional[Mapping[str, Any]] = None,
        *,
        mode: Union[str, Mode] = Mode.BASIC,
        debounce_ms: float = DEFAULT_DEBOUNCE_MS,
        validate_on_mount: bool = False,
        on_validation_change: Optional[ChangeCallback] = None,
        validate_fn: Optional[ValidateFn] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None
    ):
        """Initialize live validation.

        Args:
            params: Initial parameter mapping
            mode: Mode selecting the schema tier
            debounce_ms: Quiet period before a scheduled pass runs
            validate_on_mount: Run the first pass immediately on mount
            on_validation_change: Called with every completed result
            validate_fn: Validation function (default: validate_clustering_params)
            loop: Event loop for timers (default: the running loop)
        """
        if debounce_ms < 0:
            raise ValueError("debounce_ms must be non-negative")

        self.mode = Mode.from_string(mode)
        self.debounce_ms = debounce_ms
        self.validate_on_mount = validate_on_mount
        self.on_validation_change = on_validation_change
        self._validate_fn = validate_fn or validate_clustering_params
        self._loop = loop

        # State
        self._params: Dict[str, Any] = dict(params or {})
        self._result = ValidationResult.success()
        self._handle: Optional[asyncio.TimerHandle] = None
        self._running = False
        self._mounted = False
        self._disposed = False

    # -------------------------------------------------------------------------
    # Observable state
    # -------------------------------------------------------------------------

    @property
    def result(self) -> ValidationResult:
        return self._result

    @property
    def errors(self):
        return self._result.errors

    @property
    def warnings(self):
        return self._result.warnings

    @property
    def suggestions(self):
        return self._result.suggestions

    @property
    def is_valid(self) -> bool:
        return self._result.is_valid

    @property
    def is_validating(self) -> bool:
        """True while a pass is pending or running."""
        return self._running or self._handle is not None

    @property
    def params(self) -> Dict[str, Any]:
        """Copy of the parameters the next pass will evaluate."""
        return dict(self._params)

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def mount(self) -> None:
        """Start live validation.

        Raises:
            RuntimeError: If already disposed
        """
        self._ensure_active()
        if self._mounted:
            return
        self._mounted = True

        if self.validate_on_mount:
            self._perform()
        else:
            self._schedule()

    def update(self, params: Mapping[str, Any]) -> None:
        """Record a parameter change and schedule a pass.

        A change whose values equal the current snapshot is ignored. Before
        mount() the snapshot is only replaced.

        Args:
            params: New parameter mapping (read, never modified)

        Raises:
            RuntimeError: If already disposed
        """
        self._ensure_active()
        if params == self._params:
            return
        self._params = dict(params)

        if self._mounted:
            self._schedule()

    def validate(self) -> ValidationResult:
        """Run an immediate pass and return its result.

        Any pending debounced pass is cancelled since this one supersedes it.
        """
        self._cancel_pending()
        return self._perform()

    def clear_errors(self) -> None:
        """Reset the observable result without validating."""
        self._result = ValidationResult.success()

    def dispose(self) -> None:
        """Cancel the pending pass and stop notifying."""
        self._cancel_pending()
        self._disposed = True

    close = dispose

    def __enter__(self) -> 'RealtimeValidator':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.dispose()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _ensure_active(self) -> None:
        if self._disposed:
            raise RuntimeError("RealtimeValidator has been disposed")

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            # Raises RuntimeError outside of a running event loop
            self._loop = asyncio.get_running_loop()
        return self._loop

    def _schedule(self) -> None:
        loop = self._get_loop()
        self._cancel_pending()
        self._handle = loop.call_later(self.debounce_ms / 1000.0, self._on_timer)

    def _cancel_pending(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _on_timer(self) -> None:
        self._handle = None
        if self._disposed:
            return
        self._perform()

    def _perform(self) -> ValidationResult:
        self._running = True
        try:
            result = self._validate_fn(self._params, self.mode)
        except Exception:
            logger.exception("Unexpected error during %s validation", self.mode.value)
            result = ValidationResult.general_failure()
        finally:
            self._running = False

        self._result = result
        self._notify(result)
        return result

    def _notify(self, result: ValidationResult) -> None:
        if self.on_validation_change is None or self._disposed:
            return
        try:
            self.on_validation_change(result)
        except Exception:
            # A faulty listener must not break the editing session
            logger.exception("on_validation_change callback failed")
