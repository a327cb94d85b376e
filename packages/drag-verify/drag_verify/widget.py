"""VerifyWidget - wires config, input adapter, state machine and sink together."""
from __future__ import annotations

import logging
from typing import Any, Callable

from drag_verify.adapters import InputAdapter, PlatformCapabilities, select_adapter
from drag_verify.bus import REDIRECTED, Handler, SignalBus
from drag_verify.config import VerifyConfig
from drag_verify.machine import GestureStateMachine
from drag_verify.scheduler import ScheduledStep
from drag_verify.sinks import RedirectSink
from drag_verify.types import Phase, StateChange, TrackGeometry
from drag_verify.view import WidgetView

logger = logging.getLogger(__name__)


class _FlushingReceiver:
    """Forwards adapter signals to the machine and flushes the bus after each."""

    def __init__(self, machine: GestureStateMachine, bus: SignalBus) -> None:
        self._machine = machine
        self._bus = bus

    def drag_start(self, client_x: Any = None) -> bool:
        accepted = self._machine.drag_start(client_x)
        self._bus.flush()
        return accepted

    def drag_move(self, client_x: Any) -> bool:
        accepted = self._machine.drag_move(client_x)
        self._bus.flush()
        return accepted

    def drag_end(self) -> bool:
        accepted = self._machine.drag_end()
        self._bus.flush()
        return accepted


class VerifyWidget:
    """One disposable verification widget.

    Mounting creates a fresh session and binds input; the host then calls
    ``advance`` with elapsed milliseconds from its own loop. The widget
    unmounts itself once the redirect has fired and cannot be mounted again.
    """

    def __init__(
        self,
        config: VerifyConfig,
        sink: RedirectSink,
        geometry_provider: Callable[[], TrackGeometry],
        capabilities: PlatformCapabilities | None = None,
        bus: SignalBus | None = None,
    ) -> None:
        self._config = config
        self._sink = sink
        self._geometry_provider = geometry_provider
        self._capabilities = capabilities
        self._bus = bus if bus is not None else SignalBus()
        self._machine: GestureStateMachine | None = None
        self._adapter: InputAdapter | None = None
        self._bus.subscribe(REDIRECTED, self._on_redirected)

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def mounted(self) -> bool:
        return self._adapter is not None

    @property
    def adapter(self) -> InputAdapter | None:
        return self._adapter

    @property
    def machine(self) -> GestureStateMachine:
        if self._machine is None:
            raise RuntimeError("Widget has not been mounted")
        return self._machine

    @property
    def phase(self) -> Phase:
        return self.machine.phase

    @property
    def progress(self) -> float:
        return self.machine.progress

    @property
    def state(self) -> StateChange:
        return self.machine.session.state()

    def view(self) -> WidgetView:
        return WidgetView.from_state(self.phase, self.progress)

    def subscribe(self, signal_name: str, handler: Handler) -> Callable[[], None]:
        return self._bus.subscribe(signal_name, handler)

    def mount(self, handle: Any, document: Any = None) -> None:
        if self._machine is not None:
            raise RuntimeError("Widget is single-use and has already been mounted")
        self._machine = GestureStateMachine(
            self._config, self._sink, self._geometry_provider, bus=self._bus
        )
        adapter = select_adapter(_FlushingReceiver(self._machine, self._bus), self._capabilities)
        adapter.mount(handle, document)
        self._adapter = adapter
        logger.debug("Mounted with %s", type(adapter).__name__)

    def advance(self, elapsed_ms: float) -> list[ScheduledStep]:
        fired = self.machine.advance(elapsed_ms)
        self._bus.flush()
        return fired

    def unmount(self) -> None:
        if self._adapter is not None:
            self._adapter.unmount()
            self._adapter = None
            logger.debug("Unmounted")

    def _on_redirected(self, signal: str, data: dict[str, Any]) -> None:
        self.unmount()
