from __future__ import annotations

import threading
from dataclasses import dataclass, field

from fastapi import Request


@dataclass
class PluginState:
    """In-memory on/off flag for "Plugin A".

    One instance is owned by each app (see ``create_app``); nothing is persisted.
    Handlers may run on the event loop or in the threadpool, so flips take a lock.
    """

    enabled: bool = False
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @property
    def is_enabled(self) -> bool:
        return self.enabled

    @property
    def status_label(self) -> str:
        return "ON" if self.enabled else "OFF"

    def toggle(self) -> bool:
        with self._lock:
            self.enabled = not self.enabled
            return self.enabled


def get_plugin_state(request: Request) -> PluginState:
    state = getattr(request.app.state, "plugin_state", None)
    if state is None:
        raise RuntimeError("Plugin state not initialized")
    return state
