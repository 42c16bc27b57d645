"""Per-invocation CLI state stored on `typer.Context.obj`."""

from __future__ import annotations

from dataclasses import dataclass

import httpx
import typer

from core.config import AppSettings
from core.interfaces.observer import TransportObserver
from core.services.factory import ConfluenceControllers, build_controllers


@dataclass
class CliState:
    settings: AppSettings
    client: httpx.AsyncClient | None = None
    observer: TransportObserver | None = None

    def controllers(self) -> ConfluenceControllers:
        return build_controllers(self.settings, observer=self.observer, client=self.client)


def get_state(ctx: typer.Context) -> CliState:
    """Find the state set by the root callback (sub-apps get a child context)."""

    state = ctx.find_object(CliState)
    if state is None:
        state = CliState(settings=AppSettings())
        ctx.obj = state
    return state
