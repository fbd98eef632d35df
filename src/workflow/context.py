from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from src import config


@dataclass(frozen=True)
class AgentStatus:
    agent_id: str
    name: str
    active: bool


class AppContext:
    """
    The few registers shared by every workflow.

    - sample_data: preview flag, toggled by the user, not persisted
    - active_agent_id: set when an invocation starts, cleared when any settles
    - brand_voice: saved voice guide, seeded into the content form

    All are last-writer-wins. Controllers subscribe to hear about flag and
    voice changes.
    """

    def __init__(self, sample_data: bool = False, brand_voice: str = ""):
        self.sample_data = sample_data
        self.brand_voice = brand_voice
        self.active_agent_id: Optional[str] = None
        self._listeners = []

    def subscribe(self, listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set_sample_data(self, enabled: bool) -> None:
        enabled = bool(enabled)
        if enabled == self.sample_data:
            return
        self.sample_data = enabled
        for listener in list(self._listeners):
            listener.on_sample_data_changed(enabled)

    def set_brand_voice(self, voice: str) -> None:
        self.brand_voice = voice or ""
        for listener in list(self._listeners):
            listener.on_brand_voice_changed(self.brand_voice)

    def set_active_agent(self, agent_id: str) -> None:
        self.active_agent_id = agent_id

    def clear_active_agent(self) -> None:
        self.active_agent_id = None

    def agent_statuses(self) -> List[AgentStatus]:
        return [
            AgentStatus(agent_id, name, agent_id == self.active_agent_id)
            for agent_id, name in config.AGENT_NAMES.items()
        ]
