import asyncio
from typing import Any, Dict, List, Optional, Tuple


class DummyLogger:
    def debug(self, *args, **kwargs): pass
    def info(self, *args, **kwargs): pass
    def warning(self, *args, **kwargs): pass
    def error(self, *args, **kwargs): pass
    def exception(self, *args, **kwargs): pass


class FakeAgentClient:
    """Returns a fixed service envelope (or raises) and records every call."""

    def __init__(self, envelope: Optional[Dict[str, Any]] = None, exc: Optional[Exception] = None):
        self.envelope = envelope if envelope is not None else {"success": True, "response": {"result": {}}}
        self.exc = exc
        self.calls: List[Tuple[str, str]] = []

    async def call(self, message: str, agent_id: str) -> Dict[str, Any]:
        self.calls.append((message, agent_id))
        if self.exc is not None:
            raise self.exc
        return self.envelope


class GatedAgentClient:
    """
    Each call blocks until the test releases it, so tests decide the order in
    which overlapping invocations settle.
    """

    def __init__(self):
        self.calls: List[Tuple[str, str]] = []
        self._gates: List[Tuple[asyncio.Event, Dict[str, Any]]] = []
        self.started = asyncio.Event()

    async def call(self, message: str, agent_id: str) -> Dict[str, Any]:
        gate = asyncio.Event()
        slot = {"envelope": None}
        self._gates.append((gate, slot))
        self.calls.append((message, agent_id))
        self.started.set()
        await gate.wait()
        return slot["envelope"]

    def release(self, index: int, envelope: Dict[str, Any]) -> None:
        gate, slot = self._gates[index]
        slot["envelope"] = envelope
        gate.set()


def success(result: Any) -> Dict[str, Any]:
    return {"success": True, "response": {"result": result}}
