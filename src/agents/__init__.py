from .client import AgentClient, AgentServiceClient
from .invoker import AgentInvoker
from .response import AgentRequest, AgentResult

__all__ = [
    "AgentClient",
    "AgentServiceClient",
    "AgentInvoker",
    "AgentRequest",
    "AgentResult",
]
