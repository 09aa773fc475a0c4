"""Orchestration of model turns against a workspace."""

from uigen.kernel.orchestration.agent_loop import AgentLoop, AgentRunResult

__all__ = ["AgentLoop", "AgentRunResult"]
