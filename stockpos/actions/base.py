"""Base action class with common functionality for all UI actions."""

import time
from abc import ABC, abstractmethod
from typing import Any, Callable

from pydantic import BaseModel

from stockpos.state.manager import AppState
from stockpos.utils.logging import ActionLogger
from stockpos.utils.tracing import ActionTracer


class ActionResult(BaseModel):
    """Result from an action execution."""

    action: str
    success: bool
    result: Any = None
    error: str | None = None
    execution_time_ms: float = 0.0


class BaseAction(ABC):
    """
    Base class for the action groups the UI invokes.

    Action methods validate user input and raise ``ValueError`` with a
    message fit for display. ``execute`` turns those into failed results.
    """

    def __init__(
        self,
        action_id: str,
        state: AppState,
        tracer: ActionTracer | None = None,
    ):
        self.action_id = action_id
        self.state = state
        self.settings = state.settings
        self.logger = ActionLogger(action_id)
        self.tracer = tracer if tracer is not None else state.tracer

        # Action registry
        self.actions: dict[str, Callable[..., Any]] = {}

    @abstractmethod
    def register_actions(self) -> None:
        """Register available actions for this group."""
        pass

    def register_action(self, name: str, func: Callable[..., Any]) -> None:
        """Register an action by name."""
        self.actions[name] = func

    def execute(self, name: str, params: dict[str, Any] | None = None) -> ActionResult:
        """
        Execute a registered action.

        Args:
            name: Name of the action to execute
            params: Keyword arguments for the action

        Returns:
            ActionResult with the execution outcome
        """
        start_time = time.time()

        if name not in self.actions:
            return ActionResult(
                action=name,
                success=False,
                error=f"Action '{name}' not found",
            )

        try:
            result = self.actions[name](**(params or {}))
        except ValueError as e:
            execution_time_ms = (time.time() - start_time) * 1000
            self.logger.log_rejected(action=name, reason=str(e))
            self._trace(name, execution_time_ms, success=False, error=str(e))
            return ActionResult(
                action=name,
                success=False,
                error=str(e),
                execution_time_ms=execution_time_ms,
            )
        except Exception as e:
            self.logger.log_error(action=name, error=str(e))
            raise

        execution_time_ms = (time.time() - start_time) * 1000
        self.logger.log_action(action=name, duration_ms=execution_time_ms)
        self._trace(name, execution_time_ms, success=True)

        return ActionResult(
            action=name,
            success=True,
            result=result,
            execution_time_ms=execution_time_ms,
        )

    def _trace(self, name: str, duration_ms: float, **metadata: Any) -> None:
        self.tracer.add_event(name, self.action_id, duration_ms=duration_ms, **metadata)
