"""Deterministic mock collaborators for offline testing.

Purpose
-------
Provide scripted stand-ins for the provisioning and invocation collaborators
so the model puller and the invocation facade can be exercised without any
network traffic. Every call is recorded for assertions.

Scripting
---------
``MockProvisioningClient`` replays ``pull_script`` one entry per
``pull_model`` call; the last entry repeats once the script is exhausted. An
entry is either a status string or an exception instance, which is raised
instead of returning progress. ``list_error`` / ``delete_error`` make the
corresponding call raise.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from ..base.models import DeleteResult, ModelSummary, PullProgress
from ..base.options import ModelOptions

PullStep = Union[str, Exception]


class MockProvisioningClient:
    """Scripted ``ModelProvisioningClient`` implementation."""

    def __init__(
        self,
        *,
        provider: str = "mock",
        models: Iterable[str] = (),
        pull_script: Sequence[PullStep] = ("success",),
        delete_success: bool = True,
        list_error: Optional[Exception] = None,
        delete_error: Optional[Exception] = None,
        install_on_success: bool = True,
    ) -> None:
        if not pull_script:
            raise ValueError("pull_script must contain at least one step")
        self._provider = provider
        self._models: List[str] = list(models)
        self._pull_script: List[PullStep] = list(pull_script)
        self._delete_success = delete_success
        self._list_error = list_error
        self._delete_error = delete_error
        self._install_on_success = install_on_success
        self.list_calls = 0
        self.pull_calls: List[str] = []
        self.delete_calls: List[str] = []

    @property
    def provider_name(self) -> str:
        return self._provider

    @property
    def models(self) -> List[str]:
        return list(self._models)

    def list_models(self) -> List[ModelSummary]:
        self.list_calls += 1
        if self._list_error is not None:
            raise self._list_error
        return [ModelSummary(name=n) for n in self._models]

    def delete_model(self, name: str) -> DeleteResult:
        self.delete_calls.append(name)
        if self._delete_error is not None:
            raise self._delete_error
        if self._delete_success and name in self._models:
            self._models.remove(name)
        return DeleteResult(success=self._delete_success)

    def pull_model(self, name: str) -> PullProgress:
        index = min(len(self.pull_calls), len(self._pull_script) - 1)
        self.pull_calls.append(name)
        step = self._pull_script[index]
        if isinstance(step, Exception):
            raise step
        if step == "success" and self._install_on_success and name not in self._models:
            self._models.append(name)
        return PullProgress(status=step)


@dataclass
class RecordedInvocation:
    """One call captured by :class:`MockInvocationClient`."""

    prompt: str
    instructions: List[str]
    options: ModelOptions


@dataclass
class MockInvocationClient:
    """Recording ``InvocationClient`` returning a canned result.

    ``error`` makes every call raise it instead.
    """

    provider: str = "mock"
    result: Any = "ok"
    error: Optional[Exception] = None
    calls: List[RecordedInvocation] = field(default_factory=list)

    @property
    def provider_name(self) -> str:
        return self.provider

    def invoke(self, *, prompt: str, instructions: Sequence[str], options: ModelOptions) -> Any:
        self.calls.append(RecordedInvocation(prompt=prompt, instructions=list(instructions), options=options))
        if self.error is not None:
            raise self.error
        return self.result

    @property
    def last_params(self) -> Dict[str, Any]:
        """Flattened options of the most recent call."""
        return self.calls[-1].options.to_params()


__all__ = ["MockProvisioningClient", "MockInvocationClient", "RecordedInvocation", "PullStep"]
