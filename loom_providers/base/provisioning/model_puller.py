"""Model puller: make sure a named model is present on a provider.

Purpose:
        Wraps a ``ModelProvisioningClient`` with three operations:
        ``is_available`` (exact-name listing check), ``remove`` (delete only
        when present) and ``ensure_present`` (pull, wait, repeat until the
        provider reports its success token).

Pull loop:
        Requesting -> AwaitingDelay -> Evaluating -> Requesting | Done.
        Every request is followed by the configured delay. Without retry the
        loop stops after the first delay and returns whatever token the
        provider reported. With retry it repeats until the success token
        arrives, a ceiling is hit (``ProvisioningTimeoutError``) or the
        cancellation token fires (``CancelledError``).

Failure semantics:
        - ``ProviderError`` from listing or deleting propagates unchanged.
        - A ``ProviderError`` from a pull counts as a non-success cycle when
          retry is enabled and propagates when it is not.
        - Other exceptions are classified and wrapped into ``ProviderError``.

Threading:
        Blocking and single-threaded per call. Run ``ensure_present`` on a
        worker thread and cancel through ``CancellationToken`` when the
        caller must stay responsive.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, TypeVar

from ..cancellation import CancellationToken
from ..errors import ErrorCode, ProviderError, ProvisioningTimeoutError, wrap_exception
from ..interfaces import ModelProvisioningClient
from ..logging import LogContext, get_logger, log_event, normalized_log_event
from ...config.defaults import OLLAMA_PULL_DELAY_MS, OLLAMA_PULL_SUCCESS_STATUS

T = TypeVar("T")

DEFAULT_PULL_DELAY_MS = OLLAMA_PULL_DELAY_MS
DEFAULT_SUCCESS_STATUS = OLLAMA_PULL_SUCCESS_STATUS


class ModelPuller:
    """Check, remove and pull models through a provisioning client.

    Parameters
    ----------
    client:
        Collaborator performing the remote list/delete/pull operations.
    pull_delay_ms:
        Pause after every pull request, in milliseconds (default 5000).
    success_status:
        Status token meaning "pull complete" (default ``"success"``).
    max_attempts:
        Optional ceiling on pull requests per ``ensure_present`` call when
        retry is enabled. ``None`` means unbounded.
    max_duration_seconds:
        Optional wall-clock ceiling per ``ensure_present`` call when retry is
        enabled. ``None`` means unbounded.

    Raises
    ------
    ValueError
        On a negative delay, a non-positive ceiling or an empty success token.
    """

    def __init__(
        self,
        client: ModelProvisioningClient,
        *,
        pull_delay_ms: int = DEFAULT_PULL_DELAY_MS,
        success_status: str = DEFAULT_SUCCESS_STATUS,
        max_attempts: Optional[int] = None,
        max_duration_seconds: Optional[float] = None,
    ) -> None:
        if pull_delay_ms < 0:
            raise ValueError("pull_delay_ms must be >= 0")
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be >= 1 when set")
        if max_duration_seconds is not None and max_duration_seconds <= 0:
            raise ValueError("max_duration_seconds must be > 0 when set")
        if not success_status:
            raise ValueError("success_status must be a non-empty token")
        self._client = client
        self._pull_delay_ms = pull_delay_ms
        self._success_status = success_status
        self._max_attempts = max_attempts
        self._max_duration_seconds = max_duration_seconds
        self._logger = get_logger("providers.provisioning")

    @property
    def provider_name(self) -> str:
        return getattr(self._client, "provider_name", "unknown")

    @property
    def pull_delay_ms(self) -> int:
        return self._pull_delay_ms

    @property
    def success_status(self) -> str:
        return self._success_status

    @property
    def max_attempts(self) -> Optional[int]:
        return self._max_attempts

    @property
    def max_duration_seconds(self) -> Optional[float]:
        return self._max_duration_seconds

    # ---- Presence ----
    def is_available(self, name: str) -> bool:
        """Return whether the provider lists a model named exactly ``name``.

        Names are compared case-sensitively without normalization. The listing
        is fetched on every call.
        """
        models = self._call(self._client.list_models, name)
        return any(m.name == name for m in models or ())

    def remove(self, name: str) -> bool:
        """Delete ``name`` if present.

        Returns ``False`` without contacting the delete endpoint when the model
        is not listed, otherwise whether the provider reported success.
        """
        ctx = self._ctx(name)
        log_event(self._logger, "delete.start", ctx)
        if not self.is_available(name):
            log_event(self._logger, "delete.skipped", ctx, reason="not_found")
            return False
        result = self._call(lambda: self._client.delete_model(name), name)
        log_event(self._logger, "delete.done", ctx, success=bool(result.success))
        return bool(result.success)

    # ---- Pull loop ----
    def ensure_present(
        self,
        name: str,
        retry_enabled: bool,
        *,
        cancel_token: Optional[CancellationToken] = None,
    ) -> str:
        """Pull ``name`` and return the last status token reported.

        Parameters
        ----------
        name:
            Model to fetch.
        retry_enabled:
            ``False``: one request, one delay, return that token whatever it
            is. ``True``: repeat until the success token is reported.
        cancel_token:
            Checked before every request; also interrupts the delay.

        Raises
        ------
        ProviderError
            When the pull fails and retry is disabled.
        ProvisioningTimeoutError
            When ``max_attempts`` or ``max_duration_seconds`` is exhausted.
        CancelledError
            When ``cancel_token`` is cancelled.
        """
        ctx = self._ctx(name)
        started = time.monotonic()
        attempts = 0
        status = ""
        while True:
            self._check_cancelled(cancel_token, ctx, attempts)
            attempts += 1
            normalized_log_event(self._logger, "pull.start", ctx, phase="request", attempt=attempts)
            failed = False
            try:
                progress = self._call(lambda: self._client.pull_model(name), name)
            except ProviderError as exc:
                if not retry_enabled:
                    raise
                failed = True
                normalized_log_event(
                    self._logger,
                    "pull.error",
                    ctx,
                    phase="request",
                    attempt=attempts,
                    error_code=exc.code.value,
                    level=logging.WARNING,
                    message=exc.message,
                )
            else:
                status = progress.status
                normalized_log_event(
                    self._logger,
                    "pull.status",
                    ctx,
                    phase="evaluate",
                    attempt=attempts,
                    status=status,
                    completed=progress.completed,
                    total=progress.total,
                )

            self._delay(cancel_token, ctx, attempts)

            if not retry_enabled or (not failed and status == self._success_status):
                return status
            self._check_ceilings(name, ctx, attempts, started, status)

    def pull_if_missing(
        self,
        name: str,
        retry_enabled: bool = True,
        *,
        cancel_token: Optional[CancellationToken] = None,
    ) -> str:
        """Return the success token at once if ``name`` is listed, else pull it."""
        if self.is_available(name):
            log_event(self._logger, "pull.skipped", self._ctx(name), reason="present")
            return self._success_status
        return self.ensure_present(name, retry_enabled, cancel_token=cancel_token)

    # ---- Internal helpers ----
    def _ctx(self, name: str) -> LogContext:
        return LogContext(provider=self.provider_name, model=name)

    def _call(self, func: Callable[[], T], name: str) -> T:
        """Invoke a client operation, wrapping non-provider exceptions."""
        try:
            return func()
        except ProviderError:
            raise
        except Exception as exc:
            raise wrap_exception(exc, provider=self.provider_name, model=name) from exc

    def _delay(self, cancel_token: Optional[CancellationToken], ctx: LogContext, attempts: int) -> None:
        seconds = self._pull_delay_ms / 1000.0
        if cancel_token is None:
            time.sleep(seconds)
            return
        if cancel_token.wait(seconds):
            self._check_cancelled(cancel_token, ctx, attempts)

    def _check_cancelled(self, cancel_token: Optional[CancellationToken], ctx: LogContext, attempts: int) -> None:
        if cancel_token is None or not cancel_token.cancelled:
            return
        normalized_log_event(
            self._logger,
            "pull.cancelled",
            ctx,
            phase="cancel",
            attempt=attempts,
            error_code=ErrorCode.CANCELLED.value,
            reason=cancel_token.reason,
        )
        cancel_token.raise_if_cancelled()

    def _check_ceilings(self, name: str, ctx: LogContext, attempts: int, started: float, status: str) -> None:
        elapsed = time.monotonic() - started
        exhausted = (self._max_attempts is not None and attempts >= self._max_attempts) or (
            self._max_duration_seconds is not None and elapsed >= self._max_duration_seconds
        )
        if not exhausted:
            return
        normalized_log_event(
            self._logger,
            "pull.timeout",
            ctx,
            phase="evaluate",
            attempt=attempts,
            error_code=ErrorCode.TIMEOUT.value,
            level=logging.WARNING,
            elapsed_seconds=round(elapsed, 3),
            last_status=status or None,
        )
        raise ProvisioningTimeoutError(
            message=f"model {name!r} not provisioned after {attempts} attempts ({elapsed:.1f}s)",
            provider=self.provider_name,
            model=name,
            retryable=True,
            attempts=attempts,
            elapsed_seconds=elapsed,
            last_status=status or None,
        )


__all__ = ["ModelPuller", "DEFAULT_PULL_DELAY_MS", "DEFAULT_SUCCESS_STATUS"]
