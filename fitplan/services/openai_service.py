"""
Upstream model client and resilient request execution.
"""
import asyncio
import logging

import openai
from openai import AsyncOpenAI
from pydantic import BaseModel, ConfigDict, Field
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from fitplan.core.config import Settings, settings
from fitplan.core.errors import (
    ExhaustedError,
    TerminalUpstreamError,
    TransientUpstreamError,
    UpstreamError,
)
from fitplan.core.logger import logger, log_ai_call


# Per-call timeout: 10s to connect, 90s overall.
# A stalled upstream raises a timeout, which counts as a retryable failure.
UPSTREAM_TIMEOUT = openai.Timeout(settings.UPSTREAM_TIMEOUT, connect=settings.UPSTREAM_CONNECT_TIMEOUT)


def create_client(config: Settings = settings) -> AsyncOpenAI:
    """
    Build the OpenRouter client.

    The SDK's own retries are disabled; PlanRequestExecutor owns the policy.
    """
    return AsyncOpenAI(
        base_url=config.OPENROUTER_BASE_URL,
        api_key=config.OPENROUTER_API_KEY,
        max_retries=0,
        default_headers={
            "HTTP-Referer": config.SITE_URL,
            "X-Title": config.SITE_NAME,
        },
    )


class RetryPolicy(BaseModel):
    """Bounded exponential backoff: 2 retries, 1000ms then 2000ms by default."""

    model_config = ConfigDict(frozen=True)

    max_retries: int = Field(2, ge=0)
    initial_delay_ms: int = Field(1000, ge=0)
    backoff_multiplier: float = Field(2.0, ge=1.0)

    @property
    def attempts(self) -> int:
        return self.max_retries + 1

    def delays_ms(self) -> list[float]:
        """Backoff waits in order, one before each retry."""
        return [
            self.initial_delay_ms * self.backoff_multiplier ** n
            for n in range(self.max_retries)
        ]


def retry_policy_from_settings(config: Settings = settings, max_retries: int = None) -> RetryPolicy:
    """Upstream retry policy from configuration, optionally with another retry budget."""
    return RetryPolicy(
        max_retries=config.PLAN_MAX_RETRIES if max_retries is None else max_retries,
        initial_delay_ms=config.PLAN_INITIAL_DELAY_MS,
        backoff_multiplier=config.PLAN_BACKOFF_MULTIPLIER,
    )


def is_retryable_status(status_code: int | None) -> bool:
    """Network failures (no status), 5xx and 429 are worth another attempt."""
    return status_code is None or status_code >= 500 or status_code == 429


def classify_error(error: Exception) -> UpstreamError:
    """
    Map a failed upstream call onto the error taxonomy.

    Args:
        error: Exception raised by the client

    Returns:
        TransientUpstreamError or TerminalUpstreamError
    """
    if isinstance(error, UpstreamError):
        return error

    status_code = getattr(error, "status_code", None)
    if not isinstance(status_code, int):
        status_code = None

    message = f"{type(error).__name__}: {error}"
    if is_retryable_status(status_code):
        return TransientUpstreamError(message, status_code=status_code)
    return TerminalUpstreamError(message, status_code=status_code)


class PlanRequestExecutor:
    """
    Issues chat-completion requests with bounded retry.

    Attempts are strictly sequential. Terminal failures are raised after a
    single attempt; transient ones are retried until the policy is used up
    and then raised as ExhaustedError.
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        policy: RetryPolicy = None,
        sleep=asyncio.sleep,
        timeout=UPSTREAM_TIMEOUT,
    ):
        self.client = client
        self.policy = policy or RetryPolicy()
        self._sleep = sleep
        self._timeout = timeout

    def with_policy(self, policy: RetryPolicy) -> "PlanRequestExecutor":
        return PlanRequestExecutor(self.client, policy, sleep=self._sleep, timeout=self._timeout)

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            stop=stop_after_attempt(self.policy.attempts),
            wait=wait_exponential(
                multiplier=self.policy.initial_delay_ms / 1000,
                exp_base=self.policy.backoff_multiplier,
            ),
            retry=retry_if_exception_type(TransientUpstreamError),
            before_sleep=before_sleep_log(logging.getLogger(__name__), logging.WARNING),
            sleep=self._sleep,
            reraise=True,
        )

    async def _call(self, payload: dict) -> str | None:
        log_ai_call("Chat API", payload.get("model"))
        try:
            response = await self.client.chat.completions.create(**payload, timeout=self._timeout)
        except Exception as e:
            raise classify_error(e) from e

        if not response.choices:
            return None
        return response.choices[0].message.content

    async def execute(self, payload: dict) -> str | None:
        """
        Send the payload and return the first choice's message content.

        Raises:
            TerminalUpstreamError: On a non-retryable status
            ExhaustedError: When every allowed attempt failed transiently
        """
        attempts = 0
        content = None
        try:
            async for attempt in self._retrying():
                with attempt:
                    attempts = attempt.retry_state.attempt_number
                    content = await self._call(payload)
        except TransientUpstreamError as e:
            raise ExhaustedError(attempts, e) from e
        except TerminalUpstreamError:
            logger.warning(f"Upstream rejected request on attempt {attempts}, not retrying")
            raise

        logger.info(f"Upstream call succeeded on attempt {attempts}/{self.policy.attempts}")
        return content
