"""Debug instrumentation for Supermemory MCP.

Provides timing, logging, and request correlation for Supermemory API calls.
Enable via SUPERMEMORY_MCP_DEBUG=1 environment variable, enable_debug(), or
the CLI's --debug flag.
"""

import contextvars
import functools
import inspect
import logging
import os
import time
import uuid
from typing import Any, Callable, TypeVar

from pydantic import BaseModel

logger = logging.getLogger("supermemory_mcp.debug")

DEBUG_ENV_VAR = "SUPERMEMORY_MCP_DEBUG"

# Shared by every API call made from the same task, so the list and add
# issued by one addMemory call log under one ID
_request_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)

_debug_enabled = False

# Calls to the hosted API slower than this are logged as warnings
SLOW_API_THRESHOLD_MS = 1000

# Client methods wrapped by instrument_client()
INSTRUMENTED_METHODS = ("list_memories", "add_memory", "search")

T = TypeVar("T", bound=Callable[..., Any])


def is_debug_enabled() -> bool:
    """True after enable_debug() or when SUPERMEMORY_MCP_DEBUG is 1/true/yes."""
    env_val = os.environ.get(DEBUG_ENV_VAR, "").lower()
    return _debug_enabled or env_val in ("1", "true", "yes")


def enable_debug() -> None:
    global _debug_enabled
    _debug_enabled = True


def disable_debug() -> None:
    global _debug_enabled
    _debug_enabled = False


def get_request_id() -> str:
    req_id = _request_id.get()
    if req_id is None:
        req_id = uuid.uuid4().hex[:8]
        _request_id.set(req_id)
    return req_id


def clear_request_id() -> None:
    _request_id.set(None)


def _preview(value: Any, max_len: int = 50) -> str:
    """repr() of a value, cut to max_len characters."""
    text = repr(value)
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def _format_args(args: dict[str, Any]) -> str:
    return "{" + ", ".join(f"{k}={_preview(v)}" for k, v in args.items()) + "}"


def _summarize_result(result: Any) -> str:
    """Create a brief summary of an API result."""
    if result is None:
        return "None"
    if isinstance(result, BaseModel):
        for attr in ("results", "memories"):
            items = getattr(result, attr, None)
            if isinstance(items, list):
                return f"{type(result).__name__}({len(items)} {attr})"
        return type(result).__name__
    if isinstance(result, list):
        return f"list({len(result)} items)"
    if isinstance(result, str):
        return f"str({len(result)} chars)"
    return type(result).__name__


def timed_api_call(fn: T, *, operation: str | None = None) -> T:
    """Wrap an async API call with timing and logging.

    Args:
        fn: The async function to wrap
        operation: Name to log (defaults to fn.__name__)
    """
    name = operation or fn.__name__
    signature = inspect.signature(fn)

    @functools.wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not is_debug_enabled():
            return await fn(*args, **kwargs)

        req_id = get_request_id()
        try:
            call_args = dict(signature.bind(*args, **kwargs).arguments)
        except TypeError:
            call_args = dict(kwargs)
        call_args.pop("self", None)

        logger.debug(f"API_CALL [req={req_id}] {name}({_format_args(call_args)})")
        start = time.perf_counter()

        try:
            result = await fn(*args, **kwargs)
        except Exception as e:
            elapsed = (time.perf_counter() - start) * 1000
            logger.error(
                f"API_FAIL [req={req_id}] {name} failed in {elapsed:.1f}ms: "
                f"{type(e).__name__}: {e}"
            )
            raise

        elapsed = (time.perf_counter() - start) * 1000
        summary = _summarize_result(result)
        if elapsed > SLOW_API_THRESHOLD_MS:
            logger.warning(
                f"API_SLOW [req={req_id}] {name} completed in {elapsed:.1f}ms "
                f"-> {summary}"
            )
        else:
            logger.debug(
                f"API_DONE [req={req_id}] {name} completed in {elapsed:.1f}ms "
                f"-> {summary}"
            )
        return result

    return wrapper  # type: ignore[return-value]


def instrument_client(client: Any) -> None:
    """Instrument a SupermemoryClient's API methods with debug logging.

    Safe to call more than once; already instrumented clients are left alone.
    Instrumented methods check is_debug_enabled() on every call, so debug
    mode can be toggled at runtime.
    """
    if getattr(client, "_debug_instrumented", False):
        return
    for method_name in INSTRUMENTED_METHODS:
        original = getattr(client, method_name)
        setattr(client, method_name, timed_api_call(original, operation=method_name))
    client._debug_instrumented = True


def configure_debug_logging(level: int = logging.DEBUG) -> None:
    """Configure logging for debug output.

    Output goes to stderr so the stdio transport is never disturbed.

    Args:
        level: Logging level for the debug logger
    """
    debug_logger = logging.getLogger("supermemory_mcp.debug")
    debug_logger.setLevel(level)

    if not debug_logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
        handler.setFormatter(formatter)
        debug_logger.addHandler(handler)
