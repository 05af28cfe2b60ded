"""Memoizing decorator backed by a region cache."""

import functools
import inspect
import re
from collections.abc import Callable
from typing import Any, TypeVar

from regioncache.core.interfaces.cache import ICache
from regioncache.utils.hashing import hash_value

F = TypeVar("F", bound=Callable[..., Any])

_INSTANCE_ARGS = ("self", "cls")


def memoize(
    cache: ICache[Any],
    key: str | Callable[..., str] | None = None,
) -> Callable[[F], F]:
    """Decorator memoizing an async function in a cache.

    Each call goes through ``cache.get_or_compute``: a hit returns the
    stored value, a miss runs the function and stores a non-None result.
    A None result is not stored, and the region's default value is
    returned instead.

    Args:
        cache: The region cache to store results in.
        key: Cache key for a call. If a string, supports {arg_name}
            interpolation. If callable, receives (*args, **kwargs) and
            returns the key. If None, the key is built from the function
            name and a hash of its arguments. A leading ``self`` or ``cls``
            argument is left out, so all instances share entries; use an
            explicit key if results depend on the instance.

    Returns:
        Decorated function.

    Example:
        users = RegionCache(store, RegionCacheConfig.for_region("users", 600))

        @memoize(users, key="user:{id}")
        async def get_user(id: str) -> dict:
            return await db.get_user(id)
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            cache_key = _build_cache_key(func, signature, args, kwargs, key)

            async def compute(_: str) -> Any:
                return await func(*args, **kwargs)

            return await cache.get_or_compute(cache_key, compute)

        return wrapper  # type: ignore

    return decorator


def _build_cache_key(
    func: Callable[..., Any],
    signature: inspect.Signature,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    custom_key: str | Callable[..., str] | None,
) -> str:
    """Build the cache key for a function call."""
    if custom_key is not None:
        if callable(custom_key):
            return custom_key(*args, **kwargs)
        bound = signature.bind(*args, **kwargs)
        bound.apply_defaults()
        return _interpolate_string(custom_key, bound.arguments)

    bound = signature.bind(*args, **kwargs)
    bound.apply_defaults()
    arguments = dict(bound.arguments)
    params = list(signature.parameters)
    if params and params[0] in _INSTANCE_ARGS:
        arguments.pop(params[0])
    return f"{func.__qualname__}:{hash_value(arguments)}"


def _interpolate_string(template: str, arguments: dict[str, Any]) -> str:
    """Interpolate {arg_name} placeholders in string.

    Placeholders without a matching argument are kept as-is.
    """
    pattern = r"\{(\w+)\}"

    def replacer(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in arguments:
            return str(arguments[name])
        return match.group(0)

    return re.sub(pattern, replacer, template)
