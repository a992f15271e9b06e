"""Hostname and login name queries through libc."""

import ctypes
import ctypes.util
from functools import lru_cache
from typing import Callable, Optional

from .logging import get_logger

# 254 bytes of name plus the terminating NUL
BUFFER_SIZE = 255
MAX_IDENTITY_BYTES = BUFFER_SIZE - 1

NativeQuery = Callable[..., int]


@lru_cache(maxsize=1)
def _load_libc() -> ctypes.CDLL:
    return ctypes.CDLL(ctypes.util.find_library("c"), use_errno=True)


def _libc_function(name: str) -> Optional[NativeQuery]:
    """Look up a ``int f(char *buf, size_t len)`` function in libc.

    Returns:
        The foreign function, or None if libc or the symbol is unavailable.
    """
    try:
        func = getattr(_load_libc(), name)
    except (OSError, TypeError, AttributeError) as e:
        get_logger("identity").debug(f"libc function {name} unavailable: {e}")
        return None
    func.argtypes = [ctypes.c_char_p, ctypes.c_size_t]
    func.restype = ctypes.c_int
    return func


def _query_native(func: NativeQuery) -> Optional[str]:
    """Run a native query into a buffer owned by this call.

    The buffer is allocated per call so concurrent callers never share it.
    At most MAX_IDENTITY_BYTES are read, even if the callee did not
    NUL-terminate. Invalid UTF-8 is replaced rather than rejected.
    """
    buf = ctypes.create_string_buffer(BUFFER_SIZE)
    if func(buf, BUFFER_SIZE) != 0:
        return None
    raw = buf.raw[:MAX_IDENTITY_BYTES].split(b"\0", 1)[0]
    return raw.decode("utf-8", errors="replace")


def get_hostname() -> Optional[str]:
    """Get the host name via gethostname(2).

    Returns:
        The host name (possibly truncated to 254 bytes), or None.
    """
    func = _libc_function("gethostname")
    if func is None:
        return None
    hostname = _query_native(func)
    if hostname is not None:
        get_logger("identity").debug(f"Found hostname {hostname!r} using gethostname.")
    return hostname


def get_username() -> Optional[str]:
    """Get the login name via getlogin_r(3).

    Returns:
        The login name (possibly truncated to 254 bytes), or None when
        there is no controlling terminal or the call fails.
    """
    func = _libc_function("getlogin_r")
    if func is None:
        return None
    username = _query_native(func)
    if username is not None:
        get_logger("identity").debug(f"Found username {username!r} using getlogin_r.")
    return username
