"""might-fail: run fallible code and get an outcome instead of an exception.

Flat imports (preferred):
    from might_fail import might_fail, might_fail_async, might_fail_all
    from might_fail import MaybeWithSuccess, not_an_error, fallible

Submodule imports (for organization):
    from might_fail.invoke import might_fail_optional
    from might_fail.async_ import might_fail_all_async
    from might_fail.outcome import from_success, from_failure

A successful ``MaybeWithSuccess`` or ``Maybe`` carries the shared
``NotAnError`` sentinel in ``error``, never None. Check ``success`` (or
``value``) before trusting ``error``.
"""

# Logging
from might_fail._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

# Async invokers
from might_fail.async_ import (
    might_fail_all_async,
    might_fail_async,
    might_fail_optional_async,
    might_fail_pair_async,
)

# Configuration
from might_fail.config import MightFailConfig, get_config, init

# Decorators
from might_fail.decorators import fallible, fallible_async

# Sync invokers
from might_fail.invoke import (
    might_fail,
    might_fail_all,
    might_fail_optional,
    might_fail_pair,
)

# Outcome types
from might_fail.outcome import (
    Maybe,
    MaybeOptional,
    MaybeWithSuccess,
    from_failure,
    from_optional_failure,
    from_optional_success,
    from_success,
)

# Sentinel
from might_fail.sentinel import NotAnError, is_not_an_error, not_an_error

__all__ = [
    # Outcome types
    'Maybe',
    'MaybeOptional',
    'MaybeWithSuccess',
    # Configuration
    'MightFailConfig',
    # Sentinel
    'NotAnError',
    # Logging
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    # Decorators
    'fallible',
    'fallible_async',
    # Constructors
    'from_failure',
    'from_optional_failure',
    'from_optional_success',
    'from_success',
    'get_config',
    'get_logger',
    'init',
    'is_not_an_error',
    # Invokers
    'might_fail',
    'might_fail_all',
    'might_fail_all_async',
    'might_fail_async',
    'might_fail_optional',
    'might_fail_optional_async',
    'might_fail_pair',
    'might_fail_pair_async',
    'not_an_error',
    'remove_log_hook',
]
