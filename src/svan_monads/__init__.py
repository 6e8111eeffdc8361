"""svan-monads: Option, Result and Try containers for Python 3.13+.

Flat imports (preferred):
    from svan_monads import Option, Some, Nothing, to_option
    from svan_monads import Result, Success, Error, into_result
    from svan_monads import Try, catching, safe

Submodule imports (for organization):
    from svan_monads.option import Some, Nothing, Option
    from svan_monads.result import Success, Error, Result
    from svan_monads.try_ import Try, catching
    from svan_monads.decorators import safe
"""

# Configuration
from svan_monads._config import MonadsConfig, get_config, init

# Zip helpers
from svan_monads._internal.zipping import Merged

# Logging
from svan_monads._logging import configure_logging, get_logger

# Decorators
from svan_monads.decorators import safe

# Errors
from svan_monads.errors import FATAL_EXCEPTIONS, InvalidStateError

# Option types
from svan_monads.option import Nothing, NothingType, Option, Some, to_option

# Result types
from svan_monads.result import Error, Result, Success, into_result

# Try
from svan_monads.try_ import Try, catching

__all__ = [
    'FATAL_EXCEPTIONS',
    'Error',
    'InvalidStateError',
    'Merged',
    'MonadsConfig',
    'Nothing',
    'NothingType',
    'Option',
    'Result',
    'Some',
    'Success',
    'Try',
    'catching',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'into_result',
    'safe',
    'to_option',
]
