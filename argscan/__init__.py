"""argscan: POSIX-style command-line argument scanning.

Classifies each token of an argument vector as a short option, a long option
or a positional argument, hands option values to a caller-supplied sink, and
returns the positional arguments.
"""

from ._constants import PROG_NAME, __version__
from .context import ContextFlags, ScanContext, create_context
from .errors import (
    AllocationError,
    ArgScanError,
    CombinedOptionOrderingError,
    ErrorKind,
    MissingOptionValueError,
    OptionsAfterPositionalError,
    ShortOptionsCombinedError,
    SinkRejectionError,
    UnknownOptionError,
)
from .helpers import log_debug, send_log
from .options import DestinationSetter, Option, OptionType
from .parser import ParseOutcome, ParseResult, parse, parse_into, try_parse

__all__ = [
    "__version__",
    "PROG_NAME",
    "AllocationError",
    "ArgScanError",
    "CombinedOptionOrderingError",
    "ContextFlags",
    "DestinationSetter",
    "ErrorKind",
    "MissingOptionValueError",
    "Option",
    "OptionType",
    "OptionsAfterPositionalError",
    "ParseOutcome",
    "ParseResult",
    "ScanContext",
    "ShortOptionsCombinedError",
    "SinkRejectionError",
    "UnknownOptionError",
    "create_context",
    "parse",
    "parse_into",
    "try_parse",
    "send_log",
    "log_debug",
]
