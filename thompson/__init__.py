from thompson.automaton import NFA, simulate  # noqa: F401
from thompson.compiler import compile  # noqa: F401
from thompson.exceptions import (  # noqa: F401
    CompileError,
    EmptyExpression,
    TrailingInput,
    UnclosedGroup,
    UnexpectedToken,
)
from thompson.regex import Regex, matches  # noqa: F401
from thompson.version import VERSION as __version__  # noqa: F401
