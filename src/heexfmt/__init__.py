"""heexfmt: canonical formatting for HEEx/EEx template token streams.

A pure-Python pretty-printer for markup templates with embedded
expressions. It consumes the token stream of an external template
tokenizer and emits canonically indented, line-wrapped source text.

Quickstart:
    >>> from heexfmt import Environment, TagOpen, TagClose, Text
    >>> env = Environment()
    >>> env.format([TagOpen("section"), TagOpen("h1"), Text("Hi"), TagClose("h1"), TagClose("section")])
    '<section>\\n  <h1>Hi</h1>\\n</section>\\n'

Architecture:
Tokens → render_token (one step per token) → finalize → text

1. **State**: immutable RenderState threaded through the fold
2. **Dispatcher**: one arm per token kind, fixed precedence
3. **Attribute layout**: wraps attributes one per line past the line length
4. **Finalizer**: joins the fragment chain, ending with one newline

Formatting is idempotent: formatting formatted output changes nothing,
provided the expression formatter is idempotent too.

Thread-Safety:
Each format call owns its state; Environment, FormatterConfig and tokens
are immutable, so independent calls run in parallel with no coordination.
"""

from heexfmt._types import (
    Attribute,
    AttributeValue,
    AttributeValueKind,
    ExprTag,
    ExprTagRender,
    TagClose,
    TagOpen,
    Text,
    Token,
    TokenType,
)
from heexfmt.environment import (
    ConfigurationError,
    Environment,
    ErrorCode,
    ExpressionFormatError,
    FormatterConfig,
    FormatterError,
    TokenContractError,
    format_tokens,
)
from heexfmt.expression import ExpressionFormatter, MixFormatter, PassthroughFormatter
from heexfmt.render import RenderContext, RenderState

__version__ = "0.1.0"

__all__ = [
    "Attribute",
    "AttributeValue",
    "AttributeValueKind",
    "ConfigurationError",
    "Environment",
    "ErrorCode",
    "ExprTag",
    "ExprTagRender",
    "ExpressionFormatError",
    "ExpressionFormatter",
    "FormatterConfig",
    "FormatterError",
    "MixFormatter",
    "PassthroughFormatter",
    "RenderContext",
    "RenderState",
    "TagClose",
    "TagOpen",
    "Text",
    "Token",
    "TokenContractError",
    "TokenType",
    "__version__",
    "format_tokens",
]


# Free-threading declaration (PEP 703)
def __getattr__(name: str) -> object:
    """Module-level getattr for the free-threading declaration."""
    if name == "_Py_mod_gil":
        # 0 = Py_MOD_GIL_NOT_USED
        return 0
    raise AttributeError(f"module 'heexfmt' has no attribute {name!r}")
