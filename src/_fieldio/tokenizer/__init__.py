"""
In this module, a tokenizer reads characters one at a time from a text
stream and splits them into fields. A call reads one group of fields (a row
for RowTokenizer, a requested number of fields for FieldTokenizer) and
returns a ParseResult telling whether a group was produced, skipped due to
the configured policy, or whether the stream was already exhausted.

Tokenizers never seek and never own the stream. When an error is raised
the stream is left at the character where reading stopped, and the
caller's output list is left untouched.

Configuration is immutable: with_options and with_transformation return new
tokenizers, so a configuration can not change while a call is running.
"""

from .errors import (
    EmptyField,
    FieldIOError,
    InvalidArgument,
    MissingFields,
    UnexpectedFields,
)
from .field_tokenizer import FieldTokenizer, FieldTokenizerConfig
from .result import ParseResult, ParseStatus
from .row_tokenizer import RowTokenizer, RowTokenizerConfig
from .transformation import FieldTransformation

__all__ = [
    "EmptyField",
    "FieldIOError",
    "FieldTokenizer",
    "FieldTokenizerConfig",
    "FieldTransformation",
    "InvalidArgument",
    "MissingFields",
    "ParseResult",
    "ParseStatus",
    "RowTokenizer",
    "RowTokenizerConfig",
    "UnexpectedFields",
]
