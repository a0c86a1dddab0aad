import fieldio.version
from _fieldio.reading import lazy_read_fields, lazy_read_rows, read_fields, read_rows
from _fieldio.tokenizer import (
    EmptyField,
    FieldIOError,
    FieldTokenizer,
    FieldTokenizerConfig,
    FieldTransformation,
    InvalidArgument,
    MissingFields,
    ParseResult,
    ParseStatus,
    RowTokenizer,
    RowTokenizerConfig,
    UnexpectedFields,
)

__version__ = fieldio.version.version

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
    "lazy_read_fields",
    "lazy_read_rows",
    "read_fields",
    "read_rows",
]
