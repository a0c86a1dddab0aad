import pathlib
from contextlib import contextmanager

import _fieldio.tokenizer as fieldtok


@contextmanager
def open_stream(filelike):
    """
    Yield a text stream for filelike. Paths are opened (and closed
    afterwards), anything else is assumed to be an open text stream
    and is yielded as is.
    """
    if isinstance(filelike, (str, pathlib.Path)):
        with open(filelike, "rt") as file_stream:
            yield file_stream
    else:
        yield filelike


@contextmanager
def lazy_read_rows(filelike, **options):
    """
    Lazily read the rows of a delimited file, ie.

    >>> import io
    >>> with lazy_read_rows(io.StringIO("a,b\\nc,d"), delimiter=",") as rows:
    ...     for row in rows:
    ...         print(row)
    ['a', 'b']
    ['c', 'd']

    :param filelike: Path to a file or an open text stream.
    :param options: Options for RowTokenizer, see RowTokenizerConfig.
    """
    tokenizer = fieldtok.RowTokenizer(**options)
    with open_stream(filelike) as stream:
        yield tokenizer.iter_rows(stream)


@contextmanager
def lazy_read_fields(filelike, requested_count, **options):
    """
    Lazily read groups of requested_count fields.

    :param filelike: Path to a file or an open text stream.
    :param options: Options for FieldTokenizer, see FieldTokenizerConfig.
    """
    tokenizer = fieldtok.FieldTokenizer(**options)
    with open_stream(filelike) as stream:
        yield tokenizer.iter_fields(stream, requested_count)


def read_rows(filelike, **options):
    """
    Reads all rows of a delimited file into a list of lists of fields,
    ie. rows = read_rows("/my/file.tsv", min_fields=3)
    """
    with lazy_read_rows(filelike, **options) as rows:
        return list(rows)


def read_fields(filelike, requested_count, **options):
    """
    Reads all groups of requested_count fields from a file.
    """
    with lazy_read_fields(filelike, requested_count, **options) as groups:
        return list(groups)
