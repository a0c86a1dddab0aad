import warnings
from dataclasses import dataclass, field, replace
from typing import Callable, Mapping

from _fieldio.tokenizer.common import (
    EXHAUSTED,
    commit_field,
    deliver,
    is_overfilled,
    skipped,
)
from _fieldio.tokenizer.errors import MissingFields, UnexpectedFields
from _fieldio.tokenizer.transformation import freeze_transformations

ROW_TERMINATOR = "\n"


@dataclass(frozen=True)
class RowTokenizerConfig:
    """
    Policy of a RowTokenizer.

    :param delimiter: The single character separating fields.
    :param min_fields: Least number of fields in a row, 0 for no bound.
    :param max_fields: Largest number of fields in a row, 0 for no bound.
    :param enforce_min_fields: Raise MissingFields for rows with
        fewer than min_fields fields.
    :param ignore_underfull_row: Skip rows with fewer than min_fields
        fields (when not enforced).
    :param enforce_max_fields: Raise UnexpectedFields for rows with
        more than max_fields fields.
    :param ignore_overfull_row: Skip rows with more than max_fields
        fields (when not enforced), otherwise the row is truncated.
    :param transformations: Mapping from 1-based field index to a
        transformation applied to that field.
    """

    delimiter: str = "\t"
    min_fields: int = 0
    max_fields: int = 0
    enforce_min_fields: bool = True
    ignore_underfull_row: bool = True
    enforce_max_fields: bool = True
    ignore_overfull_row: bool = True
    transformations: Mapping[int, Callable[[str], str]] = field(
        default_factory=dict, hash=False
    )

    def __post_init__(self):
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ValueError(
                f"delimiter has to be a single character, got {self.delimiter!r}"
            )
        if self.delimiter == ROW_TERMINATOR:
            raise ValueError("delimiter can not be the row terminator '\\n'")
        if self.min_fields < 0 or self.max_fields < 0:
            raise ValueError(
                "min_fields and max_fields have to be non-negative, "
                f"got {self.min_fields} and {self.max_fields}"
            )
        if 0 < self.max_fields < self.min_fields:
            warnings.warn(
                f"min_fields={self.min_fields} is larger than "
                f"max_fields={self.max_fields}, no row can satisfy both."
            )
        object.__setattr__(
            self, "transformations", freeze_transformations(self.transformations)
        )


def too_many_fields_message(max_fields):
    return (
        "too many field(s) in input row. "
        f"Expected no more than {max_fields} fields."
    )


def missing_fields_message(field_count, min_fields):
    return (
        "missing field(s) in input data; "
        f"detected only {field_count} out of {min_fields} fields."
    )


class RowTokenizer:
    """
    Splits rows of delimited data from a text stream into fields.

    A row ends at a newline or at the end of the stream. Each call
    to parse_row reads exactly one row, so the tokenizer can be reused
    for any number of streams.

    >>> import io
    >>> tokenizer = RowTokenizer(delimiter=",")
    >>> list(tokenizer.iter_rows(io.StringIO("a,b\\nc,d")))
    [['a', 'b'], ['c', 'd']]

    """

    def __init__(self, config=None, **options):
        """
        :param config: A RowTokenizerConfig, defaults to one built from
            options.
        :param options: Keyword arguments of RowTokenizerConfig, overriding
            the values in config.
        """
        if config is None:
            config = RowTokenizerConfig(**options)
        elif options:
            config = replace(config, **options)
        self._config = config

    @property
    def config(self):
        return self._config

    def with_options(self, **changes):
        """
        :returns: A new RowTokenizer with the given config values changed.
        """
        return RowTokenizer(replace(self.config, **changes))

    def with_transformation(self, field_index, transformation):
        """
        :returns: A new RowTokenizer which in addition applies transformation
            to field number field_index.
        """
        transformations = dict(self.config.transformations)
        transformations[field_index] = transformation
        return self.with_options(transformations=transformations)

    def parse_row(self, stream, out_row=None):
        """
        Read one row from stream.

        On success out_row (if given) has its contents replaced by the
        fields of the row. When the row is skipped or an error is raised
        out_row is left as is. When an error is raised the stream is left
        where reading stopped.

        :param stream: A text stream, only read(1) is used.
        :param out_row: Optional list to receive the fields.
        :returns: ParseResult for the row.
        :raises MissingFields: if the row has too few fields and
            enforce_min_fields is set.
        :raises UnexpectedFields: if the row has too many fields and
            enforce_max_fields is set.
        """
        config = self.config
        row = []
        field = []
        field_count = 1

        read_char = stream.read(1)
        if not read_char:
            return EXHAUSTED

        while read_char and read_char != ROW_TERMINATOR:
            if read_char == config.delimiter:
                if not is_overfilled(config.max_fields, field_count):
                    commit_field(field, row, field_count, config.transformations)
                field_count += 1
                if (
                    is_overfilled(config.max_fields, field_count)
                    and config.enforce_max_fields
                ):
                    raise UnexpectedFields(too_many_fields_message(config.max_fields))
            elif not is_overfilled(config.max_fields, field_count):
                field.append(read_char)
            # Characters past max_fields are read and dropped until the
            # end of the row.
            read_char = stream.read(1)
        readable = bool(read_char)

        overfilled = is_overfilled(config.max_fields, field_count)
        underfilled = field_count < config.min_fields
        if underfilled and config.enforce_min_fields:
            raise MissingFields(missing_fields_message(field_count, config.min_fields))
        if overfilled and config.enforce_max_fields:
            raise UnexpectedFields(too_many_fields_message(config.max_fields))
        if (overfilled and config.ignore_overfull_row) or (
            underfilled and config.ignore_underfull_row
        ):
            return skipped(readable)

        if not overfilled:
            commit_field(field, row, field_count, config.transformations)
        return deliver(row, out_row, readable)

    def iter_rows(self, stream):
        """
        Generate the rows of stream until it is exhausted. Skipped rows
        are not generated, errors are raised.
        """
        while True:
            result = self.parse_row(stream)
            if result.produced:
                yield result.fields
            if not result.readable:
                return
