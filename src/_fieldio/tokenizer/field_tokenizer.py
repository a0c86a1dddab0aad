import warnings
from dataclasses import dataclass, field, replace
from typing import Callable, FrozenSet, Mapping

from _fieldio.tokenizer.common import (
    EXHAUSTED,
    commit_field,
    deliver,
    single_characters,
    skipped,
)
from _fieldio.tokenizer.errors import EmptyField, InvalidArgument, MissingFields
from _fieldio.tokenizer.transformation import freeze_transformations


@dataclass(frozen=True)
class FieldTokenizerConfig:
    """
    Policy of a FieldTokenizer.

    :param delimiters: Characters separating fields.
    :param terminators: Characters ending a group of fields.
    :param masked: Characters which are read but dropped from fields.
    :param enforce_field_number: Raise MissingFields when fewer fields
        than requested are read.
    :param ignore_underfull_data: Skip groups with fewer fields than
        requested (when not enforced).
    :param transformations: Mapping from 1-based field index to a
        transformation applied to that field.
    """

    delimiters: FrozenSet[str] = frozenset("\t")
    terminators: FrozenSet[str] = frozenset("\n")
    masked: FrozenSet[str] = frozenset()
    enforce_field_number: bool = True
    ignore_underfull_data: bool = True
    transformations: Mapping[int, Callable[[str], str]] = field(
        default_factory=dict, hash=False
    )

    def __post_init__(self):
        for name in ("delimiters", "terminators", "masked"):
            object.__setattr__(
                self, name, single_characters(name, getattr(self, name))
            )
        # Terminators are checked before delimiters, and both before masked.
        overlap = self.delimiters & self.terminators
        if overlap:
            warnings.warn(
                f"Characters {sorted(overlap)} are both "
                "delimiters and terminators, they will act as terminators."
            )
        unmasked = self.masked & (self.delimiters | self.terminators)
        if unmasked:
            warnings.warn(
                f"Masked characters {sorted(unmasked)} "
                "are also delimiters or terminators and will not be masked."
            )
        object.__setattr__(
            self, "transformations", freeze_transformations(self.transformations)
        )


def commit_nonempty_field(field, fields, field_index, transformations):
    if not field:
        raise EmptyField(
            f"No data read for field {field_index}: a field has to contain at "
            "least one character between the start of the group or a delimiter "
            "and the next delimiter or terminator."
        )
    commit_field(field, fields, field_index, transformations)


class FieldTokenizer:
    """
    Reads a requested number of fields from a text stream.

    Unlike RowTokenizer, delimiters, terminators and masked characters
    are sets of characters, the number of fields is given per call and
    empty fields are always an error.

    >>> import io
    >>> tokenizer = FieldTokenizer(delimiters="_", masked="#")
    >>> tokenizer.parse_fields(io.StringIO("f#oo_ba#r"), requested_count=1).fields
    ['foo']

    """

    def __init__(self, config=None, **options):
        """
        :param config: A FieldTokenizerConfig, defaults to one built from
            options.
        :param options: Keyword arguments of FieldTokenizerConfig, overriding
            the values in config.
        """
        if config is None:
            config = FieldTokenizerConfig(**options)
        elif options:
            config = replace(config, **options)
        self._config = config

    @property
    def config(self):
        return self._config

    def with_options(self, **changes):
        """
        :returns: A new FieldTokenizer with the given config values changed.
        """
        return FieldTokenizer(replace(self.config, **changes))

    def with_transformation(self, field_index, transformation):
        """
        :returns: A new FieldTokenizer which in addition applies transformation
            to field number field_index.
        """
        transformations = dict(self.config.transformations)
        transformations[field_index] = transformation
        return self.with_options(transformations=transformations)

    def parse_fields(self, stream, out_fields=None, requested_count=1):
        """
        Read requested_count fields from stream.

        Reading stops at a terminator, at the delimiter ending the last
        requested field, or at the end of the stream. On success out_fields
        (if given) has its contents replaced by the fields read, otherwise
        it is left as is.

        :param stream: A text stream, only read(1) is used.
        :param out_fields: Optional list to receive the fields.
        :param requested_count: The positive number of fields to read.
        :returns: ParseResult for the group of fields.
        :raises InvalidArgument: if requested_count is not positive.
        :raises EmptyField: if a field contains no characters.
        :raises MissingFields: if fewer than requested_count fields were
            read and enforce_field_number is set.
        """
        if (
            isinstance(requested_count, bool)
            or not isinstance(requested_count, int)
            or requested_count < 1
        ):
            raise InvalidArgument(
                f"Must request a positive number of fields, got {requested_count!r}"
            )
        config = self.config
        fields = []
        field = []
        field_count = 0

        read_char = stream.read(1)
        if not read_char:
            return EXHAUSTED

        while read_char:
            if read_char in config.terminators:
                break
            elif read_char in config.delimiters:
                field_count += 1
                commit_nonempty_field(
                    field, fields, field_count, config.transformations
                )
                if field_count == requested_count:
                    break
            elif read_char not in config.masked:
                field.append(read_char)
            read_char = stream.read(1)
        readable = bool(read_char)

        if field_count < requested_count:
            field_count += 1
            commit_nonempty_field(field, fields, field_count, config.transformations)

        if field_count < requested_count:
            if config.enforce_field_number:
                raise MissingFields(
                    "missing field(s) in input data; "
                    f"detected only {field_count} out of {requested_count} "
                    "requested fields."
                )
            if config.ignore_underfull_data:
                return skipped(readable)
        return deliver(fields, out_fields, readable)

    def iter_fields(self, stream, requested_count=1):
        """
        Generate groups of requested_count fields from stream until it
        is exhausted. Skipped groups are not generated, errors are raised.
        """
        while True:
            result = self.parse_fields(stream, requested_count=requested_count)
            if result.produced:
                yield result.fields
            if not result.readable:
                return
