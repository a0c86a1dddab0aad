from _fieldio.tokenizer.result import ParseResult, ParseStatus


def is_overfilled(max_fields, field_count):
    """
    :returns: Whether field_count exceeds max_fields, where
        max_fields=0 means there is no upper bound.
    """
    return max_fields > 0 and field_count > max_fields


def transform_field(transformations, field_index, field):
    """
    Apply the transformation registered for field_index, if any.
    Errors raised by the transformation propagate unchanged.
    """
    transformation = transformations.get(field_index)
    if transformation is None:
        return field
    return transformation(field)


def commit_field(field, fields, field_index, transformations):
    """
    Transform the accumulated characters of a field and append
    the result to fields.

    :param field: list of characters read for the field.
    :param fields: The list of fields read so far.
    """
    fields.append(transform_field(transformations, field_index, "".join(field)))
    field.clear()


def deliver(fields, out_fields, readable):
    """
    Replace the contents of out_fields (if given) with fields and
    return the corresponding result.
    """
    if out_fields is not None:
        out_fields[:] = fields
    return ParseResult(ParseStatus.PRODUCED, fields, readable)


def skipped(readable):
    return ParseResult(ParseStatus.SKIPPED, None, readable)


EXHAUSTED = ParseResult(ParseStatus.EXHAUSTED, None, False)


def single_characters(name, characters):
    """
    Validate that characters is a collection of single characters
    and return it as a frozenset.
    """
    if isinstance(characters, str):
        characters = set(characters)
    result = frozenset(characters)
    for c in result:
        if not isinstance(c, str) or len(c) != 1:
            raise ValueError(f"{name} has to contain single characters, got {c!r}")
    return result
