class FieldIOError(Exception):
    """
    Base class for errors raised by the tokenizers. Only the subclasses
    below are ever raised.
    """

    pass


class InvalidArgument(FieldIOError, ValueError):
    """
    Raised when a tokenizer is called with an invalid argument, such as
    requesting a non-positive number of fields.
    """

    pass


class EmptyField(FieldIOError):
    """
    Raised by FieldTokenizer when a field contains no characters, ie. two
    delimiters follow each other or the group ends right after a delimiter.
    """

    pass


class MissingFields(FieldIOError):
    """
    Raised when fewer fields were read than required and the tokenizer
    is configured to enforce the minimum.
    """

    pass


class UnexpectedFields(FieldIOError):
    """
    Raised when more fields were read than allowed and the tokenizer
    is configured to enforce the maximum.
    """

    pass
