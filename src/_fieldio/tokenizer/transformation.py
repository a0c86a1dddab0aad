from abc import ABC, abstractmethod
from types import MappingProxyType


class FieldTransformation(ABC):
    """
    A transformation applied to a field when it is committed, eg.

    >>> class Strip(FieldTransformation):
    ...     def apply(self, field):
    ...         return field.strip()
    >>> Strip().apply(" two ")
    'two'

    Plain callables taking and returning a field can be registered
    in place of a FieldTransformation.
    """

    @abstractmethod
    def apply(self, field):
        """
        :param field: The raw field as read from the stream.
        :returns: The field to be placed in the output row.
        """
        pass

    def __call__(self, field):
        return self.apply(field)


def freeze_transformations(transformations):
    """
    Validate a mapping of field index to transformation and return a
    read-only copy of it.

    :param transformations: Mapping from (1-based) field index to either a
        FieldTransformation or a callable taking and returning a field.
    """
    frozen = {}
    for index, transformation in dict(transformations).items():
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValueError(f"Field index has to be an int, got {index!r}")
        if not callable(transformation):
            raise ValueError(
                f"Transformation for field {index} is not callable: {transformation!r}"
            )
        frozen[index] = transformation
    return MappingProxyType(frozen)
