"""
Errors raised while resolving filters and querying tasks.

- EntityNotFound: a named dimension value matches no entity
- InvalidArgument: a status/groupBy/kind value is outside its enumeration
- EmptyResult: a query legitimately matched nothing (not a failure)
"""


class TaskQueryError(Exception):
    """Base class for filter resolution and task query errors."""


class EntityNotFound(TaskQueryError):
    """No entity of ``kind`` is named ``name``."""

    def __init__(self, kind, name):
        self.kind = kind
        self.name = name
        super().__init__(f'{str(kind).title()} not found: {name}')

    @property
    def dimension(self):
        return str(self.kind)


class InvalidArgument(TaskQueryError):
    """``value`` is not an accepted value for ``argument``."""

    def __init__(self, argument, value, valid_values):
        self.argument = argument
        self.value = value
        self.valid_values = list(valid_values)
        message = f'Invalid {argument}: {value!r}.'
        if self.valid_values:
            message += f' Valid values: {", ".join(self.valid_values)}'
        super().__init__(message)


class EmptyResult(TaskQueryError):
    """A query or report produced zero rows."""

    def __init__(self, message='No tasks found'):
        super().__init__(message)
