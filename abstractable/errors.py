"""Exceptions raised by abstractable.

Three kinds of failures are observable:

- `InvalidArgumentError`: a declaration or a chain construction received a
  value of the wrong kind (a non method name, a non class).
- `NotImplementedAbstractMethodError`: either instance creation found
  abstract methods with no concrete override, or an abstract placeholder
  method was called directly.
- `WrongOperationError`: instance creation was attempted on a class that
  still declares its own abstract methods.
"""

from abstractable.api_export import abstractable_export
from abstractable.utils import naming


@abstractable_export("abstractable.errors.AbstractableError")
class AbstractableError(Exception):
    pass


@abstractable_export("abstractable.errors.InvalidArgumentError")
class InvalidArgumentError(AbstractableError, TypeError):
    pass


@abstractable_export("abstractable.errors.NotImplementedAbstractMethodError")
class NotImplementedAbstractMethodError(
    AbstractableError, NotImplementedError
):
    """Raised when abstract methods are left without implementation.

    Attributes:
        not_implemented_info: Mapping from declaring class-like to the list
            of its abstract method names with no concrete override, when
            raised by instance creation. `None` otherwise.
        method_name: Name of the abstract method that was called, when
            raised by a placeholder method. `None` otherwise.
        declaring: Class-like that declared `method_name`.
    """

    def __init__(
        self,
        message,
        not_implemented_info=None,
        method_name=None,
        declaring=None,
    ):
        super().__init__(message)
        self.not_implemented_info = not_implemented_info
        self.method_name = method_name
        self.declaring = declaring


@abstractable_export("abstractable.errors.WrongOperationError")
class WrongOperationError(AbstractableError, TypeError):
    def __init__(self, message, target=None, operation=None):
        super().__init__(message)
        self.target = target
        self.operation = operation


def format_not_implemented_info(not_implemented_info):
    messages = ["The following abstract methods are not implemented:"]
    for classlike, methods in not_implemented_info.items():
        messages.append(
            f"{list(methods)} defined in "
            f"{naming.get_object_name(classlike)}"
        )
    return "\n".join(messages)


def format_skeleton_call(method_name, declaring):
    return (
        f"`{method_name}` is an abstract method defined in "
        f"{naming.get_object_name(declaring)} and must be implemented."
    )


def format_wrong_operation(target, operation, methods):
    return (
        f"{naming.get_object_name(target)} has abstract methods "
        f"{list(methods)} and therefore can't call `{operation}`."
    )
