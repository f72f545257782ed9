from abstractable.api_export import abstractable_export
from abstractable.core import gate as gate_module
from abstractable.core import pedigree
from abstractable.core import registry as registry_module
from abstractable.utils import python_utils
from abstractable.utils import traceback_utils


@abstractable_export("abstractable.abstract_method")
def abstract_method(method):
    """Declares a method of an abstractable class body as abstract.

    The body of the decorated function is discarded: the method is replaced
    by a placeholder raising `NotImplementedAbstractMethodError`.

    Example:

    ```python
    class Formatter(abstractable.Abstractable):
        @abstractable.abstract_method
        def format(self, record):
            ...
    ```
    """
    return python_utils.mark_abstract(method)


@abstractable_export("abstractable.abstract_class_method")
def abstract_class_method(method):
    """Declares an abstract class method in an abstractable class body.

    The name is declared on the static namespace of the class.
    """
    if isinstance(method, (classmethod, staticmethod)):
        method = method.__func__
    return classmethod(python_utils.mark_abstract(method))


@abstractable_export("abstractable.AbstractableMeta")
class AbstractableMeta(type):
    """Metaclass enforcing abstract method contracts on instance creation.

    Creating an instance, either with `cls(...)` or with `cls.allocate()`,
    fails with `NotImplementedAbstractMethodError` if an abstract method
    declared anywhere in the ancestry of `cls` has no concrete override
    between its declaring class and `cls`, and with `WrongOperationError`
    if `cls` itself declares abstract methods.
    """

    # Instance creation is validated by `__call__` and `allocate`.
    _gates_creation = True

    def __init__(cls, name, bases, namespace, **kwargs):
        super().__init__(name, bases, namespace, **kwargs)
        registry = registry_module.get_registry()
        registry.register(cls)
        instance_methods = []
        static_methods = []
        for attr_name, value in namespace.items():
            if isinstance(value, classmethod):
                if python_utils.is_marked_abstract(value.__func__):
                    static_methods.append(attr_name)
            elif python_utils.is_marked_abstract(value):
                instance_methods.append(attr_name)
        if instance_methods:
            registry.declare(cls, *instance_methods)
        if static_methods:
            registry.declare(pedigree.static_namespace_of(cls), *static_methods)

    @traceback_utils.filter_traceback
    def __call__(cls, *args, **kwargs):
        gate_module.get_validation_gate().validate_on_create(
            cls, "instantiate"
        )
        return super().__call__(*args, **kwargs)

    @traceback_utils.filter_traceback
    def allocate(cls):
        """Creates an instance without running `__init__`."""
        gate_module.get_validation_gate().validate_on_create(cls, "allocate")
        return cls.__new__(cls)

    def __delattr__(cls, name):
        super().__delattr__(name)
        # A removed member may have been the override satisfying a contract.
        gate_module.get_validation_gate().invalidate(cls)

    def abstract(cls, *names):
        """Declares abstract methods on this class."""
        return registry_module.abstract(cls, *names)

    def abstract_static(cls, *names):
        """Declares abstract class methods on this class."""
        return registry_module.abstract_static(cls, *names)

    def undeclare_abstract(cls, *names):
        return registry_module.undeclare(cls, *names)

    def abstract_methods(cls, include_inherited=True):
        return registry_module.abstract_methods(
            cls, include_inherited=include_inherited
        )

    def abstract_static_methods(cls, include_inherited=True):
        return registry_module.abstract_static_methods(
            cls, include_inherited=include_inherited
        )

    def required_validate(cls):
        """Whether the next instance creation will validate this class."""
        return gate_module.get_validation_gate().required_validate(cls)

    def validate_abstract_methods(cls):
        gate_module.get_validation_gate().validate(cls)


@abstractable_export("abstractable.Abstractable")
class Abstractable(metaclass=AbstractableMeta):
    """Helper base class for classes with abstract methods.

    Example:

    ```python
    class AbstractList(abstractable.Abstractable):
        @abstractable.abstract_method
        def size(self):
            ...

    class ArrayList(AbstractList):
        def size(self):
            return 0

    ArrayList()  # Fine.
    AbstractList()  # WrongOperationError
    ```
    """

    __slots__ = ()
