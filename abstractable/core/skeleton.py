from absl import logging

from abstractable import errors
from abstractable.core.pedigree import StaticNamespace
from abstractable.utils import naming
from abstractable.utils import python_utils
from abstractable.utils import traceback_utils


def build_skeleton(classlike, name):
    """Returns a function named `name` that always fails as abstract."""

    def abstract_skeleton(*args, **kwargs):
        raise errors.NotImplementedAbstractMethodError(
            errors.format_skeleton_call(name, classlike),
            method_name=name,
            declaring=classlike,
        )

    owner = _owner_of(classlike)
    abstract_skeleton.__name__ = name
    abstract_skeleton.__qualname__ = f"{owner.__qualname__}.{name}"
    abstract_skeleton.__doc__ = (
        f"Abstract method declared by {naming.get_object_name(classlike)}."
    )
    return python_utils.mark_skeleton(abstract_skeleton)


def install(classlike, name):
    """Defines the placeholder of the abstract method `name` on `classlike`.

    For a static namespace the placeholder is a `classmethod` of its owner.
    Any member `classlike` already defines under `name` is replaced.
    """
    member = build_skeleton(classlike, name)
    if isinstance(classlike, StaticNamespace):
        member = classmethod(member)
    setattr(_owner_of(classlike), name, member)
    logging.debug(
        "Installed abstract placeholder `%s` on %s",
        name,
        naming.get_object_name(classlike),
    )
    return member


def _owner_of(classlike):
    if isinstance(classlike, StaticNamespace):
        return classlike.owner
    return classlike


def install_creation_gate(klass):
    """Validates instance creation of a plain class carrying declarations.

    Classes built by `AbstractableMeta` are already gated by their metaclass
    and are left alone. For any other class, a `__new__` is installed that
    runs the process-wide validation gate on the class being created before
    delegating to the `__new__` it replaces. Subclasses inherit it.

    Returns:
        The installed `__new__`, or `None` if `klass` is gated by its
        metaclass.
    """
    if _gated_by_metaclass(klass):
        return None
    current = klass.__dict__.get("__new__")
    if python_utils.is_creation_gate(current):
        return current
    if isinstance(current, staticmethod):
        current = current.__func__

    @traceback_utils.filter_traceback
    def __new__(cls, *args, **kwargs):
        from abstractable.core import gate as gate_module

        if not _gated_by_metaclass(cls):
            gate_module.get_validation_gate().validate_on_create(
                cls, "instantiate"
            )
        if current is not None:
            return current(cls, *args, **kwargs)
        parent_new = super(klass, cls).__new__
        if parent_new is object.__new__:
            # `object.__new__` rejects extra arguments once `__new__` is
            # overridden.
            return parent_new(cls)
        return parent_new(cls, *args, **kwargs)

    __new__.__qualname__ = f"{klass.__qualname__}.__new__"
    member = staticmethod(python_utils.mark_creation_gate(__new__))
    klass.__new__ = member
    logging.debug(
        "Installed creation gate on %s", naming.get_object_name(klass)
    )
    return member


def _gated_by_metaclass(klass):
    return getattr(type(klass), "_gates_creation", False)
