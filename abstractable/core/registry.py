"""Per class-like registry of locally declared abstract method names."""

import threading
import weakref

from absl import logging

from abstractable.api_export import abstractable_export
from abstractable.core import pedigree
from abstractable.core import skeleton
from abstractable.errors import InvalidArgumentError
from abstractable.utils import naming


class RegistryEntry:
    """Abstract declarations and validation memo owned by one class-like."""

    __slots__ = ("names", "memo", "implementations", "lock")

    def __init__(self):
        self.names = []
        # Effective abstract names at the last successful validation.
        self.memo = None
        # `(implementing class, name)` pairs found by that validation.
        self.implementations = ()
        self.lock = threading.RLock()


class AbstractRegistry:
    """Ordered abstract method names declared by each class-like.

    A class-like participates in the abstract method protocol once it has
    an entry here: classes built by `AbstractableMeta` get one when they are
    created, other class-likes (plain mixins, static namespaces) the first
    time something is declared on them.

    Entries are keyed by identity and only hold their class-like weakly.
    """

    def __init__(self):
        self._entries = weakref.WeakKeyDictionary()
        self._lock = threading.Lock()

    def register(self, classlike):
        if not pedigree.is_class_like(classlike):
            raise InvalidArgumentError(
                "Expected a class or a static namespace. "
                f"Received: classlike={classlike} (of type {type(classlike)})"
            )
        with self._lock:
            entry = self._entries.get(classlike)
            if entry is None:
                entry = RegistryEntry()
                self._entries[classlike] = entry
            return entry

    def participates(self, classlike):
        with self._lock:
            return classlike in self._entries

    def lock_for(self, classlike):
        return self.register(classlike).lock

    def declare(self, classlike, *names):
        """Declares `names` as abstract methods of `classlike`.

        Every name gets a placeholder method installed on `classlike`, even
        when it was already declared. A plain class (one not built by
        `AbstractableMeta`) also gets a creation gate, so that it and its
        subclasses are validated when instantiated.

        Returns:
            List of the names that were not declared before.
        """
        for name in names:
            if not naming.is_method_name(name):
                raise InvalidArgumentError(
                    "Invalid abstract method name: expected a string that is "
                    f"a valid identifier. Received: name={name!r} "
                    f"(of type {type(name)})"
                )
        entry = self.register(classlike)
        added = []
        with entry.lock:
            if isinstance(classlike, type):
                skeleton.install_creation_gate(classlike)
            for name in names:
                if name not in entry.names:
                    entry.names.append(name)
                    added.append(name)
                skeleton.install(classlike, name)
        if added:
            logging.debug(
                "Declared abstract methods %s on %s",
                added,
                naming.get_object_name(classlike),
            )
        return added

    def undeclare(self, classlike, *names):
        """Removes `names` from the local declarations of `classlike`.

        Names that were not declared locally are ignored. Placeholder
        methods stay installed.

        Returns:
            List of the names that were actually removed.
        """
        with self._lock:
            entry = self._entries.get(classlike)
        if entry is None:
            return []
        removed = []
        with entry.lock:
            for name in names:
                if name in entry.names:
                    entry.names.remove(name)
                    removed.append(name)
        if removed:
            logging.debug(
                "Undeclared abstract methods %s on %s",
                removed,
                naming.get_object_name(classlike),
            )
        return removed

    def declared_locally(self, classlike):
        with self._lock:
            entry = self._entries.get(classlike)
        if entry is None:
            return ()
        with entry.lock:
            return tuple(entry.names)

    def declared_effective(self, classlike, include_inherited=True):
        """Abstract names of `classlike`, optionally with its ancestors'.

        Own names come first, then the names of each participating ancestor
        from the most specific one up. The same name declared by two
        class-likes is listed twice: they are independent contracts.
        """
        names = list(self.declared_locally(classlike))
        if not include_inherited:
            return tuple(names)
        for ancestor in pedigree.ancestors_of(classlike):
            if self.participates(ancestor):
                names.extend(self.declared_locally(ancestor))
        return tuple(names)

    def get_memo(self, classlike):
        with self._lock:
            entry = self._entries.get(classlike)
        return None if entry is None else entry.memo

    def get_implementations(self, classlike):
        """Concrete overrides that satisfied the last validation."""
        with self._lock:
            entry = self._entries.get(classlike)
        return () if entry is None else entry.implementations

    def set_memo(self, classlike, names, implementations=()):
        entry = self.register(classlike)
        with entry.lock:
            entry.memo = tuple(names)
            entry.implementations = tuple(implementations)

    def clear_memo(self, classlike):
        with self._lock:
            entry = self._entries.get(classlike)
        if entry is not None:
            with entry.lock:
                entry.memo = None
                entry.implementations = ()


_REGISTRY = AbstractRegistry()


def get_registry():
    return _REGISTRY


@abstractable_export("abstractable.abstract")
def abstract(classlike, *names):
    """Declares abstract methods on a class, mixin or static namespace.

    Declaring registers `classlike` in the abstract method protocol, so a
    plain mixin class can carry abstract methods for the abstractable
    classes that inherit from it.

    Example:

    ```python
    class Comparable:
        pass

    abstractable.abstract(Comparable, "compare")

    class Version(Comparable, abstractable.Abstractable):
        pass

    Version()  # NotImplementedAbstractMethodError
    ```

    Args:
        classlike: A class or a `StaticNamespace`.
        *names: Method names.

    Returns:
        List of the names that were not declared before.
    """
    return _REGISTRY.declare(classlike, *names)


@abstractable_export("abstractable.abstract_static")
def abstract_static(klass, *names):
    """Declares abstract class methods on the static namespace of `klass`."""
    return _REGISTRY.declare(pedigree.static_namespace_of(klass), *names)


@abstractable_export("abstractable.undeclare")
def undeclare(classlike, *names):
    return _REGISTRY.undeclare(classlike, *names)


@abstractable_export("abstractable.undeclare_static")
def undeclare_static(klass, *names):
    return _REGISTRY.undeclare(pedigree.static_namespace_of(klass), *names)


@abstractable_export("abstractable.abstract_methods")
def abstract_methods(classlike, include_inherited=True):
    """Returns the names of the abstract methods of `classlike`.

    Args:
        classlike: A class or a `StaticNamespace`.
        include_inherited: Whether to append the abstract methods declared
            by the ancestors of `classlike`.

    Returns:
        Tuple of method names.
    """
    return _REGISTRY.declared_effective(
        classlike, include_inherited=include_inherited
    )


@abstractable_export("abstractable.abstract_static_methods")
def abstract_static_methods(klass, include_inherited=True):
    return _REGISTRY.declared_effective(
        pedigree.static_namespace_of(klass),
        include_inherited=include_inherited,
    )
