"""Ancestry chains of class-likes.

A class-like is anything that can own abstract method declarations: a class
(mixins included, they are classes taking part in the MRO) or the static
namespace of a class, i.e. its `classmethod` / `staticmethod` surface.
"""

import threading
import weakref

from abstractable.api_export import abstractable_export
from abstractable.errors import InvalidArgumentError
from abstractable.utils import naming
from abstractable.utils import python_utils

_STATIC_NAMESPACES = weakref.WeakKeyDictionary()
_STATIC_NAMESPACES_LOCK = threading.Lock()


@abstractable_export("abstractable.StaticNamespace")
class StaticNamespace:
    """Class-level method surface of a class, as a class-like of its own.

    There is exactly one static namespace per class, obtained with
    `static_namespace_of()`. It owns its own abstract declarations and
    ancestry chain; it is linked to its class by lookup only.
    """

    __slots__ = ("_owner_ref", "__weakref__")

    def __init__(self, owner):
        # Weak, or the namespace cache would keep every owner alive.
        self._owner_ref = weakref.ref(owner)

    @property
    def owner(self):
        return self._owner_ref()

    @property
    def name(self):
        return f"<static {naming.get_object_name(self.owner)}>"

    def __repr__(self):
        return f"StaticNamespace({self.owner!r})"


@abstractable_export("abstractable.static_namespace_of")
def static_namespace_of(klass):
    if not isinstance(klass, type):
        raise InvalidArgumentError(
            "Expected a class to look up a static namespace. "
            f"Received: klass={klass} (of type {type(klass)})"
        )
    with _STATIC_NAMESPACES_LOCK:
        namespace = _STATIC_NAMESPACES.get(klass)
        if namespace is None:
            namespace = StaticNamespace(klass)
            _STATIC_NAMESPACES[klass] = namespace
        return namespace


def is_class_like(obj):
    return isinstance(obj, (type, StaticNamespace))


def defines_locally(classlike, name):
    """Whether `classlike` itself carries a concrete member `name`.

    Members inherited from ancestors and abstract placeholders don't count.
    """
    if isinstance(classlike, StaticNamespace):
        member = classlike.owner.__dict__.get(name)
        if not isinstance(member, (classmethod, staticmethod)):
            return False
    else:
        if name not in classlike.__dict__:
            return False
        member = classlike.__dict__[name]
    return not python_utils.is_skeleton(member)


class PedigreeStream:
    """Ancestry chain of a class, from the most general ancestor to itself.

    Usage:

    ```python
    stream = PedigreeStream(klass)
    for ancestor, descendants in stream.each_with_descendants():
        ...
    ```
    """

    def __init__(self, klass):
        if not isinstance(klass, type):
            raise InvalidArgumentError(
                "Expected a class to build an ancestry chain. "
                f"Received: klass={klass} (of type {type(klass)})"
            )
        self.klass = klass
        self.pedigree_stream = tuple(self.pedigree_stream_of(klass))
        self._positions = {
            id(member): i for i, member in enumerate(self.pedigree_stream)
        }

    def pedigree_stream_of(self, klass):
        return reversed(klass.__mro__)

    def __iter__(self):
        return iter(self.pedigree_stream)

    def __len__(self):
        return len(self.pedigree_stream)

    def __contains__(self, member):
        return id(member) in self._positions

    def descendants_of(self, member):
        """Members strictly more specific than `member`, in chain order."""
        i = self._positions.get(id(member))
        if i is None:
            return ()
        return self.pedigree_stream[i + 1 :]

    def each_with_descendants(self):
        for member in self.pedigree_stream:
            yield member, self.descendants_of(member)

    def __repr__(self):
        members = ", ".join(
            naming.get_object_name(m) for m in self.pedigree_stream
        )
        return f"<{self.__class__.__name__} [{members}]>"


class StaticPedigreeStream(PedigreeStream):
    """`PedigreeStream` over the static namespaces of a class's ancestry."""

    def pedigree_stream_of(self, klass):
        return [static_namespace_of(c) for c in reversed(klass.__mro__)]


def chain_for(target):
    """Ancestry chain of a class or of a static namespace."""
    if isinstance(target, StaticNamespace):
        return StaticPedigreeStream(target.owner)
    return PedigreeStream(target)


def descendants_of(chain, member):
    return chain.descendants_of(member)


def ancestors_of(classlike):
    """Ancestors of `classlike`, most specific first, excluding itself."""
    return tuple(reversed(chain_for(classlike).pedigree_stream))[1:]
