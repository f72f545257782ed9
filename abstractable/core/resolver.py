from abstractable.api_export import abstractable_export
from abstractable.core import pedigree
from abstractable.core import registry as registry_module


class NotImplementedInfo(dict):
    """Mapping from declaring class-like to its unimplemented method names.

    Only class-likes with at least one unimplemented method are kept:
    assigning an empty list is a no-op.
    """

    def __init__(self, *args, **kwargs):
        super().__init__()
        self.update(*args, **kwargs)

    def __setitem__(self, key, value):
        value = list(value)
        if value:
            super().__setitem__(key, value)

    def update(self, *args, **kwargs):
        for key, value in dict(*args, **kwargs).items():
            self[key] = value

    def setdefault(self, key, default=None):
        if key not in self:
            self[key] = [] if default is None else default
        return self.get(key, [])


class NotImplementedInfoFinder:
    """Finds the abstract methods a class leaves without implementation.

    For every ancestor in the chain of the class that declares abstract
    methods, the methods that none of the more specific members of the
    chain (up to and including the class) concretely defines are reported.
    Each declaring ancestor is checked on its own: the same name declared
    by two ancestors is two separate contracts.
    """

    def __init__(self, registry=None):
        self.registry = registry or registry_module.get_registry()

    def find(self, klass):
        """Returns a `NotImplementedInfo` for instances of `klass`."""
        return self._find_from_pedigree_stream(pedigree.PedigreeStream(klass))

    def find_from_static(self, klass):
        """Static namespace version of `find()`."""
        return self._find_from_pedigree_stream(
            pedigree.StaticPedigreeStream(klass)
        )

    def find_implementations(self, klass):
        """Returns the concrete overrides used by instances of `klass`.

        For every abstract method declared in the chain of `klass`, the most
        specific member of the chain defining it is reported, i.e. the one
        attribute lookup on `klass` resolves to.

        Returns:
            Tuple of `(implementing class, method name)` pairs.
        """
        implementations = []
        stream = pedigree.PedigreeStream(klass)
        for classlike, descendants in stream.each_with_descendants():
            if not self._need_find(classlike, descendants):
                continue
            for method in self.registry.declared_locally(classlike):
                for descendant in reversed(descendants):
                    if pedigree.defines_locally(descendant, method):
                        implementations.append((descendant, method))
                        break
        return tuple(implementations)

    def _find_from_pedigree_stream(self, pedigree_stream):
        info = NotImplementedInfo()
        for classlike, descendants in pedigree_stream.each_with_descendants():
            if self._need_find(classlike, descendants):
                info[classlike] = self._find_from_ancestor_and_descendants(
                    classlike, descendants
                )
        return info

    def _need_find(self, ancestor, descendants):
        return len(descendants) > 0 and self.registry.participates(ancestor)

    def _find_from_ancestor_and_descendants(self, ancestor, descendants):
        return [
            method
            for method in self.registry.declared_locally(ancestor)
            if not any(
                pedigree.defines_locally(descendant, method)
                for descendant in descendants
            )
        ]


@abstractable_export("abstractable.find_not_implemented_info")
def find_not_implemented_info(klass):
    """Shortcut to `NotImplementedInfoFinder().find(klass)`."""
    return NotImplementedInfoFinder().find(klass)


@abstractable_export("abstractable.find_not_implemented_info_from_static")
def find_not_implemented_info_from_static(klass):
    """Shortcut to `NotImplementedInfoFinder().find_from_static(klass)`."""
    return NotImplementedInfoFinder().find_from_static(klass)
