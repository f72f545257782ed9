from absl import logging

from abstractable import config
from abstractable import errors
from abstractable import global_state
from abstractable.api_export import abstractable_export
from abstractable.core import pedigree
from abstractable.core import registry as registry_module
from abstractable.core import resolver
from abstractable.utils import naming


@abstractable_export("abstractable.ValidationGate")
class ValidationGate:
    """Checks abstract method contracts when instances are created.

    Validation runs once per set of effective abstract names: after a class
    validated, creating further instances only re-validates when abstract
    methods were declared or undeclared somewhere in its ancestry, when one
    of the overrides that satisfied the last validation was removed, or when
    `invalidate()` was called on it.

    A class that itself declares abstract methods can never be instantiated,
    whatever the outcome of the validation.

    Args:
        registry: `AbstractRegistry` to read declarations and memos from.
            Defaults to the process-wide registry.
        finder: `NotImplementedInfoFinder`. Defaults to one reading
            `registry`.
        ignore_validate: Boolean. When `True`, validation is always
            considered satisfied. Defaults to
            `abstractable.config.ignore_validate()`.
    """

    def __init__(self, registry=None, finder=None, ignore_validate=None):
        self.registry = registry or registry_module.get_registry()
        self.finder = finder or resolver.NotImplementedInfoFinder(
            self.registry
        )
        if ignore_validate is None:
            ignore_validate = config.ignore_validate()
        self.ignore_validate = bool(ignore_validate)

    def required_validate(self, klass):
        """Whether `klass` has to be validated before its next instance."""
        if self.ignore_validate or in_ignore_validation_scope():
            logging.log_first_n(
                logging.WARNING,
                "Abstract method validation is disabled; classes with "
                "unimplemented abstract methods can be instantiated.",
                1,
            )
            return False
        memo = self.registry.get_memo(klass)
        if memo != self.registry.declared_effective(klass):
            return True
        # Overrides can be deleted from classes the metaclass doesn't see.
        return not all(
            pedigree.defines_locally(implementing, method)
            for implementing, method in self.registry.get_implementations(
                klass
            )
        )

    def validate(self, klass):
        """Validates `klass`, raising if abstract methods are unimplemented.

        Raises:
            NotImplementedAbstractMethodError: listing, per declaring
                ancestor, the abstract methods with no concrete override.
        """
        with self.registry.lock_for(klass):
            not_implemented_info = self.finder.find(klass)
            if not_implemented_info:
                raise errors.NotImplementedAbstractMethodError(
                    errors.format_not_implemented_info(not_implemented_info),
                    not_implemented_info=not_implemented_info,
                )
            self.registry.set_memo(
                klass,
                self.registry.declared_effective(klass),
                implementations=self.finder.find_implementations(klass),
            )
        logging.debug(
            "Validated abstract methods of %s", naming.get_object_name(klass)
        )

    def validate_on_create(self, klass, operation):
        with self.registry.lock_for(klass):
            if self.required_validate(klass):
                self.validate(klass)
            own_methods = self.registry.declared_effective(
                klass, include_inherited=False
            )
            if own_methods:
                raise errors.WrongOperationError(
                    errors.format_wrong_operation(
                        klass, operation, own_methods
                    ),
                    target=klass,
                    operation=operation,
                )

    def invalidate(self, klass):
        """Forces `klass` and all its subclasses to re-validate."""
        pending = [klass]
        seen = set()
        while pending:
            current = pending.pop()
            if id(current) in seen:
                continue
            seen.add(id(current))
            self.registry.clear_memo(current)
            pending.extend(type.__subclasses__(current))


@abstractable_export("abstractable.IgnoreValidationScope")
class IgnoreValidationScope:
    """Skips abstract method validation on the current thread.

    Example:

    ```python
    with abstractable.IgnoreValidationScope():
        partial = PartialImplementation()
    ```
    """

    def __enter__(self):
        self.original_scope = get_ignore_validation_scope()
        global_state.set_global_attribute("ignore_validation_scope", self)
        return self

    def __exit__(self, *args, **kwargs):
        global_state.set_global_attribute(
            "ignore_validation_scope", self.original_scope
        )


def in_ignore_validation_scope():
    return (
        global_state.get_global_attribute("ignore_validation_scope")
        is not None
    )


def get_ignore_validation_scope():
    return global_state.get_global_attribute("ignore_validation_scope")


@abstractable_export("abstractable.set_validation_gate")
def set_validation_gate(gate):
    if not isinstance(gate, ValidationGate):
        raise ValueError(
            "Invalid `gate` argument. Expected a `ValidationGate` instance. "
            f"Received: gate={gate} (of type {type(gate)})"
        )
    global_state.set_global_setting("validation_gate", gate)


@abstractable_export("abstractable.get_validation_gate")
def get_validation_gate():
    gate = global_state.get_global_setting("validation_gate", None)
    if gate is None:
        gate = ValidationGate()
        set_validation_gate(gate)
    return gate
