from abstractable.core.gate import IgnoreValidationScope
from abstractable.core.gate import ValidationGate
from abstractable.core.gate import get_validation_gate
from abstractable.core.gate import set_validation_gate
from abstractable.core.meta import Abstractable
from abstractable.core.meta import AbstractableMeta
from abstractable.core.meta import abstract_class_method
from abstractable.core.meta import abstract_method
from abstractable.core.pedigree import PedigreeStream
from abstractable.core.pedigree import StaticNamespace
from abstractable.core.pedigree import StaticPedigreeStream
from abstractable.core.pedigree import static_namespace_of
from abstractable.core.registry import AbstractRegistry
from abstractable.core.registry import abstract
from abstractable.core.registry import abstract_methods
from abstractable.core.registry import abstract_static
from abstractable.core.registry import abstract_static_methods
from abstractable.core.registry import get_registry
from abstractable.core.registry import undeclare
from abstractable.core.registry import undeclare_static
from abstractable.core.resolver import NotImplementedInfo
from abstractable.core.resolver import NotImplementedInfoFinder
from abstractable.core.resolver import find_not_implemented_info
from abstractable.core.resolver import find_not_implemented_info_from_static
