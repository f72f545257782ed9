from abstractable import config
from abstractable import errors
from abstractable import utils
from abstractable.core import AbstractRegistry
from abstractable.core import Abstractable
from abstractable.core import AbstractableMeta
from abstractable.core import IgnoreValidationScope
from abstractable.core import NotImplementedInfo
from abstractable.core import NotImplementedInfoFinder
from abstractable.core import PedigreeStream
from abstractable.core import StaticNamespace
from abstractable.core import StaticPedigreeStream
from abstractable.core import ValidationGate
from abstractable.core import abstract
from abstractable.core import abstract_class_method
from abstractable.core import abstract_method
from abstractable.core import abstract_methods
from abstractable.core import abstract_static
from abstractable.core import abstract_static_methods
from abstractable.core import find_not_implemented_info
from abstractable.core import find_not_implemented_info_from_static
from abstractable.core import get_validation_gate
from abstractable.core import set_validation_gate
from abstractable.core import static_namespace_of
from abstractable.core import undeclare
from abstractable.core import undeclare_static
from abstractable.errors import InvalidArgumentError
from abstractable.errors import NotImplementedAbstractMethodError
from abstractable.errors import WrongOperationError
from abstractable.version import __version__
from abstractable.version import version
