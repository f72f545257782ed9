import json
import os

from abstractable import global_state
from abstractable.api_export import abstractable_export

# Whether instance creation skips the abstract method validation.
_IGNORE_VALIDATE = False

_FALSY_ENV_VALUES = {"", "0", "false", "no", "off"}


@abstractable_export("abstractable.config.ignore_validate")
def ignore_validate():
    """Return whether abstract method validation is globally disabled.

    Returns:
        Boolean, `True` if instance creation skips the validation of
        unimplemented abstract methods.

    Example:
    >>> abstractable.config.ignore_validate()
    False
    """
    return _IGNORE_VALIDATE


@abstractable_export("abstractable.config.set_ignore_validate")
def set_ignore_validate(value):
    """Globally disable (or re-enable) abstract method validation.

    The value is handed to the process-wide validation gate when it is
    built, so the cached gate is dropped here and rebuilt on the next
    instance creation.

    Note: this is an escape hatch for trusted contexts. While it is on,
    classes with unimplemented abstract methods can be instantiated.
    Classes that themselves declare abstract methods still can't be.

    Args:
        value: Boolean.

    Example:
    >>> abstractable.config.set_ignore_validate(True)
    >>> abstractable.config.ignore_validate()
    True
    >>> abstractable.config.set_ignore_validate(False)

    Raises:
        ValueError: In case of invalid value.
    """
    global _IGNORE_VALIDATE
    if not isinstance(value, bool):
        raise ValueError(
            "Unknown `ignore_validate` value: "
            f"{value} (of type {type(value)}). Expected a boolean."
        )
    _IGNORE_VALIDATE = value
    global_state.set_global_setting("validation_gate", None)


def _env_flag(value):
    return value.strip().lower() not in _FALSY_ENV_VALUES


# Set abstractable base dir path given ABSTRACTABLE_HOME env variable, if
# applicable. Otherwise ~/.abstractable.
if "ABSTRACTABLE_HOME" in os.environ:
    _abstractable_dir = os.environ.get("ABSTRACTABLE_HOME")
else:
    _abstractable_dir = os.path.join(
        os.path.expanduser("~"), ".abstractable"
    )

# Attempt to read the config file.
_config_path = os.path.expanduser(
    os.path.join(_abstractable_dir, "abstractable.json")
)
if os.path.exists(_config_path):
    try:
        with open(_config_path) as f:
            _config = json.load(f)
    except ValueError:
        _config = {}
    _ignore_validate = _config.get("ignore_validate", ignore_validate())
    assert isinstance(_ignore_validate, bool)
    _IGNORE_VALIDATE = _ignore_validate

# The environment variable wins over the config file.
if "ABSTRACTABLE_IGNORE_VALIDATE" in os.environ:
    _IGNORE_VALIDATE = _env_flag(os.environ["ABSTRACTABLE_IGNORE_VALIDATE"])
