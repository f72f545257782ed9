import threading

from abstractable.api_export import abstractable_export

# Thread-local: scopes and other per-thread overrides.
GLOBAL_STATE_TRACKER = threading.local()

# Process-wide: settings shared by every thread.
GLOBAL_SETTINGS_TRACKER = {}
_SETTINGS_LOCK = threading.Lock()


def set_global_attribute(name, value):
    setattr(GLOBAL_STATE_TRACKER, name, value)


def get_global_attribute(name, default=None, set_to_default=False):
    attr = getattr(GLOBAL_STATE_TRACKER, name, None)
    if attr is None and default is not None:
        attr = default
        if set_to_default:
            set_global_attribute(name, attr)
    return attr


def set_global_setting(name, value):
    with _SETTINGS_LOCK:
        GLOBAL_SETTINGS_TRACKER[name] = value


def get_global_setting(name, default=None, set_to_default=False):
    with _SETTINGS_LOCK:
        value = GLOBAL_SETTINGS_TRACKER.get(name, None)
        if value is None and default is not None:
            value = default
            if set_to_default:
                GLOBAL_SETTINGS_TRACKER[name] = value
        return value


@abstractable_export("abstractable.utils.clear_session")
def clear_session():
    """Resets all state held by abstractable outside of the registry.

    Drops the cached validation gate, the traceback filtering setting and
    any per-thread scope. Declared abstract methods and validation memos
    belong to their classes and are left untouched.
    """
    global GLOBAL_STATE_TRACKER
    with _SETTINGS_LOCK:
        GLOBAL_SETTINGS_TRACKER.clear()
    GLOBAL_STATE_TRACKER = threading.local()
