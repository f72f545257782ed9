def mark_skeleton(method):
    """Marks a function as the placeholder of an abstract method."""
    method._is_abstract_skeleton = True
    return method


def is_skeleton(method):
    """Check if a member is an abstract method placeholder."""
    if isinstance(method, (classmethod, staticmethod)):
        method = method.__func__
    return getattr(method, "_is_abstract_skeleton", False)


def mark_abstract(method):
    """Flags a function defined in a class body as abstract."""
    method._is_abstract_declaration = True
    return method


def is_marked_abstract(method):
    """Check if a function was flagged with `mark_abstract`."""
    return getattr(method, "_is_abstract_declaration", False)


def mark_creation_gate(method):
    """Marks a `__new__` installed to validate instance creation."""
    method._is_creation_gate = True
    return method


def is_creation_gate(method):
    """Check if a member is a `__new__` installed by `mark_creation_gate`."""
    if isinstance(method, (classmethod, staticmethod)):
        method = method.__func__
    return getattr(method, "_is_creation_gate", False)
