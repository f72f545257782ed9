import keyword


def is_method_name(name):
    """Whether `name` can be used as the name of a method."""
    return (
        isinstance(name, str)
        and name.isidentifier()
        and not keyword.iskeyword(name)
    )


def get_object_name(obj):
    if isinstance(obj, type):  # Classes and mixins.
        return obj.__name__
    elif hasattr(obj, "name"):  # Static namespaces.
        return obj.name
    elif hasattr(obj, "__name__"):  # Function.
        return obj.__name__
    return str(obj)
