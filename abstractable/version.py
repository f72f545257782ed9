from abstractable.api_export import abstractable_export

# Unique source of truth for the version number.
__version__ = "1.0.0"


@abstractable_export("abstractable.version")
def version():
    return __version__
