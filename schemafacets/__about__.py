__title__ = "schemafacets"
__package__ = "schemafacets"
__description__ = "Map validation annotations and route constraints onto JSON Schema facets."
__version__ = "0.1.0"
__author__ = "Sean Stewart"
__author_email__ = "sean_stewart@me.com"
__license__ = "MIT"
__copyright__ = "Copyright 2019 Sean Stewart"


__all__ = (
    "__title__",
    "__package__",
    "__description__",
    "__version__",
    "__author__",
    "__author_email__",
    "__license__",
    "__copyright__",
)
