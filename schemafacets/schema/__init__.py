# flake8: noqa
from . import field
from . import resolver
from .field import *
from .resolver import *

__all__ = (*field.__all__, *resolver.__all__)
