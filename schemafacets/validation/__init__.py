# flake8: noqa
from . import mapper
from . import types
from .mapper import *
from .types import *

__all__ = (*mapper.__all__, *types.__all__)
