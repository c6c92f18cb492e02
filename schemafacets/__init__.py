# flake8: noqa
from .__about__ import __version__
from .api import *
from .converters import get_converter, register_converter
from .errors import *
from .routing import *
from .schema import *
from .settings import Settings, configure, get_settings
from .validation import *
