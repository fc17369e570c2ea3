# envsugar/__init__.py
"""
Environment variable access with prefixes, type coercion, defaults and
required-variable validation.
"""

from .errors import *
from .config_types import *
from .environment import *
from .directives import *
from .accessor import *
from .dotenv_loader import *
from .logging_config import *
from .structlog_config import *

__version__ = "1.0.0"
