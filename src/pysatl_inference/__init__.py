"""
PySATL Inference
================

Probability distributions and statistical inference: discrete and continuous
distribution value types, convolution and joint distributions,
information-theoretic measures, goodness-of-fit testing and parameter
estimation.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .config import *
from .config import __all__ as _config_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .information import *
from .information import __all__ as _information_all
from .stats import *
from .stats import __all__ as _stats_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-inference")
__all__ = [
    "__version__",
    *_config_all,
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_information_all,
    *_stats_all,
    *_types_all,
]

del _config_all
del _distr_all
del _errors_all
del _family_all
del _information_all
del _stats_all
del _types_all
