# -*- coding: utf-8 -*-
from ._validate import *
from ._validate import __all__ as validate_all

__all__ = validate_all
