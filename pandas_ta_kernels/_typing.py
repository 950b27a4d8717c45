# -*- coding: utf-8 -*-
from typing import Sequence, Union

import numpy as np
import numpy.typing as npt
from pandas import Series

Array = npt.NDArray[np.floating]
ArrayLike = Union[Array, Series, Sequence[float]]
Int = Union[int, np.integer]
IntFloat = Union[int, float]
