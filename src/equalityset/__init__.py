from ._entry import PROBE_ERRORS
from ._equivalence import Equivalence, InvalidEquivalenceError
from ._set import EquivalenceSet
