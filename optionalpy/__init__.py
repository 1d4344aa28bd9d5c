from .errors import EmptyValueAccess
from .optional import Optional, Present, Absent, ABSENT, present, absent, from_nullable
from .lifted import lift, lift_unary, lift_binary, lift_compare
from .logic import TRUE, FALSE, and_, or_, not_, all_, any_
from .combinators import sequence, traverse, map2, first_present, collect_present, flatten
from .boundary import lookup, first, getattr_, parse_int, parse_float, attempt
from .config import BoundaryConfig, get_config, configure, using
from .logger import ConsoleLogger
