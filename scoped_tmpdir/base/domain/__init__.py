from .exceptions import *  # NOQA
from .filesystem import *  # NOQA
from .provider import *  # NOQA
from .tmpdir_options import *  # NOQA
from .types import *  # NOQA
from .value_object import *  # NOQA
