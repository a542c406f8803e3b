from .os_filesystem import *  # NOQA
from .tmpdir import *  # NOQA
from .tmpdir_provider import *  # NOQA
