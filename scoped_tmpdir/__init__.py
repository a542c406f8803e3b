# -*- coding: utf-8 -*-
# (c) Nelen & Schuurmans

from .base.domain.exceptions import *  # NOQA
from .base.domain.filesystem import Filesystem  # NOQA
from .base.domain.provider import SyncProvider  # NOQA
from .base.domain.tmpdir_options import *  # NOQA
from .base.domain.types import *  # NOQA
from .base.domain.value_object import ValueObject  # NOQA
from .base.infrastructure.os_filesystem import OsFilesystem  # NOQA
from .base.infrastructure.tmpdir import *  # NOQA
from .base.infrastructure.tmpdir_provider import *  # NOQA
from .names import *  # NOQA

# fmt: off
__version__ = '0.0.1.dev0'
# fmt: on
