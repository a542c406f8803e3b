from .name_generator import *  # NOQA
