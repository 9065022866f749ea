from .echo import *  # noqa: F401,F403
from .ansi import strip_ansi
from .files import path, value
