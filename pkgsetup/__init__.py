from .model import SetupParams
from .makefile import cmd_str_to_makefile
from .setup_files import SetupFilesError, render_setup_files, write_setup_files


__all__ = [
    'SetupParams',
    'SetupFilesError',
    'cmd_str_to_makefile',
    'render_setup_files',
    'write_setup_files',
]
