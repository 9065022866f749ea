import os

import pkgsetup.templates as templates

from .makefile import cmd_str_to_makefile


class SetupFilesError(OSError):
    def __init__(self, path, error):
        OSError.__init__(self, error.errno, error.strerror, path)
        self.path = path
        self.error = error

    def __str__(self):
        return f'Could not write {self.path}: {self.error.strerror or self.error}'


def render_setup_files(params):
    '''
    Renders the packaging files for ``params`` and returns them as a list
    of ``(filename, text)`` pairs, in the order they are written.
    '''
    vars = params.as_dict()
    vars.update(
        dash_user=params.dash_user,
        python=params.python,
        gencmd=cmd_str_to_makefile(params.cmd),
    )

    return [
        (name, template.format(**vars))
        for name, template in (
            ('setup.py', templates.setup_py),
            ('MANIFEST.in', templates.manifest_in),
            ('LICENSE', templates.bsd_license),
            ('README.md', templates.readme_md),
            ('Makefile', templates.makefile),
        )
    ]


def write_setup_files(odir, params, overwrite=True, on_skip=None):
    '''
    Writes setup.py, MANIFEST.in, LICENSE, README.md and Makefile into
    ``odir``. The first failure raises :class:`SetupFilesError` and leaves
    the files written so far in place.

    With ``overwrite=False`` existing files are kept and passed to
    ``on_skip``. Returns the paths that were written.
    '''
    written = []
    for name, text in render_setup_files(params):
        path = os.path.join(odir, name)
        try:
            with open(path, 'w' if overwrite else 'x', encoding='utf-8', newline='\n') as f:
                f.write(text)
        except FileExistsError:
            if on_skip:
                on_skip(path)
            continue
        except OSError as e:
            raise SetupFilesError(path, e) from e
        written.append(path)
    return written
