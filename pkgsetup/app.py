import os
import subprocess
import sys

import pkgsetup.ui as ui

from .model import SetupParams
from .setup_files import SetupFilesError, render_setup_files, write_setup_files


PROMPTS = (
    ('name', 'Package name'),
    ('user', 'User qualifier'),
    ('version', 'Version'),
    ('desc', 'Short description'),
    ('url', 'Project URL'),
    ('author', 'Author'),
    ('email', 'E-mail'),
    ('vm', 'Python interpreter'),
    ('cmd', 'Generation command'),
)


def git_config(key):
    try:
        return subprocess.check_output(
            ['git', 'config', key], stderr=subprocess.DEVNULL,
        ).decode().strip() or None
    except (subprocess.CalledProcessError, FileNotFoundError):
        return None


def https_url(url):
    if url.startswith('git@'):
        url = url.replace(':', '/', 1)
        url = url.replace('git@', 'https://', 1)
    if url.endswith('.git'):
        url = url[:-4]
    return url


class App:
    def __init__(self):
        self.interactive = False

    def default_params(self, odir):
        url = git_config('remote.origin.url')
        return {
            'name': os.path.basename(os.path.abspath(odir)),
            'user': '',
            'version': '0.1.0',
            'author': git_config('user.name') or 'ACME Inc.',
            'email': git_config('user.email') or 'info@acme.inc',
            'desc': '',
            'url': https_url(url) if url else 'http://example.com',
            'cmd': '',
            'vm': sys.executable or 'python3',
        }

    def collect_params(self, odir, **given):
        values = self.default_params(odir)
        unset = [key for key in SetupParams.FIELDS if given.get(key) is None]
        values.update({k: v for k, v in given.items() if v is not None})

        if self.interactive:
            for key, prompt in PROMPTS:
                if key in unset:
                    values[key] = ui.prompt(prompt, default=values[key]) or ''

        params = SetupParams.from_dict(values)
        if not params.has_valid_version:
            ui.warn('Version', ui.value(params.version), 'is not a valid PEP 440 version')
        return params

    def perform_write(self, odir, params, overwrite=True):
        ui.info('Writing packaging files for', ui.bold(str(params)))
        try:
            written = write_setup_files(
                odir, params, overwrite=overwrite,
                on_skip=lambda path: ui.warn(ui.path(path, odir), 'already exists'),
            )
        except SetupFilesError as e:
            ui.error(str(e))
            sys.exit(1)

        for path in written:
            ui.info('wrote', ui.path(path, odir))
        return written

    def perform_show(self, params):
        for name, text in render_setup_files(params):
            ui.section(name, text)
