import os

import click

import pkgsetup.ui as ui

from .app import App
from .cli import AliasedGroup

app = App()
CONTEXT_SETTINGS = {'help_option_names': ['-h', '--help']}
ALIASES = {
    'gen': 'write',
}


def param_options(f):
    for name, flag, help in reversed((
        ('name', '--name', 'Package name (default: output folder name)'),
        ('user', '--user', 'User qualifier appended to the package name as -USER'),
        ('version', '--version', 'Package version'),
        ('author', '--author', 'Author (default: git user.name)'),
        ('email', '--email', 'Author e-mail (default: git user.email)'),
        ('desc', '--desc', 'Short description'),
        ('url', '--url', 'Project URL (default: git remote.origin.url)'),
        ('cmd', '--cmd', 'Command that generates the package sources'),
        ('vm', '--vm', 'Python interpreter (default: the current one)'),
    )):
        f = click.option(flag, name, default=None, help=help)(f)
    return click.argument('odir', metavar='<odir>', default='.', type=click.Path(file_okay=False))(f)


@click.group(cls=AliasedGroup, context_settings=CONTEXT_SETTINGS, aliases=ALIASES)
@click.option('--cwd', '-d', default=None, help='Working directory')
@click.option('--interactive/--noninteractive', '-i/-n', default=False, help='Prompt for unset values')
def cli(cwd=None, interactive=False):
    if cwd:
        os.chdir(cwd)
        ui.debug('Working in', os.getcwd())

    app.interactive = interactive


@cli.command('write', help='Write packaging files')
@param_options
@click.option('--keep-existing', '-k', is_flag=True, help='Do not overwrite existing files')
def cmd_write(odir='.', keep_existing=False, **given):
    '''
    Writes setup.py, MANIFEST.in, LICENSE, README.md and Makefile into
    the output folder (alias: gen)

    Example:

     pkgsetup write out/mypkg --version 1.0 --desc "Bindings for mypkg"
    '''
    params = app.collect_params(odir, **given)
    app.perform_write(odir, params, overwrite=not keep_existing)


@cli.command('show', help='Print packaging files')
@param_options
def cmd_show(odir='.', **given):
    '''
    Prints the packaging files that would be written, without writing them
    '''
    params = app.collect_params(odir, **given)
    app.perform_show(params)
