import re

build_subcommand = re.compile(r'^(\s*\S+\s+)build(?=\s|$)')


def cmd_str_to_makefile(cmd):
    '''
    Turns the command line that built a package into the recipe of the
    Makefile ``gen`` target: a ``build`` subcommand becomes ``gen`` and
    ``$`` is escaped for make.
    '''
    cmd = build_subcommand.sub(r'\1gen', cmd, count=1)
    return cmd.replace('$', '$$')
