import os

from .echo import bold, darkwhite


def path(p, base=None):
    if base:
        rel = os.path.relpath(p, base)
        if not rel.startswith('..'):
            return bold(rel)
    return bold(p)


def value(v):
    if v == '':
        return darkwhite('(empty)')
    return bold(v)
