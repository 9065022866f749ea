from termcolor import colored

__all__ = [
    'debug',
    'info',
    'warn',
    'error',
    'bold',
    'darkwhite',
    'do_log',
    'prompt',
    'section',
]

styles = {
    'debug': ['debug', 'white'],
    'info': [' info', 'green'],
    'warn': [' warn', 'yellow'],
    'error': ['error', 'red'],
}


def do_log(style, *parts, attrs=['bold']):
    print(
        colored(styles[style][0], styles[style][1], attrs=attrs),
        *parts,
    )


def bold(text):
    return colored(text, attrs=['bold'])


def darkwhite(text):
    return colored(text, 'white', attrs=['dark'])


for style in styles:
    locals()[style] = lambda *parts, style=style: do_log(style, *parts)


def prompt(*parts, default=None, validate=lambda x: x):
    while True:
        default_s = ''
        if default:
            default_s = colored(f'({default})', 'white', attrs=['dark'])

        print(
            colored('  (?)', 'blue', attrs=['bold']),
            *parts,
            default_s + colored(':', 'cyan'),
            end=' ',
            flush=True,
        )

        result = input()

        if not result:
            return default

        try:
            result = validate(result)
        except ValueError as e:
            print('\033[F\033[K', end='')
            do_log('error', str(e))
            continue
        break

    return result


def section(title, body):
    print(colored(f'--- {title}', 'cyan', attrs=['bold']))
    print(body, end='' if body.endswith('\n') else '\n')
