import os

from packaging.version import InvalidVersion, Version


class SetupParams:
    FIELDS = ('name', 'user', 'version', 'author', 'email', 'desc', 'url', 'cmd', 'vm')

    def __init__(self, name, user='', version='0.1.0', author='', email='', desc='', url='', cmd='', vm='python3'):
        self.name = name
        self.user = user or ''
        self.version = version
        self.author = author
        self.email = email
        self.desc = desc
        self.url = url
        self.cmd = cmd
        self.vm = vm

    @staticmethod
    def from_dict(values):
        return SetupParams(**{k: v for k, v in values.items() if k in SetupParams.FIELDS})

    @property
    def dash_user(self):
        if self.user:
            return '-' + self.user
        return ''

    @property
    def python(self):
        return os.path.basename(self.vm)

    @property
    def has_valid_version(self):
        try:
            Version(self.version)
        except InvalidVersion:
            return False
        return True

    def as_dict(self):
        return {key: getattr(self, key) for key in self.FIELDS}

    def __eq__(self, other):
        return isinstance(other, SetupParams) and self.as_dict() == other.as_dict()

    def __str__(self):
        return f'{self.name}{self.dash_user}@{self.version}'

    def __repr__(self):
        return f'<SetupParams: {self}>'
