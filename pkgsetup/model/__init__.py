from .params import SetupParams


__all__ = [
    'SetupParams',
]
