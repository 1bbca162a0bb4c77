import os


def _read_env(name, default):
    value = os.environ.get(name, default)
    if value is None:
        return None
    value = value.strip()
    if value.endswith(';'):
        value = value[:-1].rstrip()
    return value


def parse_bool_env(name, default='0'):
    """Return True when the environment variable equals '1', ignoring trailing semicolons."""
    return _read_env(name, default) == '1'


def parse_int_env(name, default=None):
    """Return the environment variable as an int, or ``default`` when unset or empty."""
    value = _read_env(name, None)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc
