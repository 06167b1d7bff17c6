from __future__ import annotations
import os
from pathlib import Path

from kei.errors import KeiConfigError


# Resolve installation dir (kei package directory)
_KEI_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE = _KEI_DIR / 'prelude' / 'prelude.kei'
_DEFAULT_INT_BITS = 64
_DEFAULT_PROMPT = 'kei> '
_DEFAULT_LOG_LEVEL = 'WARNING'


def get_int_bits() -> int:
    raw = os.environ.get('KEI_INT_BITS')
    if not raw:
        return _DEFAULT_INT_BITS
    try:
        bits = int(raw)
    except ValueError:
        raise KeiConfigError(f"KEI_INT_BITS must be an integer, got {raw!r}") from None
    if not 8 <= bits <= 4096:
        raise KeiConfigError(f"KEI_INT_BITS must be between 8 and 4096, got {bits}")
    return bits


def int_bounds() -> tuple[int, int]:
    """Inclusive (min, max) range of a Number."""
    bits = get_int_bits()
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def get_prelude_path() -> Path:
    raw = os.environ.get('KEI_PRELUDE_PATH')
    return Path(raw.strip()) if raw and raw.strip() else _DEFAULT_PRELUDE


def get_prompt() -> str:
    return os.environ.get('KEI_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    return os.environ.get('KEI_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
