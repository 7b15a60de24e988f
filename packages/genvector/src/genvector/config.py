"""
genvector Configuration
=======================
Provider defaults and formatting. Single source of truth.

Usage:
    from genvector.config import CONFIG
    name = CONFIG['providers']['default']
"""

CONFIG = {

    # =================================================================
    # Provider resolution
    # =================================================================
    'providers': {
        'default': 'floating',          # empty vectors with no explicit provider
        'mixed_integral': 'integer',    # e.g. [1, True], [1, np.int64(2)]
        'mixed_decimal': 'decimal_number',  # e.g. [Decimal('1.5'), 2]
        'mixed_real': 'floating',       # e.g. [1, 2.5]
        'mixed_complex': 'complex_number',  # e.g. [1, 2j]
    },

    # =================================================================
    # str(vector)
    # =================================================================
    'format': {
        'open': '[ ',
        'close': ' ]',
        'separator': ', ',
    },
}


def get(path: str, default=None):
    """
    Get a config value by dot-separated path.

    Usage:
        get('providers.default')  → 'floating'
        get('format.separator')   → ', '
    """
    keys = path.split('.')
    val = CONFIG
    for key in keys:
        if isinstance(val, dict) and key in val:
            val = val[key]
        else:
            return default
    return val
