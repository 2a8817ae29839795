from shortlinker.utils.config import AllocatorSettings, app_env, app_name, app_prefix, allocator_settings, load_config
from shortlinker.utils.helpers import require_environment, json_response, guarantee_500_response
from shortlinker.utils.shortid import ShortIdGenerator, URL_ALPHABET
from shortlinker.utils.clock import epoch_millis
from shortlinker.utils.logging import initialize_logging


__all__ = [
    'AllocatorSettings',
    'ShortIdGenerator',
    'URL_ALPHABET',
    'epoch_millis',
    'app_env',
    'app_name',
    'app_prefix',
    'allocator_settings',
    'load_config',
    'require_environment',
    'json_response',
    'guarantee_500_response',
    'initialize_logging',
]
