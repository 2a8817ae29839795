# Error codes / log events for the shorten_url lambda
INVALID_JSON_BODY = 'INVALID_JSON_BODY'
MISSING_URL = 'MISSING_URL'
ALLOCATION_RETRIES_EXHAUSTED = 'ALLOCATION_RETRIES_EXHAUSTED'
DATA_STORE_UNAVAILABLE = 'DATA_STORE_UNAVAILABLE'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
SHORT_LINK_CREATED = 'SHORT_LINK_CREATED'
