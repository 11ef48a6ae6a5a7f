import logging

UNTAGGED_PROVIDER = '-'


class ProviderTagFilter(logging.Filter):
    """Give every record a ``provider`` attribute so the gateway formatter can use it."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, 'provider'):
            record.provider = UNTAGGED_PROVIDER
        return True
