from shortlinker.dao.base.short_link_base_dao import ShortLinkBaseDAO, WriteOutcome, WriteStatus


__all__ = [
    'ShortLinkBaseDAO',
    'WriteOutcome',
    'WriteStatus',
]
