from shortlinker.allocator.allocator import ShortLinkAllocator


__all__ = ['ShortLinkAllocator']
