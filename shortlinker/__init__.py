"""Short link id allocation backed by an atomic create-if-absent store."""

__version__ = '0.1.0'
