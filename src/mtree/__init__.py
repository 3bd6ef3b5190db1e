"""mtree (mini tree): print a directory as a bounded ASCII tree"""

__version__ = '0.1.0'
