"""
Core lowering machinery: the output syntax tree, import bookkeeping and the
IR translator.
"""
