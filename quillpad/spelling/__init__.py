"""Subpackage set aside for spell checking; it holds no modules yet."""