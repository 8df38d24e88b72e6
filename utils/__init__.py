"""
Grid helpers shared by the decomposition package.
"""
