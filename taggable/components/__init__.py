"""
Components package.
"""
