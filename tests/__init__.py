"""
This __init__.py file is kept only in the root tests directory.

It makes pytest treat tests/ as a package, which keeps imports consistent across
environments. Test subdirectories work as namespace packages (PEP 420) and do not
need their own __init__.py files.
"""
