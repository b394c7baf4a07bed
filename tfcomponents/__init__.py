"""
tfcomponents - run Terraform per component across a directory tree.
"""

__version__ = "0.3.0"
