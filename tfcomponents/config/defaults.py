"""
Default settings for tfcomponents.

These are the values used when no user configuration exists.
"""

DEFAULT_SETTINGS = {
    # Terraform binary, looked up on PATH
    "terraform_binary": "terraform",

    # Component discovery stops after visiting this many entries
    "max_files": 1000,

    "logging": {
        "level": "WARNING",
        "file": False,
    },
}
