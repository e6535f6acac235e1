"""
module termdialog.terminal.backends

Contains the definitions of all supported terminal backends
"""
