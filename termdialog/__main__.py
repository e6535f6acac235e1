"""
module termdialog.__main__

Default entrypoint when termdialog is invoked on the console by a user.
Calls the main() function in termdialog.entrypoint
"""

import sys

from .entrypoint import main

sys.exit(main())
