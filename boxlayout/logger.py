"""Logging setup.

The rest of the code gets the logger through this module rather than
``logging.getLogger`` to make sure that it is configured.

``LOGGER`` warns about ignored style declarations and box record keys, the
command line also reports failures with it. ``PROGRESS_LOGGER`` announces
the steps of each layout pass.

"""

import logging

LOGGER = logging.getLogger('boxlayout')
if not LOGGER.handlers:  # pragma: no cover
    LOGGER.setLevel(logging.WARNING)
    LOGGER.addHandler(logging.NullHandler())

PROGRESS_LOGGER = logging.getLogger('boxlayout.progress')
