"""Schema-driven form data engine."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
