import logging

from .prefixes import *
from .errors import *
from .encoding import encode, split
from .decoding import decode
from .quantity import *
from .arrays import *

logging.getLogger(__name__).addHandler(logging.NullHandler())
