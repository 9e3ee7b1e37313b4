from .console import Console, HasConsole, StdConsole  # noqa
from .functions import *  # noqa
from .immutable import Immutable  # noqa
from .interpreter import UnhandledEffect, interpret  # noqa
from .io import *  # noqa
from .monad import Monad  # noqa
