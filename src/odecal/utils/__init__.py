from .errors import OdecalError, ConfigurationError, ShapeMismatchError
from .logger import LoggerManager
