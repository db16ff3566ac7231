"""Problem-specific input validators for judgeio."""

from .bastioni import BastioniValidator
from .bus import BusValidator
from .islands import IslandsValidator
