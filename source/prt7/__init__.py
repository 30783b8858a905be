"""PRT-7 protocol decoder: rotating substitution rotor driven by LOAD/MAP frames."""
from .frames import Load, MalformedFrameError, Map, interpret, parse_frame
from .payload import Payload
from .rotor import Rotor
from .session import DecoderSession

__version__ = "1.0.0"
