from .provider import SwipeProvider  # noqa F401
from .capture import TouchUpdate, TouchCapture  # noqa F401
